from campus_cv.structuring.base import BaseStructurer
from campus_cv.structuring.factory import StructurerFactory
from campus_cv.structuring.structurer import CVStructurer

__all__ = ["BaseStructurer", "CVStructurer", "StructurerFactory"]
