"""Image Entities"""
from .label_record import LabelRecord

__all__ = ["LabelRecord"]
