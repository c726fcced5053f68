"""Image Domain Module"""
from .entities.label_record import LabelRecord
from .value_objects.image_file import SUPPORTED_IMAGE_EXTENSIONS, is_supported_image
from .value_objects.image_result import DEFAULT_CONTENT_TYPE, ImageResult
from .value_objects.storage_notification import StorageNotification
from .value_objects.stored_object import StoredObject

__all__ = [
    "LabelRecord",
    "ImageResult",
    "StorageNotification",
    "StoredObject",
    "SUPPORTED_IMAGE_EXTENSIONS",
    "DEFAULT_CONTENT_TYPE",
    "is_supported_image",
]
