"""Image Value Objects"""
from .image_file import SUPPORTED_IMAGE_EXTENSIONS, is_supported_image
from .image_result import DEFAULT_CONTENT_TYPE, ImageResult
from .storage_notification import StorageNotification
from .stored_object import StoredObject

__all__ = [
    "ImageResult",
    "StorageNotification",
    "StoredObject",
    "SUPPORTED_IMAGE_EXTENSIONS",
    "DEFAULT_CONTENT_TYPE",
    "is_supported_image",
]
