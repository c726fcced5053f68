"""Image File Rules"""
from __future__ import annotations

SUPPORTED_IMAGE_EXTENSIONS = frozenset(["jpg", "jpeg", "png", "gif", "bmp", "webp"])


def is_supported_image(key: str) -> bool:
    """キーの拡張子がラベル検出対象の画像形式か判定"""
    _, dot, extension = key.rpartition(".")
    if not dot:
        return False
    return extension.lower() in SUPPORTED_IMAGE_EXTENSIONS
