"""ImageResult Value Object"""
from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any

from .stored_object import StoredObject

DEFAULT_CONTENT_TYPE = "image/jpeg"


@dataclass(frozen=True)
class ImageResult:
    """
    検索結果の画像（値オブジェクト）

    レスポンス生成ごとに作られ、永続化されない。
    """

    image_name: str
    image_data: str
    content_type: str = DEFAULT_CONTENT_TYPE

    @classmethod
    def from_stored_object(cls, stored: StoredObject) -> ImageResult:
        """S3 オブジェクトから Base64 エンコード済みの結果を生成"""
        return cls(
            image_name=stored.key,
            image_data=base64.b64encode(stored.body).decode("ascii"),
            content_type=stored.content_type or DEFAULT_CONTENT_TYPE,
        )

    def to_dict(self) -> dict[str, Any]:
        """レスポンス用の辞書に変換"""
        return {
            "imageName": self.image_name,
            "imageData": self.image_data,
            "contentType": self.content_type,
        }
