"""Gateway Interfaces (Ports)"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.images import StoredObject


class IObjectStorageGateway(ABC):
    """
    Object Storage Gateway Interface

    S3 などのオブジェクトストレージからの取得を抽象化する。
    バケットは実装側の設定で固定される。
    """

    @abstractmethod
    async def fetch(self, key: str) -> StoredObject | None:
        """
        オブジェクトを取得

        取得に失敗した場合は例外ではなく None を返す。
        """
        pass


class ILabelDetectionGateway(ABC):
    """
    Label Detection Gateway Interface

    Rekognition などの画像ラベル検出サービスとの通信を抽象化する。
    """

    @abstractmethod
    async def detect_labels(self, bucket: str, key: str) -> list[str]:
        """画像のラベル名一覧を検出（順序・重複は検出サービス依存）"""
        pass
