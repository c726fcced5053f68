"""Repository Interfaces (Ports)"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.images import LabelRecord


class LabelRepositoryError(Exception):
    """ラベルテーブルへのアクセスエラー"""

    pass


class ILabelRepository(ABC):
    """
    Label Repository Interface

    依存性逆転の原則に従い、アプリケーション層から参照可能な抽象インターフェース。
    具体的な実装（DynamoDB等）はインフラ層で提供する。
    """

    @abstractmethod
    async def scan(self) -> list[LabelRecord]:
        """
        全レコードを取得

        ページネーションは行わない（1ページ分のみ）。
        """
        pass

    @abstractmethod
    async def save(self, record: LabelRecord) -> None:
        """レコードを保存（主キー単位で完全置換）"""
        pass
