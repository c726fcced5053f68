"""LabelRecord Entity"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any


def _epoch_seconds() -> int:
    return int(time.time())


def _string_labels(value: Any) -> list[str]:
    """String Set (またはその list) 以外の labels 属性はラベル無しとして扱う"""
    if not isinstance(value, (set, frozenset, list)):
        return []
    if not all(isinstance(label, str) for label in value):
        return []
    return sorted(value)


@dataclass
class LabelRecord:
    """
    ラベルレコード（エンティティ）

    画像1枚につき1行。imageId は S3 オブジェクトキーと一致し、
    テーブルの主キーを兼ねる。再アップロード時は丸ごと置き換える。
    """

    image_id: str
    labels: list[str] = field(default_factory=list)
    timestamp: int = field(default_factory=_epoch_seconds)

    @classmethod
    def create(cls, image_id: str, labels: list[str]) -> LabelRecord:
        """検出結果から新しいレコードを作成"""
        return cls(image_id=image_id, labels=list(labels))

    def matches(self, query: str) -> bool:
        """
        ラベルのいずれかがクエリを部分文字列として含むか

        大文字小文字は区別しない（クエリ側・ラベル側の両方）。
        """
        needle = query.lower()
        return any(needle in label.lower() for label in self.labels)

    def to_item(self) -> dict[str, Any]:
        """DynamoDB アイテムに変換

        空の String Set は DynamoDB に保存できないため labels を省略する。
        """
        item: dict[str, Any] = {
            "imageId": self.image_id,
            "timestamp": self.timestamp,
        }
        if self.labels:
            item["labels"] = set(self.labels)
        return item

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> LabelRecord:
        """DynamoDB アイテムから生成"""
        timestamp = item.get("timestamp", 0)
        if isinstance(timestamp, Decimal):
            timestamp = int(timestamp)
        return cls(
            image_id=item["imageId"],
            labels=_string_labels(item.get("labels")),
            timestamp=timestamp,
        )
