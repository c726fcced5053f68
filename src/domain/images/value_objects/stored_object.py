"""StoredObject Value Object"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StoredObject:
    """オブジェクトストレージから取得したデータ"""

    key: str
    body: bytes
    content_type: str | None = None
