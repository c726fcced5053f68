"""StorageNotification Value Object"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import unquote_plus


@dataclass(frozen=True)
class StorageNotification:
    """
    S3 "ObjectCreated" 通知の1レコード（値オブジェクト）

    S3 通知のキーは URL エンコードされているためデコードして保持する。
    """

    bucket: str
    key: str

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> StorageNotification:
        """S3 イベントレコードから生成"""
        s3 = record["s3"]
        bucket = s3["bucket"]["name"]
        raw_key = s3["object"]["key"]
        if not isinstance(bucket, str) or not isinstance(raw_key, str):
            raise ValueError(f"Invalid S3 record: bucket={bucket!r}, key={raw_key!r}")

        key = unquote_plus(raw_key)
        if not bucket or not key:
            raise ValueError(f"Incomplete S3 record: bucket={bucket!r}, key={key!r}")
        return cls(bucket=bucket, key=key)
