"""Shared test fixtures: in-memory fakes for the application ports"""
from __future__ import annotations

import pytest

from src.application.ports import (
    ILabelDetectionGateway,
    ILabelRepository,
    IObjectStorageGateway,
    LabelRepositoryError,
)
from src.domain.images import LabelRecord, StoredObject
from src.infrastructure.config import Settings


class InMemoryLabelRepository(ILabelRepository):
    """挿入順を保持するラベルテーブル"""

    def __init__(self) -> None:
        self.rows: dict[str, LabelRecord] = {}
        self.scan_count = 0
        self.scan_error: str | None = None

    async def scan(self) -> list[LabelRecord]:
        self.scan_count += 1
        if self.scan_error:
            raise LabelRepositoryError(self.scan_error)
        return list(self.rows.values())

    async def save(self, record: LabelRecord) -> None:
        self.rows[record.image_id] = record

    def add(self, image_id: str, labels: list[str]) -> None:
        self.rows[image_id] = LabelRecord(image_id=image_id, labels=labels, timestamp=1700000000)


class InMemoryObjectStorage(IObjectStorageGateway):
    """キー → (データ, Content-Type) のオブジェクトストア"""

    def __init__(self) -> None:
        self.objects: dict[str, tuple[bytes, str | None]] = {}
        self.fetched: list[str] = []

    async def fetch(self, key: str) -> StoredObject | None:
        self.fetched.append(key)
        if key not in self.objects:
            return None
        body, content_type = self.objects[key]
        return StoredObject(key=key, body=body, content_type=content_type)

    def put(self, key: str, body: bytes, content_type: str | None = "image/jpeg") -> None:
        self.objects[key] = (body, content_type)


class FakeLabelDetector(ILabelDetectionGateway):
    """キーごとに決められたラベルを返す検出サービス"""

    def __init__(self) -> None:
        self.labels_by_key: dict[str, list[str]] = {}
        self.failing_keys: set[str] = set()
        self.calls: list[tuple[str, str]] = []

    async def detect_labels(self, bucket: str, key: str) -> list[str]:
        self.calls.append((bucket, key))
        if key in self.failing_keys:
            raise RuntimeError(f"Rekognition unavailable for {key}")
        return list(self.labels_by_key.get(key, []))


@pytest.fixture
def label_repository() -> InMemoryLabelRepository:
    return InMemoryLabelRepository()


@pytest.fixture
def object_storage() -> InMemoryObjectStorage:
    return InMemoryObjectStorage()


@pytest.fixture
def label_detector() -> FakeLabelDetector:
    return FakeLabelDetector()


@pytest.fixture
def settings() -> Settings:
    return Settings(
        dynamodb_table_name="image-labels",
        s3_bucket_name="image-uploads",
        aws_region="eu-central-1",
    )


@pytest.fixture
def make_s3_record():
    """S3 ObjectCreated イベントのレコードを生成"""

    def _make(key: str, bucket: str = "image-uploads") -> dict:
        return {
            "eventSource": "aws:s3",
            "eventName": "ObjectCreated:Put",
            "s3": {
                "bucket": {"name": bucket},
                "object": {"key": key, "size": 1024},
            },
        }

    return _make
