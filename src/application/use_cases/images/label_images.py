"""Label Images Use Case"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import structlog

from src.application.ports.gateways import ILabelDetectionGateway
from src.application.ports.repositories import ILabelRepository
from src.domain.images import LabelRecord, StorageNotification, is_supported_image

logger = structlog.get_logger()


class RecordOutcome(str, Enum):
    """通知レコードごとの処理結果"""

    LABELED = "labeled"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class RecordResult:
    """レコード処理結果DTO"""

    outcome: RecordOutcome
    key: str | None = None
    labels: list[str] = field(default_factory=list)
    error: str | None = None


@dataclass
class LabelImagesInput:
    """ラベル付け入力DTO（S3 イベントの Records）"""

    records: list[dict[str, Any]]


@dataclass
class LabelImagesOutput:
    """ラベル付け出力DTO"""

    results: list[RecordResult] = field(default_factory=list)

    @property
    def processed_count(self) -> int:
        return len(self.results)

    def count(self, outcome: RecordOutcome) -> int:
        return sum(1 for r in self.results if r.outcome == outcome)


class LabelImagesUseCase:
    """
    画像ラベル付け ユースケース

    通知レコードごとに独立して処理する:
    1. バケット名とキーを取り出す
    2. 画像拡張子以外はスキップ
    3. Rekognition でラベルを検出
    4. LabelRecord を置換保存

    1件の失敗は記録されるだけで、残りのレコードの処理は続行する。
    """

    def __init__(
        self,
        label_detection_gateway: ILabelDetectionGateway,
        label_repository: ILabelRepository,
    ):
        self._detector = label_detection_gateway
        self._label_repo = label_repository

    async def execute(self, input_data: LabelImagesInput) -> LabelImagesOutput:
        """ユースケースを実行"""
        log = logger.bind(record_count=len(input_data.records))
        log.info("label_images_started")

        output = LabelImagesOutput()
        for record in input_data.records:
            output.results.append(await self._process_record(record))

        log.info(
            "label_images_completed",
            labeled=output.count(RecordOutcome.LABELED),
            skipped=output.count(RecordOutcome.SKIPPED),
            failed=output.count(RecordOutcome.FAILED),
        )
        return output

    async def _process_record(self, record: dict[str, Any]) -> RecordResult:
        """1レコードを処理して結果を返す"""
        try:
            notification = StorageNotification.from_record(record)
        except Exception as e:
            logger.error("invalid_record", error=str(e))
            return RecordResult(outcome=RecordOutcome.FAILED, error=str(e))

        log = logger.bind(bucket=notification.bucket, key=notification.key)
        log.info("processing_image")

        if not is_supported_image(notification.key):
            log.info("record_skipped", reason="unsupported_extension")
            return RecordResult(outcome=RecordOutcome.SKIPPED, key=notification.key)

        try:
            labels = await self._detector.detect_labels(
                bucket=notification.bucket,
                key=notification.key,
            )
            log.info("labels_detected", label_count=len(labels))

            await self._label_repo.save(LabelRecord.create(notification.key, labels))

        except Exception as e:
            log.exception("record_failed", error=str(e))
            return RecordResult(
                outcome=RecordOutcome.FAILED,
                key=notification.key,
                error=str(e),
            )

        log.info("labels_stored")
        return RecordResult(
            outcome=RecordOutcome.LABELED,
            key=notification.key,
            labels=labels,
        )
