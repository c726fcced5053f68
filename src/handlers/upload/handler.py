"""
Upload Image Lambda Handler

S3 の ObjectCreated 通知を受け取り、画像ごとにラベルを検出して
DynamoDB のラベルテーブルに保存する。

- 画像拡張子 (jpg, jpeg, png, gif, bmp, webp) 以外はスキップ
- 1レコードの失敗は他のレコードの処理に影響しない
- DYNAMODB_TABLE_NAME 未設定時のみ呼び出し全体を失敗させる
"""
from __future__ import annotations

import asyncio
from typing import Any

import structlog

from src.application.use_cases.images import LabelImagesInput, LabelImagesUseCase
from src.infrastructure.config import ConfigurationError, Settings, get_settings
from src.infrastructure.gateways import RekognitionGateway
from src.infrastructure.logging import (
    bind_invocation_context,
    bind_service_context,
    configure_logging_once,
)
from src.infrastructure.repositories import DynamoDBLabelRepository

logger = structlog.get_logger()


def build_use_case(settings: Settings) -> LabelImagesUseCase:
    """設定から AWS 実装を組み立てる"""
    return LabelImagesUseCase(
        label_detection_gateway=RekognitionGateway(
            region=settings.aws_region,
            max_labels=settings.rekognition_max_labels,
            min_confidence=settings.rekognition_min_confidence,
        ),
        label_repository=DynamoDBLabelRepository(
            table_name=settings.require_table_name(),
            region=settings.aws_region,
        ),
    )


# ウォームコンテナ間でクライアントを再利用
_use_case: LabelImagesUseCase | None = None


def _get_use_case(settings: Settings) -> LabelImagesUseCase:
    global _use_case
    if _use_case is None:
        _use_case = build_use_case(settings)
    return _use_case


def handle_upload_event(
    event: dict | None,
    settings: Settings,
    use_case: LabelImagesUseCase | None = None,
) -> str:
    """
    S3 イベントを処理

    Returns:
        str: 処理件数を示すメッセージ（呼び出し元では解釈されない）

    Raises:
        ConfigurationError: テーブル名が未設定の場合
    """
    records = (event or {}).get("Records") or []
    if not records:
        logger.warning("empty_s3_event")
        return "No records to process"

    try:
        settings.require_table_name()
    except ConfigurationError:
        logger.error("missing_table_name")
        raise

    if use_case is None:
        use_case = _get_use_case(settings)

    output = asyncio.run(use_case.execute(LabelImagesInput(records=records)))
    return f"Successfully processed {output.processed_count} records"


def lambda_handler(event: dict, context: Any) -> str:
    """Lambda エントリポイント"""
    bind_invocation_context(context, handler="upload")
    settings = get_settings()
    configure_logging_once(settings.log_level)
    bind_service_context(settings.service_name, settings.environment)

    logger.info("upload_event_received", record_count=len((event or {}).get("Records") or []))
    return handle_upload_event(event, settings)
