"""
Search Image Lambda Handler

API Gateway 経由でキーワードを受け取り、ラベルテーブルをスキャンして
ラベルにキーワードを含む画像を S3 から取得し Base64 で返す。

GET /search?keyword=cat
"""
from __future__ import annotations

import asyncio
import json
from typing import Any

import structlog

from src.application.use_cases.images import SearchImagesInput, SearchImagesUseCase
from src.domain.images import ImageResult
from src.infrastructure.config import Settings, get_settings
from src.infrastructure.gateways import S3Gateway
from src.infrastructure.logging import (
    bind_invocation_context,
    bind_service_context,
    configure_logging_once,
)
from src.infrastructure.repositories import DynamoDBLabelRepository

logger = structlog.get_logger()

RESPONSE_HEADERS = {
    'Content-Type': 'application/json',
    'Access-Control-Allow-Origin': '*',
}

FALLBACK_ERROR_BODY = '{"success":false,"error":"Internal server error"}'

MISSING_QUERY_MESSAGE = 'Query parameter is required'


def build_use_case(settings: Settings) -> SearchImagesUseCase:
    """設定から AWS 実装を組み立てる"""
    return SearchImagesUseCase(
        label_repository=DynamoDBLabelRepository(
            table_name=settings.require_table_name(),
            region=settings.aws_region,
        ),
        storage_gateway=S3Gateway(
            bucket_name=settings.s3_bucket_name or '',
            region=settings.aws_region,
        ),
    )


# ウォームコンテナ間でクライアントを再利用
_use_case: SearchImagesUseCase | None = None


def _get_use_case(settings: Settings) -> SearchImagesUseCase:
    global _use_case
    if _use_case is None:
        _use_case = build_use_case(settings)
    return _use_case


def handle_search_request(
    event: dict | None,
    settings: Settings,
    use_case: SearchImagesUseCase | None = None,
) -> dict:
    """
    検索リクエストを処理

    例外は外に出さず、すべてエラーレスポンスに変換する。
    """
    event = event or {}

    try:
        keyword = extract_keyword(event)
        if keyword is None or not keyword.strip():
            logger.info("missing_keyword")
            return error_response(400, MISSING_QUERY_MESSAGE)

        if use_case is None:
            use_case = _get_use_case(settings)

        output = asyncio.run(use_case.execute(SearchImagesInput(keyword=keyword)))

    except Exception as e:
        logger.exception("search_failed", error=str(e))
        return error_response(500, f'Internal server error: {e}')

    if output.missing_ids:
        logger.warning("images_missing_from_bucket", image_ids=output.missing_ids)

    return success_response(output.images)


def extract_keyword(event: dict) -> str | None:
    """クエリパラメータ keyword を取得"""
    params = event.get('queryStringParameters') or {}
    return params.get('keyword')


def success_response(images: list[ImageResult]) -> dict:
    return response(200, {
        'success': True,
        'images': [image.to_dict() for image in images],
    })


def error_response(status_code: int, message: str) -> dict:
    return response(status_code, {
        'success': False,
        'error': message,
    })


def response(status_code: int, body: Any) -> dict:
    """API Gateway レスポンス形式"""
    try:
        payload = json.dumps(body)
    except (TypeError, ValueError) as e:
        logger.error("response_serialization_failed", error=str(e))
        return {
            'statusCode': 500,
            'headers': dict(RESPONSE_HEADERS),
            'body': FALLBACK_ERROR_BODY,
        }

    return {
        'statusCode': status_code,
        'headers': dict(RESPONSE_HEADERS),
        'body': payload,
    }


def lambda_handler(event: dict, context: Any) -> dict:
    """Lambda エントリポイント"""
    bind_invocation_context(context, handler="search")

    try:
        settings = get_settings()
    except Exception as e:
        logger.exception("settings_load_failed", error=str(e))
        return error_response(500, f'Internal server error: {e}')

    configure_logging_once(settings.log_level)
    bind_service_context(settings.service_name, settings.environment)

    logger.info("search_request_received", http_method=(event or {}).get('httpMethod'))
    return handle_search_request(event, settings)
