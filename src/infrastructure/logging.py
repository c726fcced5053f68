"""Structured Logging"""
from __future__ import annotations

import logging

import structlog


def configure_logging(level: str = "INFO") -> None:
    """
    構造化ログを設定

    12-Factor App の Logs 原則に従い、JSON を標準出力へ書き出す。
    Lambda では標準出力がそのまま CloudWatch Logs に送られる。
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(),
    )


def bind_invocation_context(context: object, **values: object) -> None:
    """Lambda 呼び出し単位のコンテキストをログに紐付ける"""
    structlog.contextvars.clear_contextvars()
    request_id = getattr(context, "aws_request_id", None)
    if request_id:
        values["aws_request_id"] = request_id
    structlog.contextvars.bind_contextvars(**values)


_configured = False


def configure_logging_once(level: str = "INFO") -> None:
    """コンテナごとに一度だけ構造化ログを設定"""
    global _configured
    if not _configured:
        configure_logging(level)
        _configured = True


def bind_service_context(service: str, environment: str) -> None:
    """サービス名と実行環境をログに紐付ける"""
    structlog.contextvars.bind_contextvars(service=service, environment=environment)
