"""Rekognition Gateway Implementation"""
from __future__ import annotations

from typing import Any

import boto3
import structlog

from src.application.ports.gateways import ILabelDetectionGateway

logger = structlog.get_logger()


class RekognitionGateway(ILabelDetectionGateway):
    """
    Rekognition Gateway

    Amazon Rekognition DetectLabels で S3 上の画像からラベルを検出する。
    """

    def __init__(
        self,
        region: str = "eu-central-1",
        max_labels: int | None = None,
        min_confidence: float | None = None,
        client: Any = None,
    ):
        self.region = region
        self.max_labels = max_labels
        self.min_confidence = min_confidence
        self._client = client or boto3.client("rekognition", region_name=region)

    async def detect_labels(self, bucket: str, key: str) -> list[str]:
        """
        ラベルを検出

        Args:
            bucket: 画像の S3 バケット
            key: 画像の S3 オブジェクトキー

        Returns:
            list[str]: ラベル名（検出サービスが返した順序のまま）
        """
        log = logger.bind(bucket=bucket, key=key)
        log.info("detect_labels_started")

        params: dict[str, Any] = {
            "Image": {"S3Object": {"Bucket": bucket, "Name": key}},
        }
        if self.max_labels is not None:
            params["MaxLabels"] = self.max_labels
        if self.min_confidence is not None:
            params["MinConfidence"] = self.min_confidence

        response = self._client.detect_labels(**params)
        labels = [label["Name"] for label in response.get("Labels", [])]

        log.info("detect_labels_completed", label_count=len(labels))
        return labels
