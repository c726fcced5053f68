"""S3 Gateway Implementation"""
from __future__ import annotations

from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError
import structlog

from src.application.ports.gateways import IObjectStorageGateway
from src.domain.images import StoredObject

logger = structlog.get_logger()


class S3Gateway(IObjectStorageGateway):
    """
    S3 Gateway

    Amazon S3 を使用したオブジェクト取得。
    """

    def __init__(
        self,
        bucket_name: str,
        region: str = "eu-central-1",
        client: Any = None,
    ):
        self.bucket_name = bucket_name
        self.region = region
        self._client = client or boto3.client("s3", region_name=region)

    async def fetch(self, key: str) -> StoredObject | None:
        """
        オブジェクトを取得

        Args:
            key: S3オブジェクトキー

        Returns:
            StoredObject | None: 取得できなかった場合は None
        """
        log = logger.bind(bucket=self.bucket_name, key=key)
        log.info("fetch_started")

        try:
            response = self._client.get_object(
                Bucket=self.bucket_name,
                Key=key,
            )
            data = response["Body"].read()

        except (ClientError, BotoCoreError) as e:
            log.error("fetch_failed", error=str(e))
            return None

        log.info("fetch_completed", size=len(data))
        return StoredObject(
            key=key,
            body=data,
            content_type=response.get("ContentType"),
        )
