"""DynamoDB Label Repository Implementation"""
from __future__ import annotations

from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError
import structlog

from src.application.ports.repositories import ILabelRepository, LabelRepositoryError
from src.domain.images import LabelRecord

logger = structlog.get_logger()


class DynamoDBLabelRepository(ILabelRepository):
    """
    DynamoDB ベースの Label Repository

    imageId をパーティションキーとする単一テーブルでラベルを管理する。
    """

    def __init__(
        self,
        table_name: str,
        region: str = "eu-central-1",
        table: Any = None,
    ):
        self.table_name = table_name
        if table is None:
            dynamodb = boto3.resource("dynamodb", region_name=region)
            table = dynamodb.Table(table_name)
        self._table = table

    async def scan(self) -> list[LabelRecord]:
        """
        テーブルをスキャン

        LastEvaluatedKey は追わず、最初のページのみを返す。
        """
        log = logger.bind(table=self.table_name)
        log.info("scan_started")

        try:
            response = self._table.scan()
        except (ClientError, BotoCoreError) as e:
            log.error("scan_failed", error=str(e))
            raise LabelRepositoryError(f"Error scanning DynamoDB table: {e}") from e

        records = [
            LabelRecord.from_item(item)
            for item in response.get("Items", [])
            if item.get("imageId")
        ]

        if "LastEvaluatedKey" in response:
            log.warning("scan_truncated", returned=len(records))

        log.info("scan_completed", count=len(records))
        return records

    async def save(self, record: LabelRecord) -> None:
        """
        レコードを保存

        PutItem による置換のため、既存ラベルとのマージは行わない。
        """
        log = logger.bind(table=self.table_name, image_id=record.image_id)
        log.info("saving_label_record", label_count=len(record.labels))

        self._table.put_item(Item=record.to_item())

        log.info("label_record_saved")
