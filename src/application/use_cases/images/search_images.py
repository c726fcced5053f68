"""Search Images Use Case"""
from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from src.application.ports.gateways import IObjectStorageGateway
from src.application.ports.repositories import ILabelRepository
from src.domain.images import ImageResult

logger = structlog.get_logger()


@dataclass
class SearchImagesInput:
    """検索入力DTO"""

    keyword: str


@dataclass
class SearchImagesOutput:
    """検索出力DTO"""

    matched_ids: list[str] = field(default_factory=list)
    images: list[ImageResult] = field(default_factory=list)

    @property
    def missing_ids(self) -> list[str]:
        """マッチしたが取得できなかった画像"""
        found = {image.image_name for image in self.images}
        return [image_id for image_id in self.matched_ids if image_id not in found]


class SearchImagesUseCase:
    """
    ラベル検索 ユースケース

    1. ラベルテーブルを1回スキャン
    2. ラベルにキーワードを含む（大文字小文字無視）レコードを抽出
    3. 該当画像を S3 から取得し Base64 化

    取得できなかった画像は結果から除外し、検索自体は失敗させない。
    結果はスキャンで見つかった順に並ぶ。
    """

    def __init__(
        self,
        label_repository: ILabelRepository,
        storage_gateway: IObjectStorageGateway,
    ):
        self._label_repo = label_repository
        self._storage = storage_gateway

    async def execute(self, input_data: SearchImagesInput) -> SearchImagesOutput:
        """ユースケースを実行"""
        query = input_data.keyword.lower()
        log = logger.bind(query=query)
        log.info("search_images_started")

        records = await self._label_repo.scan()
        matched_ids = [record.image_id for record in records if record.matches(query)]

        if not matched_ids:
            log.info("no_matching_images", scanned=len(records))
            return SearchImagesOutput()

        log.info("matching_images_found", count=len(matched_ids))

        images: list[ImageResult] = []
        for image_id in matched_ids:
            stored = await self._storage.fetch(image_id)
            if stored is None:
                log.warning("image_dropped", image_id=image_id)
                continue
            images.append(ImageResult.from_stored_object(stored))

        log.info("search_images_completed", returned=len(images))
        return SearchImagesOutput(matched_ids=matched_ids, images=images)
