"""DynamoDBLabelRepository Unit Tests"""
import asyncio
from decimal import Decimal

import pytest
from botocore.exceptions import ClientError

from src.application.ports import LabelRepositoryError
from src.application.use_cases.images import SearchImagesInput, SearchImagesUseCase
from src.domain.images import LabelRecord
from src.infrastructure.repositories import DynamoDBLabelRepository


class FakeTable:
    """boto3 Table リソースの代替"""

    def __init__(self, items=None, error=None, last_evaluated_key=None):
        self.items = items or []
        self.error = error
        self.last_evaluated_key = last_evaluated_key
        self.put_calls = []
        self.scan_calls = []

    def scan(self, **kwargs):
        self.scan_calls.append(kwargs)
        if self.error:
            raise self.error
        response = {"Items": list(self.items), "Count": len(self.items)}
        if self.last_evaluated_key:
            response["LastEvaluatedKey"] = self.last_evaluated_key
        return response

    def put_item(self, **kwargs):
        self.put_calls.append(kwargs)
        return {}


def repository_for(table: FakeTable) -> DynamoDBLabelRepository:
    return DynamoDBLabelRepository(table_name="image-labels", table=table)


class TestScan:
    """scan のテスト"""

    def test_scan_returns_records_in_order(self):
        """正常: スキャン順にレコードを返す"""
        table = FakeTable(items=[
            {"imageId": "cat.jpg", "labels": {"Cat", "Animal"}, "timestamp": Decimal("1700000000")},
            {"imageId": "dog.png", "labels": {"Dog"}, "timestamp": Decimal("1700000001")},
        ])

        records = asyncio.run(repository_for(table).scan())

        assert [r.image_id for r in records] == ["cat.jpg", "dog.png"]
        assert sorted(records[0].labels) == ["Animal", "Cat"]
        assert table.scan_calls == [{}]

    def test_rows_without_image_id_are_ignored(self):
        """境界: imageId の無い行は無視する"""
        table = FakeTable(items=[{"labels": {"Cat"}}, {"imageId": "ok.jpg"}])

        records = asyncio.run(repository_for(table).scan())

        assert [r.image_id for r in records] == ["ok.jpg"]

    def test_single_page_only(self):
        """境界: LastEvaluatedKey があっても次ページは読まない"""
        table = FakeTable(
            items=[{"imageId": "first.jpg", "labels": {"A"}}],
            last_evaluated_key={"imageId": "first.jpg"},
        )

        records = asyncio.run(repository_for(table).scan())

        assert len(records) == 1
        assert len(table.scan_calls) == 1

    def test_scan_error_is_wrapped(self):
        """異常: ClientError は LabelRepositoryError に変換する"""
        error = ClientError(
            {"Error": {"Code": "ResourceNotFoundException", "Message": "Requested resource not found"}},
            "Scan",
        )
        table = FakeTable(error=error)

        with pytest.raises(LabelRepositoryError, match="Error scanning DynamoDB table"):
            asyncio.run(repository_for(table).scan())


class TestSave:
    """save のテスト"""

    def test_save_puts_full_item(self):
        """正常: PutItem でアイテム全体を書き込む"""
        table = FakeTable()
        record = LabelRecord(image_id="cat.jpg", labels=["Cat", "Animal"], timestamp=1700000000)

        asyncio.run(repository_for(table).save(record))

        assert table.put_calls == [{
            "Item": {
                "imageId": "cat.jpg",
                "labels": {"Cat", "Animal"},
                "timestamp": 1700000000,
            },
        }]

    def test_save_without_labels(self):
        """境界: ラベルが空なら labels 属性を書かない"""
        table = FakeTable()

        asyncio.run(repository_for(table).save(LabelRecord(image_id="blank.png", labels=[], timestamp=1)))

        assert table.put_calls == [{"Item": {"imageId": "blank.png", "timestamp": 1}}]


class TestScanWithUnexpectedAttributes:
    """labels が String Set でない行のテスト"""

    def test_non_string_labels_do_not_break_search(self, object_storage):
        """異常: Number Set の行があっても検索は 200 相当で続行する"""
        # Arrange
        table = FakeTable(items=[
            {"imageId": "numbers.jpg", "labels": {Decimal("1"), Decimal("2")}},
            {"imageId": "text.jpg", "labels": "Cat"},
            {"imageId": "cat.jpg", "labels": {"Cat", "Animal"}},
        ])
        object_storage.put("cat.jpg", b"cat-bytes")
        object_storage.put("text.jpg", b"text-bytes")
        use_case = SearchImagesUseCase(repository_for(table), object_storage)

        # Act
        output = asyncio.run(use_case.execute(SearchImagesInput(keyword="cat")))

        # Assert
        assert [image.image_name for image in output.images] == ["cat.jpg"]
