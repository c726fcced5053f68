"""Repository implementations"""
from src.infrastructure.repositories.dynamodb_label_repository import DynamoDBLabelRepository

__all__ = ["DynamoDBLabelRepository"]
