"""Application Ports (Interfaces)"""
from .repositories import ILabelRepository, LabelRepositoryError
from .gateways import (
    ILabelDetectionGateway,
    IObjectStorageGateway,
)

__all__ = [
    "ILabelRepository",
    "LabelRepositoryError",
    "ILabelDetectionGateway",
    "IObjectStorageGateway",
]
