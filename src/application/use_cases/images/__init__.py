"""Image Use Cases"""
from .label_images import (
    LabelImagesInput,
    LabelImagesOutput,
    LabelImagesUseCase,
    RecordOutcome,
    RecordResult,
)
from .search_images import (
    SearchImagesInput,
    SearchImagesOutput,
    SearchImagesUseCase,
)

__all__ = [
    "LabelImagesInput",
    "LabelImagesOutput",
    "LabelImagesUseCase",
    "RecordOutcome",
    "RecordResult",
    "SearchImagesInput",
    "SearchImagesOutput",
    "SearchImagesUseCase",
]
