"""S3 Gateway implementations"""
from src.infrastructure.gateways.s3.s3_gateway import S3Gateway

__all__ = ["S3Gateway"]
