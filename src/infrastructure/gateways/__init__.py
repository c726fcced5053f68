"""Gateway implementations"""
from src.infrastructure.gateways.rekognition import RekognitionGateway
from src.infrastructure.gateways.s3 import S3Gateway

__all__ = ["RekognitionGateway", "S3Gateway"]
