"""Rekognition Gateway implementations"""
from src.infrastructure.gateways.rekognition.rekognition_gateway import RekognitionGateway

__all__ = ["RekognitionGateway"]
