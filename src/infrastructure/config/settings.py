"""Application Settings"""
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class ConfigurationError(Exception):
    """必須設定が欠けている場合のエラー（起動処理全体を中断する）"""

    pass


class Settings(BaseSettings):
    """
    アプリケーション設定

    12-Factor App の Config 原則に従い、
    すべての設定は環境変数から取得する。
    コンテナ起動時に一度だけ生成し、各ハンドラに渡す。
    """

    # Service
    service_name: str = "image-label-search"
    environment: str = "development"
    log_level: str = "INFO"

    # AWS
    aws_region: str = "eu-central-1"

    # DynamoDB
    dynamodb_table_name: Optional[str] = None

    # S3
    s3_bucket_name: Optional[str] = None

    # Rekognition
    rekognition_max_labels: Optional[int] = None
    rekognition_min_confidence: Optional[float] = None

    class Config:
        env_file = ".env"
        case_sensitive = False

    def require_table_name(self) -> str:
        """テーブル名を取得（未設定ならエラー）"""
        if not self.dynamodb_table_name:
            raise ConfigurationError(
                "Missing required environment variable: DYNAMODB_TABLE_NAME"
            )
        return self.dynamodb_table_name


@lru_cache()
def get_settings() -> Settings:
    """設定のシングルトンインスタンスを取得"""
    return Settings()
