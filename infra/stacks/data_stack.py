"""
Data Stack (Serverless)

DynamoDB (On-Demand), S3
- Labels Table (imageId → labels, timestamp)
- Image Bucket (アップロード画像)
"""
from aws_cdk import (
    NestedStack,
    RemovalPolicy,
    aws_dynamodb as dynamodb,
    aws_s3 as s3,
)
from constructs import Construct


class DataStack(NestedStack):
    """サーバレスデータ層のリソースを管理するスタック。"""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # =================================================================
        # DynamoDB Tables
        # =================================================================

        # imageId は S3 オブジェクトキーと一致する
        self.labels_table = dynamodb.Table(
            self, 'ImageLabels',
            table_name='image-labels',
            partition_key=dynamodb.Attribute(
                name='imageId',
                type=dynamodb.AttributeType.STRING
            ),
            billing_mode=dynamodb.BillingMode.PAY_PER_REQUEST,
            encryption=dynamodb.TableEncryption.AWS_MANAGED,
            removal_policy=RemovalPolicy.DESTROY,
        )

        # =================================================================
        # S3 Bucket
        # =================================================================

        self.image_bucket = s3.Bucket(
            self, 'ImageBucket',
            encryption=s3.BucketEncryption.S3_MANAGED,
            block_public_access=s3.BlockPublicAccess.BLOCK_ALL,
            enforce_ssl=True,
            removal_policy=RemovalPolicy.RETAIN,
        )
