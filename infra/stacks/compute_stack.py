"""
Lambda Stack (Serverless Compute)

Lambda Functions:
- Upload Handler (S3 ObjectCreated → Rekognition → DynamoDB)
- Search Handler (API Gateway → DynamoDB Scan → S3)
"""
from aws_cdk import (
    NestedStack,
    BundlingOptions,
    Duration,
    aws_lambda as lambda_,
    aws_iam as iam,
    aws_dynamodb as dynamodb,
    aws_s3 as s3,
    aws_s3_notifications as s3n,
    aws_logs as logs,
)
from constructs import Construct


class ComputeStack(NestedStack):
    """Lambda ベースのサーバレスコンピュートスタック。"""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        labels_table: dynamodb.Table,
        image_bucket: s3.Bucket,
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # =================================================================
        # Shared Code Asset
        # =================================================================
        # src パッケージと依存ライブラリをまとめてバンドル

        code = lambda_.Code.from_asset(
            '.',
            exclude=['cdk.out', 'infra', 'tests', '.venv', '.git'],
            bundling=BundlingOptions(
                image=lambda_.Runtime.PYTHON_3_12.bundling_image,
                command=[
                    'bash', '-c',
                    'pip install --no-cache-dir . -t /asset-output',
                ],
            ),
        )

        common_environment = {
            'ENVIRONMENT': 'production',
            'DYNAMODB_TABLE_NAME': labels_table.table_name,
            'S3_BUCKET_NAME': image_bucket.bucket_name,
        }

        # =================================================================
        # Upload Handler Lambda (Rekognition)
        # =================================================================

        self.upload_fn = lambda_.Function(
            self, 'UploadFn',
            function_name='image-upload-handler',
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler='src.handlers.upload.handler.lambda_handler',
            code=code,
            memory_size=256,
            timeout=Duration.seconds(60),
            environment=common_environment,
            log_retention=logs.RetentionDays.ONE_WEEK,
        )

        self.upload_fn.add_to_role_policy(
            iam.PolicyStatement(
                actions=['rekognition:DetectLabels'],
                resources=['*'],
            )
        )
        labels_table.grant_write_data(self.upload_fn)
        image_bucket.grant_read(self.upload_fn)

        # S3 ObjectCreated Trigger
        image_bucket.add_event_notification(
            s3.EventType.OBJECT_CREATED,
            s3n.LambdaDestination(self.upload_fn),
        )

        # =================================================================
        # Search Handler Lambda
        # =================================================================

        self.search_fn = lambda_.Function(
            self, 'SearchFn',
            function_name='image-search-handler',
            runtime=lambda_.Runtime.PYTHON_3_12,
            handler='src.handlers.search.handler.lambda_handler',
            code=code,
            memory_size=512,
            timeout=Duration.seconds(30),
            environment=common_environment,
            log_retention=logs.RetentionDays.ONE_WEEK,
        )

        labels_table.grant_read_data(self.search_fn)
        image_bucket.grant_read(self.search_fn)
