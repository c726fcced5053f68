"""
Image Label Search Main Stack (Serverless)

Lambda + API Gateway ベースのサーバレスメインスタック。
"""
from aws_cdk import (
    Stack,
    CfnOutput,
)
from constructs import Construct

from infra.stacks.data_stack import DataStack
from infra.stacks.compute_stack import ComputeStack
from infra.stacks.api_stack import ApiStack


class ImageSearchStack(Stack):
    """Image Label Search のメインスタック (Serverless)。"""

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Data Stack (DynamoDB, S3)
        data_stack = DataStack(self, 'Data')

        # Compute Stack (Lambda Functions)
        compute_stack = ComputeStack(
            self, 'Compute',
            labels_table=data_stack.labels_table,
            image_bucket=data_stack.image_bucket,
        )

        # API Stack (API Gateway)
        api_stack = ApiStack(
            self, 'Api',
            search_fn=compute_stack.search_fn,
        )

        # Outputs
        CfnOutput(self, 'ApiEndpoint', value=api_stack.api_url)
        CfnOutput(self, 'ImageBucketName', value=data_stack.image_bucket.bucket_name)
        CfnOutput(self, 'LabelsTableName', value=data_stack.labels_table.table_name)
