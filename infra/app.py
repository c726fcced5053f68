#!/usr/bin/env python3
"""
CDK Application Entry Point

Image Label Search - S3 + Rekognition + DynamoDB のサーバレス構成をデプロイ。
"""
import os
import aws_cdk as cdk

from infra.stacks.image_search_stack import ImageSearchStack

app = cdk.App()

# 環境設定
env = cdk.Environment(
    account=os.environ.get('CDK_DEFAULT_ACCOUNT'),
    region=os.environ.get('CDK_DEFAULT_REGION', 'eu-central-1'),
)

ImageSearchStack(
    app,
    'ImageSearchStack',
    env=env,
    description='Image Label Search - Rekognition labels + keyword search',
)

app.synth()
