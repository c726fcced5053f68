"""
Lambda Handlers for Image Label Search

サーバレス構成のエントリポイント:
- Upload (S3 ObjectCreated → Rekognition → DynamoDB)
- Search (API Gateway → DynamoDB Scan → S3)
"""
