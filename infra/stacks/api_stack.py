"""
API Stack

API Gateway (REST) for the search Lambda function.
"""
from aws_cdk import (
    NestedStack,
    aws_apigateway as apigw,
    aws_lambda as lambda_,
)
from constructs import Construct


class ApiStack(NestedStack):
    """API Gateway スタック。"""

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        search_fn: lambda_.IFunction,
        **kwargs
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # =================================================================
        # REST API
        # =================================================================

        self.api = apigw.RestApi(
            self, 'ImageSearchApi',
            rest_api_name='image-search-api',
            description='Image Label Search REST API (Serverless)',
            deploy_options=apigw.StageOptions(
                stage_name='v1',
                logging_level=apigw.MethodLoggingLevel.INFO,
                metrics_enabled=True,
            ),
            default_cors_preflight_options=apigw.CorsOptions(
                allow_origins=apigw.Cors.ALL_ORIGINS,
                allow_methods=['GET', 'OPTIONS'],
                allow_headers=['Content-Type'],
            ),
        )

        # =================================================================
        # Search Endpoint
        # =================================================================

        # GET /search?keyword=... - Label keyword search
        search_resource = self.api.root.add_resource('search')
        search_resource.add_method(
            'GET',
            apigw.LambdaIntegration(search_fn),
            request_parameters={
                'method.request.querystring.keyword': False,
            },
        )

        self.api_url = self.api.url
