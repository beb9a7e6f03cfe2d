"""
AWS Lambda client used by the deploy tasks.

Tasks depend only on the FunctionServiceClient protocol. LambdaClient adapts a
boto3 ``lambda`` client to it; authentication, retries and timeouts are left
to boto3/botocore.
"""

import logging
from typing import Any, Dict, Optional, Protocol

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from models import LookupResult, RemoteAliasConfig, RemoteFunctionConfig, VpcConfig

logger = logging.getLogger(__name__)

NOT_FOUND_CODE = "ResourceNotFoundException"


class FunctionServiceClient(Protocol):
    """Operations the tasks need from the function-management API."""

    def create_alias(
        self,
        function_name: str,
        name: str,
        function_version: str,
        description: Optional[str] = None,
    ) -> Dict: ...

    def get_alias(
        self, function_name: str, name: str
    ) -> LookupResult[RemoteAliasConfig]: ...

    def update_alias(
        self,
        function_name: str,
        name: str,
        function_version: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Dict: ...

    def get_function(
        self, function_name: str
    ) -> LookupResult[Optional[RemoteFunctionConfig]]: ...

    def update_function_code(
        self,
        function_name: str,
        zip_file: Any = None,
        s3_bucket: Optional[str] = None,
        s3_key: Optional[str] = None,
        s3_object_version: Optional[str] = None,
        publish: Optional[bool] = None,
    ) -> Dict: ...

    def wait_function_updated(self, function_name: str) -> None: ...

    def update_function_configuration(
        self,
        function_name: str,
        role: Optional[str] = None,
        runtime: Optional[str] = None,
        handler: Optional[str] = None,
        description: Optional[str] = None,
        timeout: Optional[int] = None,
        memory_size: Optional[int] = None,
        vpc_config: Optional[VpcConfig] = None,
        environment: Optional[Dict[str, str]] = None,
    ) -> Dict: ...


def create_lambda_client(
    region: Optional[str] = None,
    profile: Optional[str] = None,
    max_retries: int = 5,
    timeout_s: int = 60,
):
    """
    Create a boto3 Lambda client.

    Args:
        region: AWS region; falls back to the profile/environment default
        profile: Named profile from the shared credentials file
        max_retries: Maximum retry attempts for throttling and transient errors
        timeout_s: Connect and read timeout in seconds

    Returns:
        boto3 Lambda client
    """
    session = boto3.session.Session(profile_name=profile, region_name=region)
    config = Config(
        retries={"max_attempts": max_retries, "mode": "standard"},
        connect_timeout=timeout_s,
        read_timeout=timeout_s,
    )
    return session.client("lambda", config=config)


def _compact(**params) -> Dict[str, Any]:
    """Drop unset parameters; boto3 rejects explicit None values."""
    return {key: value for key, value in params.items() if value is not None}


def _is_not_found(error: ClientError) -> bool:
    return error.response.get("Error", {}).get("Code") == NOT_FOUND_CODE


class LambdaClient:
    """FunctionServiceClient backed by a boto3 Lambda client."""

    def __init__(self, client):
        """
        Wrap an existing boto3 Lambda client.

        Args:
            client: boto3 ``lambda`` client (see create_lambda_client)
        """
        self.client = client

    @classmethod
    def from_config(cls, config) -> "LambdaClient":
        """Build a client from a PluginConfig."""
        return cls(
            create_lambda_client(
                region=config.region,
                profile=config.profile,
                max_retries=config.max_retries,
                timeout_s=config.timeout_s,
            )
        )

    def create_alias(
        self,
        function_name: str,
        name: str,
        function_version: str,
        description: Optional[str] = None,
    ) -> Dict:
        logger.debug(f"CreateAlias {function_name}:{name} -> {function_version}")
        return self.client.create_alias(
            **_compact(
                FunctionName=function_name,
                Name=name,
                FunctionVersion=function_version,
                Description=description,
            )
        )

    def get_alias(self, function_name: str, name: str) -> LookupResult[RemoteAliasConfig]:
        """
        Read an alias.

        Returns:
            LookupResult holding the alias snapshot, or not-found

        Raises:
            ClientError: For any error other than ResourceNotFoundException
        """
        logger.debug(f"GetAlias {function_name}:{name}")
        try:
            data = self.client.get_alias(FunctionName=function_name, Name=name)
        except ClientError as e:
            if _is_not_found(e):
                return LookupResult.not_found(str(e))
            raise
        return LookupResult.of(RemoteAliasConfig.from_response(data))

    def update_alias(
        self,
        function_name: str,
        name: str,
        function_version: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Dict:
        logger.debug(f"UpdateAlias {function_name}:{name} -> {function_version}")
        return self.client.update_alias(
            **_compact(
                FunctionName=function_name,
                Name=name,
                FunctionVersion=function_version,
                Description=description,
            )
        )

    def get_function(
        self, function_name: str
    ) -> LookupResult[Optional[RemoteFunctionConfig]]:
        """
        Read a function's configuration.

        The found value is None when the service returns no Configuration.

        Raises:
            ClientError: For any error other than ResourceNotFoundException
        """
        logger.debug(f"GetFunction {function_name}")
        try:
            data = self.client.get_function(FunctionName=function_name)
        except ClientError as e:
            if _is_not_found(e):
                return LookupResult.not_found(str(e))
            raise
        configuration = data.get("Configuration")
        if configuration is None:
            return LookupResult.of(None)
        return LookupResult.of(RemoteFunctionConfig.from_response(configuration))

    def update_function_code(
        self,
        function_name: str,
        zip_file: Any = None,
        s3_bucket: Optional[str] = None,
        s3_key: Optional[str] = None,
        s3_object_version: Optional[str] = None,
        publish: Optional[bool] = None,
    ) -> Dict:
        logger.debug(f"UpdateFunctionCode {function_name} (publish={publish})")
        return self.client.update_function_code(
            **_compact(
                FunctionName=function_name,
                ZipFile=zip_file,
                S3Bucket=s3_bucket,
                S3Key=s3_key,
                S3ObjectVersion=s3_object_version,
                Publish=publish,
            )
        )

    def wait_function_updated(self, function_name: str) -> None:
        """
        Block until the last update of the function has finished.

        Raises:
            WaiterError: If the update failed or did not finish in time
        """
        logger.debug(f"Waiting for {function_name} update to complete")
        waiter = self.client.get_waiter("function_updated")
        waiter.wait(FunctionName=function_name)

    def update_function_configuration(
        self,
        function_name: str,
        role: Optional[str] = None,
        runtime: Optional[str] = None,
        handler: Optional[str] = None,
        description: Optional[str] = None,
        timeout: Optional[int] = None,
        memory_size: Optional[int] = None,
        vpc_config: Optional[VpcConfig] = None,
        environment: Optional[Dict[str, str]] = None,
    ) -> Dict:
        logger.debug(f"UpdateFunctionConfiguration {function_name}")
        return self.client.update_function_configuration(
            **_compact(
                FunctionName=function_name,
                Role=role,
                Runtime=runtime,
                Handler=handler,
                Description=description,
                Timeout=timeout,
                MemorySize=memory_size,
                VpcConfig=vpc_config.to_request() if vpc_config is not None else None,
                Environment=(
                    {"Variables": dict(environment)} if environment is not None else None
                ),
            )
        )
