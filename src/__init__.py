"""
AWS Lambda alias and function deploy tasks.
"""

from alias_tasks import AliasCreator, AliasUpdater, AliasUpserter
from clients import FunctionServiceClient, LambdaClient, create_lambda_client
from config import PluginConfig
from exceptions import ConfigurationError, LambdaTaskError, ResourceNotFoundError
from function_updater import FunctionUpdater
from log_utils import setup_logging
from models import (
    AliasSpec,
    FunctionConfigOverrides,
    FunctionUpdateResult,
    LookupResult,
    RemoteAliasConfig,
    RemoteFunctionConfig,
    S3ObjectRef,
    TaskResult,
    VpcConfig,
)

__all__ = [
    "AliasCreator",
    "AliasUpdater",
    "AliasUpserter",
    "FunctionUpdater",
    "FunctionServiceClient",
    "LambdaClient",
    "create_lambda_client",
    "PluginConfig",
    "setup_logging",
    "ConfigurationError",
    "LambdaTaskError",
    "ResourceNotFoundError",
    "AliasSpec",
    "FunctionConfigOverrides",
    "FunctionUpdateResult",
    "LookupResult",
    "RemoteAliasConfig",
    "RemoteFunctionConfig",
    "S3ObjectRef",
    "TaskResult",
    "VpcConfig",
]
