"""Console entry point for the Lambda deploy tasks CLI."""

from __future__ import annotations

import argparse
import logging
from typing import Dict, List, Optional

from botocore.exceptions import ClientError, WaiterError

from alias_tasks import AliasCreator, AliasUpdater, AliasUpserter
from clients import LambdaClient
from config import PluginConfig
from exceptions import ConfigurationError, LambdaTaskError
from function_updater import FunctionUpdater
from log_utils import setup_logging
from models import FunctionConfigOverrides, S3ObjectRef, VpcConfig

logger = logging.getLogger(__name__)


def _add_alias_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--alias-name", help="Alias name (e.g. prod)")
    parser.add_argument("--function-name", help="Function owning the alias")
    parser.add_argument("--function-version", help="Version the alias points at")
    parser.add_argument("--description", help="Alias description")


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Create, update and migrate AWS Lambda aliases and functions"
    )
    parser.add_argument("--region", help="AWS region")
    parser.add_argument("--profile", help="AWS named profile")
    parser.add_argument(
        "--default-function-name",
        help="Function name used by any task that does not set --function-name",
    )
    parser.add_argument("--max-retries", type=int, default=5)
    parser.add_argument("--request-timeout", type=int, default=60)
    parser.add_argument("--log-file", default="lambda-tasks.log")
    parser.add_argument("--verbose", action="store_true")

    commands = parser.add_subparsers(dest="command", required=True)

    _add_alias_arguments(
        commands.add_parser("create-alias", help="Create a new alias")
    )
    _add_alias_arguments(
        commands.add_parser("update-alias", help="Update an existing alias")
    )
    _add_alias_arguments(
        commands.add_parser(
            "migrate-alias", help="Update an alias, creating it if missing"
        )
    )

    update = commands.add_parser(
        "update-function", help="Update function code and configuration"
    )
    update.add_argument("--function-name", help="Function to update")
    update.add_argument("--zip-file", help="Local deployment archive")
    update.add_argument("--s3-bucket", help="S3 bucket of the deployment archive")
    update.add_argument("--s3-key", help="S3 key of the deployment archive")
    update.add_argument("--s3-object-version", help="S3 object version")
    update.add_argument("--role", help="Execution role ARN")
    update.add_argument("--runtime", help="Runtime identifier (e.g. python3.12)")
    update.add_argument("--handler", help="Handler (e.g. app.handler)")
    update.add_argument("--description", help="Function description")
    update.add_argument("--timeout", type=int, help="Function timeout in seconds")
    update.add_argument("--memory-size", type=int, help="Memory in MB")
    update.add_argument(
        "--subnet-id", action="append", dest="subnet_ids", metavar="SUBNET_ID"
    )
    update.add_argument(
        "--security-group-id",
        action="append",
        dest="security_group_ids",
        metavar="SG_ID",
    )
    update.add_argument(
        "--env",
        action="append",
        metavar="KEY=VALUE",
        help="Environment variable; may be repeated",
    )
    update.add_argument(
        "--publish",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Publish a new version with the code update",
    )

    return parser


def parse_env(values: Optional[List[str]]) -> Optional[Dict[str, str]]:
    """
    Parse repeated KEY=VALUE options into a mapping.

    Returns:
        Mapping of variables, or None when no --env option was given

    Raises:
        ConfigurationError: On a malformed entry or a duplicate key
    """
    if values is None:
        return None

    env: Dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise ConfigurationError(f"invalid --env entry: {item!r}", fields=["env"])
        if key in env:
            raise ConfigurationError(
                f"duplicate environment variable: {key}", fields=["env"]
            )
        env[key] = value
    return env


def build_task(args: argparse.Namespace, client, config: PluginConfig):
    """Instantiate the task selected on the command line."""
    if args.command in ("create-alias", "update-alias", "migrate-alias"):
        task_class = {
            "create-alias": AliasCreator,
            "update-alias": AliasUpdater,
            "migrate-alias": AliasUpserter,
        }[args.command]
        return task_class(
            client,
            alias_name=args.alias_name,
            function_name=args.function_name,
            function_version=args.function_version,
            description=args.description,
            defaults=config,
        )

    s3_file = None
    if args.s3_bucket or args.s3_key or args.s3_object_version:
        s3_file = S3ObjectRef(
            bucket=args.s3_bucket,
            key=args.s3_key,
            object_version=args.s3_object_version,
        )

    vpc_config = None
    if args.subnet_ids or args.security_group_ids:
        vpc_config = VpcConfig(
            subnet_ids=args.subnet_ids or [],
            security_group_ids=args.security_group_ids or [],
        )

    overrides = FunctionConfigOverrides(
        role=args.role,
        runtime=args.runtime,
        handler=args.handler,
        description=args.description,
        timeout=args.timeout,
        memory_size=args.memory_size,
        vpc_config=vpc_config,
        environment=parse_env(args.env),
        publish=args.publish,
    )
    return FunctionUpdater(
        client,
        function_name=args.function_name,
        zip_file=args.zip_file,
        s3_file=s3_file,
        overrides=overrides,
        defaults=config,
    )


def main(argv: List[str] | None = None) -> int:
    """CLI main for console_scripts entry point."""
    parser = build_parser()
    args = parser.parse_args(args=argv)

    config = PluginConfig.from_args(args)
    setup_logging(verbose=config.verbose, log_file=config.log_file)

    try:
        task = build_task(args, LambdaClient.from_config(config), config)
        task.run()
    except (LambdaTaskError, ClientError, WaiterError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    return 0
