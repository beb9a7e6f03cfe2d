"""
Update the code and configuration of an existing Lambda function.

The code is pushed first, from either a local zip archive or an S3 object,
then the configuration is resubmitted in full: every field the caller did not
override is taken from the configuration deployed before the update. A failed
configuration update does not roll the code update back.
"""

import logging
import mmap
import os
from typing import Dict, Optional, Union

from clients import FunctionServiceClient
from config import PluginConfig
from exceptions import ConfigurationError, ResourceNotFoundError
from merge import merge_fields, resolve
from models import (
    CONFIG_FIELDS,
    FunctionConfigOverrides,
    FunctionUpdateResult,
    RemoteFunctionConfig,
    S3ObjectRef,
)

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class FunctionUpdater:
    """Pushes new code and merged configuration to an existing function."""

    task_name = "update-function"

    def __init__(
        self,
        client: FunctionServiceClient,
        function_name: Optional[str] = None,
        zip_file: Optional[PathLike] = None,
        s3_file: Optional[S3ObjectRef] = None,
        overrides: Optional[FunctionConfigOverrides] = None,
        defaults: Optional[PluginConfig] = None,
    ):
        """
        Set up the function updater.

        Args:
            client: Injected function-management client
            function_name: Function to update (defaults to
                ``defaults.function_name`` when unset)
            zip_file: Local deployment archive
            s3_file: Deployment archive stored in S3
            overrides: Configuration values to change; unset fields keep
                their deployed values
            defaults: Plugin-wide defaults
        """
        self.client = client
        self.function_name = resolve(
            function_name, defaults.function_name if defaults else None
        )
        self.zip_file = zip_file
        self.s3_file = s3_file
        self.overrides = overrides or FunctionConfigOverrides()

    def validate(self) -> None:
        """
        Check inputs before any remote call.

        Raises:
            ConfigurationError: If function_name is missing, if not exactly one
                code source is set, or if the chosen source is unusable
        """
        if self.function_name in (None, ""):
            raise ConfigurationError.missing(["function_name"])

        if (self.zip_file is None) == (self.s3_file is None):
            raise ConfigurationError(
                "exactly one of zip_file or s3_file is required",
                fields=["zip_file", "s3_file"],
            )

        if self.s3_file is not None:
            self.s3_file.validate()
            return

        if not os.path.isfile(self.zip_file):
            raise ConfigurationError(
                f"zip_file does not exist: {self.zip_file}", fields=["zip_file"]
            )
        # mmap cannot map an empty file
        if os.path.getsize(self.zip_file) == 0:
            raise ConfigurationError(
                f"zip_file is empty: {self.zip_file}", fields=["zip_file"]
            )

    def run(self) -> FunctionUpdateResult:
        """
        Update function code, then function configuration.

        Returns:
            FunctionUpdateResult with the ARNs reported by both updates

        Raises:
            ConfigurationError: If inputs are invalid
            ResourceNotFoundError: If the function does not exist
        """
        self.validate()

        lookup = self.client.get_function(self.function_name)
        if not lookup.found:
            logger.warning(lookup.message)
            logger.error(f"Function does not exist... {self.function_name}")
            raise ResourceNotFoundError("function", self.function_name, lookup.message)

        current = lookup.value
        if current is None:
            logger.debug(
                f"No configuration returned for {self.function_name}; using defaults"
            )
            current = RemoteFunctionConfig.default()

        code_response = self._update_code()
        # Configuration updates are rejected while the code update is in progress
        self.client.wait_function_updated(self.function_name)
        config_response = self._update_configuration(current)

        return FunctionUpdateResult(
            function_name=self.function_name,
            code_arn=code_response.get("FunctionArn"),
            configuration_arn=config_response.get("FunctionArn"),
            version=code_response.get("Version"),
        )

    def _update_code(self) -> Dict:
        publish = self.overrides.publish

        if self.zip_file is not None:
            with open(self.zip_file, "rb") as fh, mmap.mmap(
                fh.fileno(), 0, access=mmap.ACCESS_READ
            ) as buf:
                # The mapping itself is the payload; botocore base64-encodes
                # any buffer, so the archive is never copied into bytes here.
                response = self.client.update_function_code(
                    function_name=self.function_name,
                    zip_file=buf,
                    publish=publish,
                )
        else:
            response = self.client.update_function_code(
                function_name=self.function_name,
                s3_bucket=self.s3_file.bucket,
                s3_key=self.s3_file.key,
                s3_object_version=self.s3_file.object_version,
                publish=publish,
            )

        logger.info(f"Update Lambda function requested: {response.get('FunctionArn')}")
        return response

    def _update_configuration(self, current: RemoteFunctionConfig) -> Dict:
        merged = merge_fields(self.overrides, current, CONFIG_FIELDS)
        response = self.client.update_function_configuration(
            function_name=resolve(self.function_name, current.function_name),
            **merged,
        )
        logger.info(
            f"Update Lambda function configuration requested: {response.get('FunctionArn')}"
        )
        return response
