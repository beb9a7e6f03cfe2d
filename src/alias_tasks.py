"""
Alias tasks: create, update, and migrate (create-or-update) a Lambda alias.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from clients import FunctionServiceClient
from config import PluginConfig
from exceptions import ConfigurationError, ResourceNotFoundError
from merge import merge_fields, resolve
from models import CREATED, UPDATED, AliasSpec, RemoteAliasConfig, TaskResult

logger = logging.getLogger(__name__)

ALIAS_FIELDS = ("name", "description", "function_version")


class AliasTask(ABC):
    """Shared inputs and remote calls of the alias tasks."""

    task_name = "alias"

    def __init__(
        self,
        client: FunctionServiceClient,
        alias_name: Optional[str] = None,
        function_name: Optional[str] = None,
        function_version: Optional[str] = None,
        description: Optional[str] = None,
        defaults: Optional[PluginConfig] = None,
    ):
        """
        Set up the task.

        Args:
            client: Injected function-management client
            alias_name: Alias to operate on
            function_name: Function owning the alias (defaults to
                ``defaults.function_name`` when unset)
            function_version: Version the alias should point at
            description: Alias description
            defaults: Plugin-wide defaults
        """
        self.client = client
        self.alias_name = alias_name
        self.function_name = resolve(
            function_name, defaults.function_name if defaults else None
        )
        self.function_version = function_version
        self.description = description

    def _require(self, *names: str) -> None:
        missing = [name for name in names if getattr(self, name) in (None, "")]
        if missing:
            raise ConfigurationError.missing(missing)

    def _spec(self) -> AliasSpec:
        return AliasSpec(
            name=self.alias_name,
            function_name=self.function_name,
            function_version=self.function_version,
            description=self.description,
        )

    def _create(self) -> TaskResult:
        if self.function_version in (None, ""):
            raise ConfigurationError.missing(["function_version"])

        response = self.client.create_alias(
            function_name=self.function_name,
            name=self.alias_name,
            function_version=self.function_version,
            description=self.description,
        )
        arn = response.get("AliasArn")
        logger.info(f"Create Lambda alias requested: {arn}")
        return TaskResult(task=self.task_name, outcome=CREATED, arn=arn, response=response)

    def _update(self, current: RemoteAliasConfig, function_name: str) -> TaskResult:
        merged = merge_fields(self._spec(), current, ALIAS_FIELDS)
        response = self.client.update_alias(
            function_name=function_name,
            name=merged["name"],
            function_version=merged["function_version"],
            description=merged["description"],
        )
        arn = response.get("AliasArn")
        logger.info(f"Update Lambda alias requested: {arn}")
        return TaskResult(task=self.task_name, outcome=UPDATED, arn=arn, response=response)

    @abstractmethod
    def run(self) -> TaskResult:
        """Execute the task and report the resulting alias."""


class AliasCreator(AliasTask):
    """Create a new alias pointing at a specific function version."""

    task_name = "create-alias"

    def run(self) -> TaskResult:
        self._require("alias_name", "function_name", "function_version")
        return self._create()


class AliasUpdater(AliasTask):
    """Update an existing alias; fails if it does not exist."""

    task_name = "update-alias"

    def run(self) -> TaskResult:
        """
        Fetch the alias and update it with the configured overrides.

        Returns:
            TaskResult with outcome "updated"

        Raises:
            ConfigurationError: If a required field is missing
            ResourceNotFoundError: If the alias does not exist
        """
        self._require("alias_name", "function_name", "function_version")

        lookup = self.client.get_alias(self.function_name, self.alias_name)
        if not lookup.found:
            logger.warning(lookup.message)
            logger.error(f"Alias does not exist... {self.alias_name}")
            raise ResourceNotFoundError(
                "alias", f"{self.function_name}:{self.alias_name}", lookup.message
            )

        # Known quirk: FunctionName on the update is the function_version
        # input. Kept as-is, see DESIGN.md.
        return self._update(lookup.value, function_name=self.function_version)


class AliasUpserter(AliasTask):
    """Update the alias if it exists, otherwise create it."""

    task_name = "migrate-alias"

    def run(self) -> TaskResult:
        """
        Create or update the alias.

        Returns:
            TaskResult whose outcome is "created" or "updated"
        """
        self._require("alias_name", "function_name")

        lookup = self.client.get_alias(self.function_name, self.alias_name)
        if lookup.found:
            return self._update(lookup.value, function_name=self.function_name)

        logger.warning(lookup.message)
        logger.warning(f"Creating alias... {self.alias_name}")
        return self._create()
