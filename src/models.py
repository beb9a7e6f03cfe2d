"""
Data models for the Lambda alias and function deploy tasks.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

from exceptions import ConfigurationError

T = TypeVar("T")

# Runtime assumed when the service returns a function without configuration
DEFAULT_RUNTIME = "nodejs"

# Outcomes reported by the alias tasks
CREATED = "created"
UPDATED = "updated"

# Configuration fields resolved against the deployed function on update
CONFIG_FIELDS = (
    "role",
    "runtime",
    "handler",
    "description",
    "timeout",
    "memory_size",
    "vpc_config",
    "environment",
)


@dataclass
class AliasSpec:
    """Alias identity and target: (function_name, name) -> function_version."""

    name: str
    function_name: str
    function_version: Optional[str] = None
    description: Optional[str] = None


@dataclass
class S3ObjectRef:
    """Deployment package stored in S3."""

    bucket: Optional[str] = None
    key: Optional[str] = None
    object_version: Optional[str] = None

    def validate(self) -> None:
        """Raise ConfigurationError unless bucket and key are both set."""
        missing = [
            f"s3_file.{name}"
            for name, value in (("bucket", self.bucket), ("key", self.key))
            if not value
        ]
        if missing:
            raise ConfigurationError.missing(missing)


@dataclass
class VpcConfig:
    """Network configuration of a function."""

    subnet_ids: List[str] = field(default_factory=list)
    security_group_ids: List[str] = field(default_factory=list)
    ipv6_allowed_for_dual_stack: Optional[bool] = None

    @classmethod
    def from_response(cls, data: Optional[Dict]) -> Optional["VpcConfig"]:
        if data is None:
            return None
        return cls(
            subnet_ids=list(data.get("SubnetIds", [])),
            security_group_ids=list(data.get("SecurityGroupIds", [])),
            ipv6_allowed_for_dual_stack=data.get("Ipv6AllowedForDualStack"),
        )

    def to_request(self) -> Dict[str, Any]:
        request: Dict[str, Any] = {
            "SubnetIds": list(self.subnet_ids),
            "SecurityGroupIds": list(self.security_group_ids),
        }
        if self.ipv6_allowed_for_dual_stack is not None:
            request["Ipv6AllowedForDualStack"] = self.ipv6_allowed_for_dual_stack
        return request


@dataclass
class RemoteAliasConfig:
    """Snapshot of an alias as returned by GetAlias."""

    name: str
    function_version: Optional[str] = None
    description: Optional[str] = None
    alias_arn: Optional[str] = None

    @classmethod
    def from_response(cls, data: Dict) -> "RemoteAliasConfig":
        return cls(
            name=data.get("Name", ""),
            function_version=data.get("FunctionVersion"),
            description=data.get("Description"),
            alias_arn=data.get("AliasArn"),
        )


@dataclass
class RemoteFunctionConfig:
    """Snapshot of a function configuration as returned by GetFunction."""

    function_name: Optional[str] = None
    function_arn: Optional[str] = None
    role: Optional[str] = None
    runtime: Optional[str] = None
    handler: Optional[str] = None
    description: Optional[str] = None
    timeout: Optional[int] = None
    memory_size: Optional[int] = None
    vpc_config: Optional[VpcConfig] = None
    environment: Optional[Dict[str, str]] = None
    version: Optional[str] = None

    @classmethod
    def default(cls) -> "RemoteFunctionConfig":
        """Minimal stand-in used when the service returns no configuration."""
        return cls(runtime=DEFAULT_RUNTIME)

    @classmethod
    def from_response(cls, data: Dict) -> "RemoteFunctionConfig":
        env = data.get("Environment")
        return cls(
            function_name=data.get("FunctionName"),
            function_arn=data.get("FunctionArn"),
            role=data.get("Role"),
            runtime=data.get("Runtime"),
            handler=data.get("Handler"),
            description=data.get("Description"),
            timeout=data.get("Timeout"),
            memory_size=data.get("MemorySize"),
            vpc_config=VpcConfig.from_response(data.get("VpcConfig")),
            environment=dict(env.get("Variables", {})) if env is not None else None,
            version=data.get("Version"),
        )


@dataclass
class FunctionConfigOverrides:
    """Caller-supplied configuration; None means "keep the deployed value"."""

    role: Optional[str] = None
    runtime: Optional[str] = None
    handler: Optional[str] = None
    description: Optional[str] = None
    timeout: Optional[int] = None
    memory_size: Optional[int] = None
    vpc_config: Optional[VpcConfig] = None
    environment: Optional[Dict[str, str]] = None
    publish: Optional[bool] = None


@dataclass
class LookupResult(Generic[T]):
    """Outcome of a remote read: either the snapshot or a not-found message."""

    found: bool
    value: Optional[T] = None
    message: str = ""

    @classmethod
    def of(cls, value: T) -> "LookupResult[T]":
        return cls(found=True, value=value)

    @classmethod
    def not_found(cls, message: str) -> "LookupResult[Any]":
        return cls(found=False, message=message)


@dataclass
class TaskResult:
    """Result of an alias task."""

    task: str
    outcome: str  # "created" or "updated"
    arn: Optional[str] = None
    response: Dict = field(default_factory=dict)


@dataclass
class FunctionUpdateResult:
    """Result of a function code + configuration update."""

    function_name: str
    code_arn: Optional[str] = None
    configuration_arn: Optional[str] = None
    version: Optional[str] = None
