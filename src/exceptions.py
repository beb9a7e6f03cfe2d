"""
Exception types raised by the Lambda deploy tasks.

Hierarchy:
    LambdaTaskError (base)
    ├── ConfigurationError - required inputs missing or conflicting
    └── ResourceNotFoundError - alias/function lookup reported not found

Any other remote fault is a botocore ClientError and is left to propagate.
"""

from typing import Iterable, Optional


class LambdaTaskError(Exception):
    """Base exception for all task failures."""


class ConfigurationError(LambdaTaskError):
    """A required field is missing, or mutually exclusive fields conflict."""

    def __init__(self, message: str, fields: Optional[Iterable[str]] = None):
        super().__init__(message)
        self.message = message
        self.fields = list(fields or [])

    @classmethod
    def missing(cls, fields: Iterable[str]) -> "ConfigurationError":
        """Build an error naming every missing required field."""
        fields = list(fields)
        verb = "is" if len(fields) == 1 else "are"
        return cls(f"{', '.join(fields)} {verb} required", fields=fields)


class ResourceNotFoundError(LambdaTaskError):
    """The remote service has no alias/function with the requested identity."""

    def __init__(self, resource_type: str, identifier: str, message: str = ""):
        super().__init__(message or f"{resource_type} not found: {identifier}")
        self.resource_type = resource_type
        self.identifier = identifier
