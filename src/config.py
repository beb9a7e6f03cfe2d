"""
Configuration management for the Lambda deploy tasks.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class PluginConfig:
    """Plugin-wide settings and defaults shared by every task."""

    region: Optional[str] = None
    profile: Optional[str] = None
    function_name: Optional[str] = None
    max_retries: int = 5
    timeout_s: int = 60
    verbose: bool = False
    log_file: str = "lambda-tasks.log"

    @classmethod
    def from_args(cls, args) -> "PluginConfig":
        """
        Create configuration from command-line arguments.

        Args:
            args: Parsed argparse arguments

        Returns:
            PluginConfig instance
        """
        return cls(
            region=args.region,
            profile=args.profile,
            function_name=args.default_function_name,
            max_retries=args.max_retries,
            timeout_s=args.request_timeout,
            verbose=args.verbose,
            log_file=args.log_file,
        )
