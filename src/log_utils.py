"""
Logging utilities for the Lambda deploy tasks.

Every task reports the ARN it created or updated at INFO, and logs a WARNING
and an ERROR before re-raising a not-found lookup; the console and the log
file both receive those lines. Request-level detail (GetAlias, UpdateAlias,
...) is logged by the client at DEBUG and only shows with --verbose.
"""

import logging
import sys

# Third-party loggers that flood DEBUG output with wire-level detail
QUIET_LOGGERS = ("botocore", "boto3", "urllib3")


def setup_logging(
    verbose: bool = False, log_file: str = "lambda-tasks.log"
) -> logging.Logger:
    """
    Set up console and file logging for a task run.

    Args:
        verbose: Enable verbose (DEBUG) logging of the Lambda API calls
        log_file: Path to log file

    Returns:
        Logger instance
    """
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(log_file),
        ],
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return logging.getLogger(__name__)
