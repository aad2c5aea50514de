"""
Exception types and error handling helpers.

This module defines the error taxonomy used when talking to the EOS
administration tool, together with the configuration ValidationError and
the logging-then-reraise helpers used by the config and CLI layers.
"""

import logging
import sys
from enum import Enum
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


class ErrorSeverity(Enum):
    """Severity levels for error handling."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


_LOG_LEVELS = {
    ErrorSeverity.DEBUG: logging.DEBUG,
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


class ValidationError(Exception):
    """
    Exception raised when a configuration value fails validation.
    """

    def __init__(self, message: str, field_name: Optional[str] = None,
                 value: Any = None, severity: ErrorSeverity = ErrorSeverity.ERROR):
        super().__init__(message)
        self.field_name = field_name
        self.value = value
        self.severity = severity


class EosError(Exception):
    """Base class for every error raised while querying the EOS instance."""


class IdentityResolutionError(EosError):
    """The OS user to impersonate does not exist. Raised before any spawn."""

    def __init__(self, username: str):
        super().__init__(f"Unknown user: {username}")
        self.username = username


class CommandError(EosError):
    """
    A command run against the EOS instance did not complete successfully.

    Both output buffers are kept so callers can inspect partial output.

    Attributes:
        command: The argv that was executed.
        stdout: Captured standard output (possibly partial).
        stderr: Captured standard error (possibly partial).
        returncode: Exit status, or None when the process was killed by us.
    """

    def __init__(self, message: str, command: Optional[list] = None,
                 stdout: str = "", stderr: str = "",
                 returncode: Optional[int] = None):
        super().__init__(message)
        self.command = list(command or [])
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode


class CommandTimeoutError(CommandError):
    """The deadline expired; the process tree was killed."""


class CommandCancelledError(CommandError):
    """The caller cancelled the call; the process tree was killed."""


class CommandFailedError(CommandError):
    """Non-zero exit other than the recognised not-found code."""


class NotFoundError(CommandError):
    """The tool reported that the target is unavailable (exit code 2)."""


class ProtocolError(EosError):
    """The tool's output could not be decoded or carried an error message."""


def handle_error(
    error: Exception,
    context: str,
    severity: Union[ErrorSeverity, str] = ErrorSeverity.ERROR,
    reraise: bool = True,
    logger: Optional[logging.Logger] = None
) -> None:
    """
    Log ``error`` with its context, then re-raise it unless told otherwise.

    DEBUG and CRITICAL records include the traceback. ``severity`` may be
    given as an ErrorSeverity or its string value.
    """
    effective_logger = logger or globals()["logger"]
    if isinstance(severity, str):
        severity = ErrorSeverity(severity.lower())

    effective_logger.log(
        _LOG_LEVELS[severity],
        f"Error in {context}: {type(error).__name__}: {error}",
        exc_info=severity in (ErrorSeverity.DEBUG, ErrorSeverity.CRITICAL),
    )

    if reraise:
        raise error


def handle_config_error(error: Exception, context: str, **kwargs) -> None:
    """Handle configuration-related errors."""
    handle_error(error, f"config {context}", **kwargs)


def handle_cli_error(error: Exception, context: str, **kwargs) -> None:
    """Log a CLI error and exit the interpreter."""
    exit_code = kwargs.pop('exit_code', 1)
    severity = kwargs.pop('severity', ErrorSeverity.ERROR)
    handle_error(error, f"CLI {context}", severity=severity, reraise=False, **kwargs)
    sys.exit(exit_code)
