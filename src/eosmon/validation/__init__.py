"""
Validation and error handling for the eosmon package.

This module provides the error taxonomy for EOS queries, configuration
validation and consistent error reporting across the application.
"""

from .exceptions import (
    CommandCancelledError,
    CommandError,
    CommandFailedError,
    CommandTimeoutError,
    EosError,
    ErrorSeverity,
    IdentityResolutionError,
    NotFoundError,
    ProtocolError,
    ValidationError,
    handle_cli_error,
    handle_config_error,
    handle_error,
)

from .validators import (
    validate_enum_choice,
    validate_executable_path,
    validate_mgm_url,
    validate_positive_float,
)

__all__ = [
    # Error taxonomy
    "EosError",
    "IdentityResolutionError",
    "CommandError",
    "CommandTimeoutError",
    "CommandCancelledError",
    "CommandFailedError",
    "NotFoundError",
    "ProtocolError",
    # Error handling
    "ErrorSeverity",
    "ValidationError",
    "handle_error",
    "handle_config_error",
    "handle_cli_error",
    # Validators
    "validate_enum_choice",
    "validate_executable_path",
    "validate_mgm_url",
    "validate_positive_float",
]
