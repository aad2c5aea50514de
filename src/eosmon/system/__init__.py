"""
System interaction utilities.

This module provides:

- Command execution against the eos binary with deadline, cancellation and
  exit-code classification
- Resolution of OS identities for ``-r <uid> <gid>`` impersonation
- Process tree termination for timed-out or cancelled commands
"""

from .commands import (
    DEFAULT_COMMAND_TIMEOUT,
    MGM_URL_ENV_VAR,
    NOT_FOUND_EXIT_CODE,
    build_command,
    redact_url,
    render_command,
    run_command,
)
from .identity import identity_args, resolve_identity
from .processes import kill_process_tree

__all__ = [
    "DEFAULT_COMMAND_TIMEOUT",
    "MGM_URL_ENV_VAR",
    "NOT_FOUND_EXIT_CODE",
    "build_command",
    "redact_url",
    "render_command",
    "run_command",
    "identity_args",
    "resolve_identity",
    "kill_process_tree",
]
