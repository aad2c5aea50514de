"""
Command execution against the EOS administration tool.

This module runs the eos binary with a controlled environment and a bounded
lifetime, captures stdout and stderr separately and maps abnormal exits onto
the error taxonomy in ``eosmon.validation``.
"""

import logging
import shlex
import subprocess
import threading
import time
from typing import List, Optional, Sequence, Tuple
from urllib.parse import urlsplit

from ..validation import (
    CommandCancelledError,
    CommandFailedError,
    CommandTimeoutError,
    NotFoundError,
)
from .processes import kill_process_tree

logger = logging.getLogger(__name__)

# The only variable present in the child's environment.
MGM_URL_ENV_VAR = "EOS_MGM_URL"

# Exit status used by the eos tool when the requested target does not exist.
NOT_FOUND_EXIT_CODE = 2

DEFAULT_COMMAND_TIMEOUT = 10.0

# Granularity at which a cancellation request is noticed.
CANCEL_POLL_INTERVAL = 0.1

# Seconds allowed for pipes to drain once the process tree has been killed.
KILL_GRACE_PERIOD = 2.0


def build_command(
    binary: str, args: Sequence[str], identity: Sequence[str] = ()
) -> List[str]:
    """Assemble an eos argv.

    Args:
        binary: Path to the eos binary.
        args: Subcommand and its flags, e.g. ``["node", "ls", "-m"]``.
        identity: Leading impersonation arguments (``["-r", uid, gid]``).

    Examples:
        >>> build_command("/usr/bin/eos", ["fs", "ls", "-m"], ["-r", "0", "0"])
        ['/usr/bin/eos', '-r', '0', '0', 'fs', 'ls', '-m']
    """
    return [binary, *identity, *args]


def redact_url(url: str) -> str:
    """Strip any user information from ``url`` so it can be logged."""
    parts = urlsplit(url)
    if "@" not in parts.netloc:
        return url
    host = parts.netloc.rsplit("@", 1)[1]
    return parts._replace(netloc=f"***@{host}").geturl()


def render_command(argv: Sequence[str], mgm_url: str) -> str:
    """Render the command line as it is executed, for logging."""
    return f"{MGM_URL_ENV_VAR}={redact_url(mgm_url)} {shlex.join(argv)}"


def _as_text(data) -> str:
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data


def _kill_and_collect(process: subprocess.Popen) -> Tuple[str, str]:
    """Kill the process tree and return whatever output was produced."""
    kill_process_tree(process.pid, "eos")
    try:
        stdout, stderr = process.communicate(timeout=KILL_GRACE_PERIOD)
    except subprocess.TimeoutExpired as e:
        # A descendant outside the tree still holds the pipes.
        logger.warning(f"Output pipes of PID {process.pid} still open after kill")
        stdout, stderr = _as_text(e.stdout), _as_text(e.stderr)
        for pipe in (process.stdout, process.stderr):
            if pipe is not None:
                pipe.close()
        process.wait()
    return _as_text(stdout), _as_text(stderr)


def run_command(
    argv: Sequence[str],
    mgm_url: str,
    timeout: float = DEFAULT_COMMAND_TIMEOUT,
    cancel_event: Optional[threading.Event] = None,
    command_logger: Optional[logging.Logger] = None,
) -> Tuple[str, str]:
    """Execute an eos command and capture its output.

    The child gets an environment holding only ``EOS_MGM_URL``. It runs in
    its own session so that the whole tree can be killed when ``timeout``
    expires or ``cancel_event`` is set.

    Args:
        argv: Full command, binary first.
        mgm_url: Cluster endpoint exported as ``EOS_MGM_URL``.
        timeout: Deadline in seconds.
        cancel_event: Optional event; setting it aborts the call.
        command_logger: When given, the rendered command line is logged to it.

    Returns:
        Tuple of (stdout, stderr).

    Raises:
        CommandTimeoutError: The deadline expired.
        CommandCancelledError: ``cancel_event`` was set.
        NotFoundError: The command exited with code 2.
        CommandFailedError: Any other non-zero exit, or the binary could not
            be started (return code -1).
    """
    argv = list(argv)
    if command_logger is not None:
        command_logger.info(f"eosclient cmd: {render_command(argv, mgm_url)}")

    try:
        process = subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            env={MGM_URL_ENV_VAR: mgm_url},
            text=True,
            encoding="utf-8",
            errors="replace",
            start_new_session=True,
        )
    except OSError as e:
        logger.error(f"Cannot execute {argv[0]}: {type(e).__name__}: {e}")
        raise CommandFailedError(
            f"Cannot execute {argv[0]}: {e}",
            command=argv,
            stderr=str(e),
            returncode=-1,
        ) from e

    deadline = time.monotonic() + timeout
    while True:
        if cancel_event is not None and cancel_event.is_set():
            stdout, stderr = _kill_and_collect(process)
            logger.warning(f"Command cancelled: {shlex.join(argv)}")
            raise CommandCancelledError(
                f"Command cancelled: {shlex.join(argv)}",
                command=argv,
                stdout=stdout,
                stderr=stderr,
            )

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            stdout, stderr = _kill_and_collect(process)
            logger.warning(f"Command timed out after {timeout}s: {shlex.join(argv)}")
            raise CommandTimeoutError(
                f"Command timed out after {timeout}s: {shlex.join(argv)}",
                command=argv,
                stdout=stdout,
                stderr=stderr,
            )

        wait = remaining if cancel_event is None else min(remaining, CANCEL_POLL_INTERVAL)
        try:
            stdout, stderr = process.communicate(timeout=wait)
            break
        except subprocess.TimeoutExpired:
            continue

    returncode = process.returncode
    if returncode == 0:
        return stdout, stderr

    if returncode == NOT_FOUND_EXIT_CODE:
        raise NotFoundError(
            f"{shlex.join(argv)}: target not found",
            command=argv,
            stdout=stdout,
            stderr=stderr,
            returncode=returncode,
        )

    raise CommandFailedError(
        f"{shlex.join(argv)} exited with code {returncode}: {stderr.strip()}",
        command=argv,
        stdout=stdout,
        stderr=stderr,
        returncode=returncode,
    )
