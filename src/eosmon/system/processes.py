"""
Termination of child process trees.

Used when an eos invocation overruns its deadline or is cancelled: the child
and everything it spawned are killed and reaped so no process is orphaned.
"""

import logging
import os
import signal
import time
from typing import List

import psutil

logger = logging.getLogger(__name__)

# Seconds to wait for killed processes to disappear.
KILL_WAIT_TIMEOUT = 3.0
POLL_INTERVAL = 0.05


def _is_process_alive(process: psutil.Process) -> bool:
    """Safely check if a process is still alive and not a zombie."""
    try:
        if not process.is_running():
            return False
        return process.status() not in (psutil.STATUS_ZOMBIE, psutil.STATUS_DEAD)
    except (psutil.NoSuchProcess, psutil.AccessDenied):
        return False


def _wait_for_termination(processes: List[psutil.Process], timeout: float) -> List[psutil.Process]:
    """Wait until every process is gone or a zombie; return the survivors."""
    deadline = time.monotonic() + timeout
    alive = [p for p in processes if _is_process_alive(p)]
    while alive and time.monotonic() < deadline:
        time.sleep(POLL_INTERVAL)
        alive = [p for p in alive if _is_process_alive(p)]
    return alive


def _get_process_children(parent: psutil.Process) -> List[psutil.Process]:
    """Return all live descendants of ``parent``, tolerating races."""
    try:
        return parent.children(recursive=True)
    except (psutil.NoSuchProcess, psutil.AccessDenied):
        return []


def kill_process_tree(pid: int, name: str = "eos") -> None:
    """
    Kill a process and all of its descendants with SIGKILL.

    Descendants are collected before the parent is killed, since they would
    otherwise be reparented and lost. The process group led by ``pid`` is
    killed as well, which covers children that exited the tree but stayed in
    the group (the child is started in its own session).

    Args:
        pid: PID of the process to kill.
        name: Human readable name for log messages.
    """
    if pid <= 0:
        logger.warning(f"Invalid PID {pid} for {name}, skipping termination")
        return

    try:
        parent = psutil.Process(pid)
    except psutil.NoSuchProcess:
        logger.debug(f"Process {name} (PID: {pid}) already terminated")
        _kill_process_group(pid, name)
        return

    children = _get_process_children(parent)
    processes = [parent] + children
    logger.info(f"Killing {name} (PID: {pid}) and {len(children)} children")

    for process in processes:
        try:
            process.kill()
        except psutil.NoSuchProcess:
            continue
        except psutil.AccessDenied:
            logger.warning(f"Access denied sending SIGKILL to PID {process.pid}")

    _kill_process_group(pid, name)

    # Zombies count as terminated: the direct child is reaped by its Popen
    # owner, orphaned descendants by init.
    for process in _wait_for_termination(children, KILL_WAIT_TIMEOUT):
        logger.error(f"Process PID {process.pid} of {name} survived SIGKILL")


def _kill_process_group(pid: int, name: str) -> None:
    try:
        os.killpg(pid, signal.SIGKILL)
        logger.debug(f"Sent SIGKILL to process group {pid} for {name}")
    except ProcessLookupError:
        pass
    except PermissionError:
        logger.debug(f"No permission to kill process group {pid}")
