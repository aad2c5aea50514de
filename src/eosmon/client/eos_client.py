"""
Client listing the entities of an EOS instance.

EosClient runs one eos command per entity kind and turns its output into
records. It holds only its configuration, so a single instance can be used
from several threads at once.
"""

import logging
import threading
import time
from typing import List, Optional, Sequence, Tuple

from ..models.config import ClientConfig
from ..models.records import (
    FSInfoRecord,
    GroupRecord,
    NamespaceActivityRecord,
    NamespaceRecord,
    NodeRecord,
    SpaceRecord,
    VersionRecord,
)
from ..parsing import (
    parse_filesystems,
    parse_groups,
    parse_mgm_version,
    parse_namespace,
    parse_nodes,
    parse_spaces,
    parse_versions,
)
from ..system import build_command, identity_args, run_command
from ..validation import CommandTimeoutError

logger = logging.getLogger(__name__)

NODE_LS = ("node", "ls", "-m")
SPACE_LS = ("space", "ls", "-m")
GROUP_LS = ("group", "ls", "-m")
FS_LS = ("fs", "ls", "-m")
NS_STAT = ("ns", "stat", "-a", "-m")
NODE_LS_JSON = ("--json", "node", "ls")
VERSION = ("version",)


class EosClient:
    """
    Performs listings against an EOS management node (MGM).

    Requires the eos client to be installed at ``config.binary``.

    Every listing accepts an ``identity``: the OS user whose uid/gid are
    passed to eos via ``-r``. When omitted, ``config.identity`` is used, and
    when that is unset too the command runs without impersonation.
    """

    def __init__(self, config: Optional[ClientConfig] = None):
        self.config = config or ClientConfig()
        logger.info(
            f"Initializing {self.__class__.__name__} with binary: '{self.config.binary}', "
            f"timeout: {self.config.timeout}s"
        )

    def _command_logger(self) -> Optional[logging.Logger]:
        if not self.config.enable_command_logging:
            return None
        return self.config.logger or logging.getLogger("eosmon.system.commands")

    def _execute(
        self,
        args: Sequence[str],
        identity: Optional[str],
        timeout: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> str:
        username = identity if identity is not None else self.config.identity
        argv = build_command(self.config.binary, args, identity_args(username))
        stdout, _ = run_command(
            argv,
            mgm_url=self.config.mgm_url,
            timeout=self.config.timeout if timeout is None else timeout,
            cancel_event=cancel_event,
            command_logger=self._command_logger(),
        )
        return stdout

    def list_nodes(
        self, identity: Optional[str] = None, cancel_event: Optional[threading.Event] = None
    ) -> List[NodeRecord]:
        """List the FST nodes of the instance."""
        return parse_nodes(self._execute(NODE_LS, identity, cancel_event=cancel_event))

    def list_spaces(
        self, identity: Optional[str] = None, cancel_event: Optional[threading.Event] = None
    ) -> List[SpaceRecord]:
        """List the spaces of the instance."""
        return parse_spaces(self._execute(SPACE_LS, identity, cancel_event=cancel_event))

    def list_groups(
        self, identity: Optional[str] = None, cancel_event: Optional[threading.Event] = None
    ) -> List[GroupRecord]:
        """List the scheduling groups of the instance."""
        return parse_groups(self._execute(GROUP_LS, identity, cancel_event=cancel_event))

    def list_filesystems(
        self, identity: Optional[str] = None, cancel_event: Optional[threading.Event] = None
    ) -> List[FSInfoRecord]:
        """List the filesystems of the instance."""
        return parse_filesystems(self._execute(FS_LS, identity, cancel_event=cancel_event))

    def get_mgm_version(
        self,
        identity: Optional[str] = None,
        timeout: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> str:
        """Return the version of the MGM the client talks to."""
        raw = self._execute(VERSION, identity, timeout=timeout, cancel_event=cancel_event)
        return parse_mgm_version(raw)

    def list_versions(
        self, identity: Optional[str] = None, cancel_event: Optional[threading.Event] = None
    ) -> List[VersionRecord]:
        """
        List software versions and process information of every node.

        Runs ``eos version`` and ``eos --json node ls``. Both calls share one
        deadline of ``config.timeout`` seconds; if either fails the listing
        fails.
        """
        deadline = time.monotonic() + self.config.timeout
        mgm_version = self.get_mgm_version(identity, cancel_event=cancel_event)

        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise CommandTimeoutError(
                f"No time left for the node report after {self.config.timeout}s",
                command=build_command(self.config.binary, NODE_LS_JSON),
            )
        raw_report = self._execute(
            NODE_LS_JSON, identity, timeout=remaining, cancel_event=cancel_event
        )
        return parse_versions(mgm_version, raw_report)

    def list_namespace(
        self, identity: Optional[str] = None, cancel_event: Optional[threading.Event] = None
    ) -> Tuple[List[NamespaceRecord], List[NamespaceActivityRecord]]:
        """
        Collect global namespace statistics and per-operation activity.

        Returns:
            Tuple of (statistics records, activity records).
        """
        return parse_namespace(self._execute(NS_STAT, identity, cancel_event=cancel_event))
