"""
Resolution of OS identities used for ``eos -r <uid> <gid>`` impersonation.

The eos tool performs its own privilege mapping from the ids it is given;
nothing here changes the privileges of the current process.
"""

import logging
import pwd
from typing import List, Optional, Tuple

from ..validation import IdentityResolutionError

logger = logging.getLogger(__name__)


def resolve_identity(username: str) -> Tuple[str, str]:
    """Look up the numeric uid and primary gid of ``username``.

    Raises:
        IdentityResolutionError: If the user is unknown to the OS.
    """
    try:
        entry = pwd.getpwnam(username)
    except KeyError:
        logger.error(f"Cannot resolve identity '{username}': no such user")
        raise IdentityResolutionError(username) from None
    return str(entry.pw_uid), str(entry.pw_gid)


def identity_args(username: Optional[str]) -> List[str]:
    """Leading ``-r <uid> <gid>`` arguments for ``username``, or none."""
    if not username:
        return []
    uid, gid = resolve_identity(username)
    return ["-r", uid, gid]
