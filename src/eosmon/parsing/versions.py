"""
Parsing of the version report.

The report combines two outputs of the eos tool:

- ``eos version``: line oriented ``KEY=value`` text holding the MGM version
  in ``EOS_SERVER_VERSION``.
- ``eos --json node ls``: a JSON document ``{"errormsg": ..., "result": [...]}``
  where each result describes one FST host with nested ``cfg.stat.sys``
  information (process sizes, thread and socket counts, eos and xrootd
  versions, kernel, uptime).

Unknown keys in the JSON are ignored and missing ones decode to zero values
("" for strings, "0" for counters).
"""

import json
import logging
import re
from typing import Any, Dict, List, Mapping, Tuple

from ..models.records import VersionRecord
from ..validation import ProtocolError
from .monitoring import split_lines, tokenize

logger = logging.getLogger(__name__)

MGM_VERSION_KEY = "EOS_SERVER_VERSION"

# The uptime string is the URL-encoded output of `uptime`, e.g.
# "14:35:06%20up%2012%20days,%20%203:41,%20%200%20users,..."
_UPTIME_DAYS = re.compile(r"up%20(\d+)%20days?,")


def parse_mgm_version(raw: str) -> str:
    """Extract the MGM version from ``eos version`` output.

    Raises:
        ProtocolError: If no line carries ``EOS_SERVER_VERSION``.
    """
    for line in split_lines(raw):
        kv = tokenize(line)
        if MGM_VERSION_KEY in kv:
            return kv[MGM_VERSION_KEY]
    raise ProtocolError("MGM version not found in 'eos version' output")


def split_hostport(hostport: str) -> Tuple[str, str]:
    """Split ``host:port``; a value without a colon has an empty port."""
    host, sep, port = hostport.rpartition(":")
    if not sep:
        return hostport, ""
    return host, port


def parse_uptime(uptime: str) -> str:
    """Return the number of days in an URL-encoded uptime string.

    Falls back to ``"0"`` with a warning when the days marker is missing,
    for instance on hosts that have been up for less than a day.
    """
    match = _UPTIME_DAYS.search(uptime or "")
    if match is None:
        logger.warning(f"Unexpected uptime format, using 0 days: '{uptime}'")
        return "0"
    return match.group(1)


def _reject_constant(name: str) -> Any:
    raise ProtocolError(f"Non-finite number '{name}' in JSON node report")


def decode_node_report(raw: str) -> List[Dict[str, Any]]:
    """Decode the ``--json node ls`` document into its list of host entries.

    Raises:
        ProtocolError: Malformed JSON, a NaN or Infinity constant, an
            unexpected document shape, or a non-empty ``errormsg``.
    """
    try:
        document = json.loads(raw, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise ProtocolError(f"Malformed JSON node report: {e}") from e

    if not isinstance(document, dict):
        raise ProtocolError(f"Expected a JSON object, got {type(document).__name__}")

    error_message = document.get("errormsg") or ""
    if error_message:
        raise ProtocolError(f"eos reported an error: {error_message}")

    result = document.get("result") or []
    if not isinstance(result, list):
        raise ProtocolError(f"'result' must be a list, got {type(result).__name__}")
    return result


def _section(document: Any, key: str) -> Mapping[str, Any]:
    if not isinstance(document, Mapping):
        return {}
    value = document.get(key)
    return value if isinstance(value, Mapping) else {}


def _text(document: Mapping[str, Any], key: str) -> str:
    value = document.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ProtocolError(f"'{key}' must be a string, got {value!r}")
    return value


def _count(document: Mapping[str, Any], key: str) -> str:
    value = document.get(key)
    if value is None:
        return "0"
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ProtocolError(f"'{key}' must be a number, got {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ProtocolError(f"'{key}' must be an integer, got {value!r}")
        value = int(value)
    return str(value)


def project_version(mgm_version: str, node: Mapping[str, Any]) -> VersionRecord:
    """Build the VersionRecord of one host entry of the node report."""
    if not isinstance(node, Mapping):
        raise ProtocolError(f"Node entry must be an object, got {node!r}")

    stat = _section(_section(node, "cfg"), "stat")
    sys_info = _section(stat, "sys")
    eos_info = _section(sys_info, "eos")
    xrootd_info = _section(sys_info, "xrootd")

    hostname, port = split_hostport(_text(node, "hostport"))

    return VersionRecord(
        eos_mgm=mgm_version,
        hostname=hostname,
        port=port,
        geotag=_text(stat, "geotag"),
        vsize=_count(sys_info, "vsize"),
        rss=_count(sys_info, "rss"),
        threads=_count(sys_info, "threads"),
        sockets=_count(sys_info, "sockets"),
        eos_fst=_text(eos_info, "version"),
        xrootd_fst=_text(xrootd_info, "version"),
        kernel=_text(sys_info, "kernel"),
        start=_text(eos_info, "start"),
        uptime=parse_uptime(_text(sys_info, "uptime")),
    )


def parse_versions(mgm_version: str, raw_report: str) -> List[VersionRecord]:
    """Decode the JSON node report and build one record per host, in order."""
    return [project_version(mgm_version, node) for node in decode_node_report(raw_report)]
