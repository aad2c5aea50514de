"""
Parsing of ``eos ns stat -a -m`` output.

The command prints one row per (uid, gid) breakdown. Only global rollup rows,
marked ``uid=all gid=all``, are kept. Among those:

- rows with a ``cmd`` key describe the throughput of one namespace operation
  and become NamespaceActivityRecord, unless all four rate windows are zero;
- rows without ``cmd`` and with at most three keys carry one global statistic
  (``uid``, ``gid`` and the value) and become NamespaceRecord.

The three-key rule matches the layout of the upstream rollup rows and has to
be revisited if the tool starts printing several statistics per row.
"""

import logging
from enum import Enum
from typing import Dict, List, Mapping, Optional, Tuple

from ..models.records import NamespaceActivityRecord, NamespaceRecord
from .monitoring import split_lines, tokenize
from .projectors import project

logger = logging.getLogger(__name__)

ROLLUP_MARKER = "all"
IDENTITY_KEYS = ("uid", "gid")
OPERATION_KEY = "cmd"
RATE_KEYS = ("5s", "60s", "300s", "3600s")
MAX_STATISTICS_ROW_KEYS = 3

NAMESPACE_FIELDS: Dict[str, str] = {
    "boot_file_time": "ns.boot.file.time",
    "boot_status": "ns.boot.status",
    "boot_time": "ns.boot.time",
    "cache_container_maxsize": "ns.cache.containers.maxsize",
    "cache_container_occupancy": "ns.cache.containers.occupancy",
    "cache_files_maxsize": "ns.cache.files.maxsize",
    "cache_files_occupancy": "ns.cache.files.occupancy",
    "fds_all": "ns.fds.all",
    "fusex_activeclients": "ns.fusex.activeclients",
    "fusex_caps": "ns.fusex.caps",
    "fusex_clients": "ns.fusex.clients",
    "fusex_lockedclients": "ns.fusex.lockedclients",
    "latency_dirs": "ns.latency.dirs",
    "latency_files": "ns.latency.files",
    "latency_pending_updates": "ns.latency.pending.updates",
    "latencypeak_eosviewmutex_1min": "ns.latencypeak.eosviewmutex.1min",
    "latencypeak_eosviewmutex_2min": "ns.latencypeak.eosviewmutex.2min",
    "latencypeak_eosviewmutex_5min": "ns.latencypeak.eosviewmutex.5min",
    "latencypeak_eosviewmutex_last": "ns.latencypeak.eosviewmutex.last",
    "memory_growth": "ns.memory.growth",
    "memory_resident": "ns.memory.resident",
    "memory_share": "ns.memory.share",
    "memory_virtual": "ns.memory.virtual",
    "stat_threads": "ns.stat.threads",
    "total_directories": "ns.total.directories",
    "total_directories_changelog_avg_entry_size": "ns.total.directories.changelog.avg_entry_size",
    "total_directories_changelog_size": "ns.total.directories.changelog.size",
    "total_files": "ns.total.files",
    "total_files_changelog_avg_entry_size": "ns.total.files.changelog.avg_entry_size",
    "total_files_changelog_size": "ns.total.files.changelog.size",
    "uptime": "ns.uptime",
}

NAMESPACE_ACTIVITY_FIELDS: Dict[str, str] = {
    "user": "uid",
    "gid": "gid",
    "operation": "cmd",
    "total": "total",
    "last_5s": "5s",
    "last_60s": "60s",
    "last_300s": "300s",
    "last_3600s": "3600s",
    "exec_avg": "exec",
    "exec_sigma": "execsig",
    "exec_99": "exec99",
    "exec_max": "execmax",
}


class RowKind(Enum):
    """Classification of one ``ns stat`` row."""
    STATISTICS = "statistics"
    ACTIVITY = "activity"
    IDLE_ACTIVITY = "idle_activity"
    IGNORED = "ignored"


def is_global_rollup(kv: Mapping[str, str]) -> bool:
    """True for rows aggregated over all users and groups."""
    return all(kv.get(key) == ROLLUP_MARKER for key in IDENTITY_KEYS)


def _is_zero_rate(value: Optional[str]) -> bool:
    try:
        return float(value) == 0.0
    except (TypeError, ValueError):
        return False


def classify_row(kv: Mapping[str, str]) -> RowKind:
    """Decide what, if anything, a ``ns stat`` row turns into."""
    if not is_global_rollup(kv):
        return RowKind.IGNORED

    if OPERATION_KEY in kv:
        if all(_is_zero_rate(kv.get(key)) for key in RATE_KEYS):
            return RowKind.IDLE_ACTIVITY
        return RowKind.ACTIVITY

    statistic_keys = [key for key in kv if key not in IDENTITY_KEYS]
    if len(kv) <= MAX_STATISTICS_ROW_KEYS and statistic_keys:
        return RowKind.STATISTICS
    return RowKind.IGNORED


def _warn_on_non_numeric(kv: Mapping[str, str]) -> None:
    for key, value in kv.items():
        if key in IDENTITY_KEYS:
            continue
        try:
            float(value)
        except ValueError:
            logger.warning(f"Value of '{key}': '{value}' is not floatable")


def project_namespace(kv: Mapping[str, str]) -> NamespaceRecord:
    return project(NamespaceRecord, NAMESPACE_FIELDS, kv)


def project_namespace_activity(kv: Mapping[str, str]) -> NamespaceActivityRecord:
    return project(NamespaceActivityRecord, NAMESPACE_ACTIVITY_FIELDS, kv)


def parse_namespace(raw: str) -> Tuple[List[NamespaceRecord], List[NamespaceActivityRecord]]:
    """
    Parse ``ns stat -a -m`` output.

    Each line yields at most one record. Non-numeric statistic values are
    logged as warnings and kept as reported.

    Returns:
        Tuple of (statistics records, activity records), each in line order.
    """
    stats: List[NamespaceRecord] = []
    activity: List[NamespaceActivityRecord] = []

    for line in split_lines(raw):
        kv = tokenize(line)
        kind = classify_row(kv)
        if kind is RowKind.ACTIVITY:
            activity.append(project_namespace_activity(kv))
        elif kind is RowKind.STATISTICS:
            _warn_on_non_numeric(kv)
            stats.append(project_namespace(kv))

    logger.debug(f"Parsed {len(stats)} namespace statistics and {len(activity)} activity rows")
    return stats, activity
