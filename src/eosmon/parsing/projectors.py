"""
Projection of monitoring-format mappings onto typed records.

Each entity kind has a static table from record field to the key the eos
tool prints for it. The tables are the compatibility contract with the
upstream field names: a renamed key upstream shows up here as an empty field.
Projection is total; missing keys become empty strings.
"""

import logging
from typing import Callable, Dict, List, Mapping, Type, TypeVar

from ..models.records import FSInfoRecord, GroupRecord, NodeRecord, SpaceRecord
from .monitoring import split_lines, tokenize

logger = logging.getLogger(__name__)

R = TypeVar("R")

NODE_FIELDS: Dict[str, str] = {
    "hostport": "hostport",
    "status": "status",
    "nofs": "nofs",
    "sum_stat_statfs_free": "sum.stat.statfs.freebytes",
    "sum_stat_statfs_used": "sum.stat.statfs.usedbytes",
    "sum_stat_statfs_total": "sum.stat.statfs.capacity",
    "sum_stat_stat_files_free": "sum.stat.statfs.ffree",
    "sum_stat_stat_files_used": "sum.stat.usedfiles",
    "sum_stat_stat_files_total": "sum.stat.statfs.files",
    "sum_stat_ropen": "sum.stat.ropen",
    "sum_stat_wopen": "sum.stat.wopen",
    "cfg_stat_sys_threads": "cfg.stat.sys.threads",
    "sum_stat_net_inratemib": "sum.stat.net.inratemib",
    "sum_stat_net_outratemib": "sum.stat.net.outratemib",
}

SPACE_FIELDS: Dict[str, str] = {
    "type": "type",
    "name": "name",
    "cfg_group_size": "cfg.groupsize",
    "cfg_group_mod": "cfg.groupmod",
    "nofs": "nofs",
    "avg_stat_disk_load": "avg.stat.disk.load",
    "sig_stat_disk_load": "sig.stat.disk.load",
    "sum_stat_disk_readratemb": "sum.stat.disk.readratemb",
    "sum_stat_disk_writeratemb": "sum.stat.disk.writeratemb",
    "sum_stat_net_ethratemib": "sum.stat.net.ethratemib",
    "sum_stat_net_inratemib": "sum.stat.net.inratemib",
    "sum_stat_net_outratemib": "sum.stat.net.outratemib",
    "sum_stat_ropen": "sum.stat.ropen",
    "sum_stat_wopen": "sum.stat.wopen",
    "sum_stat_statfs_usedbytes": "sum.stat.statfs.usedbytes",
    "sum_stat_statfs_freebytes": "sum.stat.statfs.freebytes",
    "sum_stat_statfs_capacity": "sum.stat.statfs.capacity",
    "sum_stat_usedfiles": "sum.stat.usedfiles",
    "sum_stat_statfs_ffiles": "sum.stat.statfs.ffiles",
    "sum_stat_statfs_files": "sum.stat.statfs.files",
    "sum_stat_statfs_capacity_configstatus_rw": "sum.stat.statfs.capacity?configstatus@rw",
    "sum_nofs_configstatus_rw": "sum.<n>?configstatus@rw",
    "cfg_quota": "cfg.quota",
    "cfg_nominalsize": "cfg.nominalsize",
    "cfg_balancer": "cfg.balancer",
    "cfg_balancer_threshold": "cfg.balancer.threshold",
    "sum_stat_balancer_running": "sum.stat.balancer.running",
    "sum_stat_drainer_running": "sum.stat.drainer.running",
    "sum_stat_disk_iops_configstatus_rw": "sum.stat.disk.iops?configstatus@rw",
    "sum_stat_disk_bw_configstatus_rw": "sum.stat.disk.bw?configstatus@rw",
}

GROUP_FIELDS: Dict[str, str] = {
    "name": "name",
    "cfg_status": "cfg.status",
    "nofs": "nofs",
    "avg_stat_disk_load": "avg.stat.disk.load",
    "sig_stat_disk_load": "sig.stat.disk.load",
    "sum_stat_disk_readratemb": "sum.stat.disk.readratemb",
    "sum_stat_disk_writeratemb": "sum.stat.disk.writeratemb",
    "sum_stat_net_ethratemib": "sum.stat.net.ethratemib",
    "sum_stat_net_inratemib": "sum.stat.net.inratemib",
    "sum_stat_net_outratemib": "sum.stat.net.outratemib",
    "sum_stat_ropen": "sum.stat.ropen",
    "sum_stat_wopen": "sum.stat.wopen",
    "sum_stat_statfs_usedbytes": "sum.stat.statfs.usedbytes",
    "sum_stat_statfs_freebytes": "sum.stat.statfs.freebytes",
    "sum_stat_statfs_capacity": "sum.stat.statfs.capacity",
    "sum_stat_usedfiles": "sum.stat.usedfiles",
    "sum_stat_statfs_ffree": "sum.stat.statfs.ffree",
    "sum_stat_statfs_files": "sum.stat.statfs.files",
    "dev_stat_statfs_filled": "dev.stat.statfs.filled",
    "avg_stat_statfs_filled": "avg.stat.statfs.filled",
    "sig_stat_statfs_filled": "sig.stat.statfs.filled",
    "cfg_stat_balancing": "cfg.stat.balancing",
    "sum_stat_balancer_running": "sum.stat.balancer.running",
    "sum_stat_drainer_running": "sum.stat.drainer.running",
}

FILESYSTEM_FIELDS: Dict[str, str] = {
    "host": "host",
    "port": "port",
    "id": "id",
    "uuid": "uuid",
    "path": "path",
    "schedgroup": "schedgroup",
    "stat_boot": "stat.boot",
    "configstatus": "configstatus",
    "headroom": "headroom",
    "stat_errc": "stat.errc",
    "stat_errmsg": "stat.errmsg",
    "stat_disk_load": "stat.disk.load",
    "stat_disk_readratemb": "stat.disk.readratemb",
    "stat_disk_writeratemb": "stat.disk.writeratemb",
    "stat_net_ethratemib": "stat.net.ethratemib",
    "stat_net_inratemib": "stat.net.inratemib",
    "stat_net_outratemib": "stat.net.outratemib",
    "stat_ropen": "stat.ropen",
    "stat_wopen": "stat.wopen",
    "stat_statfs_freebytes": "stat.statfs.freebytes",
    "stat_statfs_usedbytes": "stat.statfs.usedbytes",
    "stat_statfs_capacity": "stat.statfs.capacity",
    "stat_usedfiles": "stat.usedfiles",
    "stat_statfs_ffree": "stat.statfs.ffree",
    "stat_statfs_fused": "stat.statfs.fused",
    "stat_statfs_files": "stat.statfs.files",
    "drainstatus": "drainstatus",
    "stat_drainprogress": "stat.drainprogress",
    "stat_drainfiles": "stat.drainfiles",
    "stat_drainbytesleft": "stat.drainbytesleft",
    "stat_drainretry": "stat.drainretry",
    "stat_drain_failed": "stat.drain.failed",
    "graceperiod": "graceperiod",
    "stat_timeleft": "stat.timeleft",
    "stat_active": "stat.active",
    "stat_balancer_running": "stat.balancer.running",
    "stat_drainer_running": "stat.drainer.running",
    "stat_disk_iops": "stat.disk.iops",
    "stat_disk_bw": "stat.disk.bw",
    "stat_geotag": "stat.geotag",
    "stat_health": "stat.health",
    "stat_health_redundancy_factor": "stat.health.redundancy_factor",
    "stat_health_drives_failed": "stat.health.drives_failed",
    "stat_health_drives_total": "stat.health.drives_total",
    "stat_health_indicator": "stat.health.indicator",
}


def project(record_type: Type[R], fields: Mapping[str, str], kv: Mapping[str, str]) -> R:
    """Build ``record_type`` from ``kv`` using the field table ``fields``."""
    return record_type(**{field: kv.get(key, "") for field, key in fields.items()})


def project_node(kv: Mapping[str, str]) -> NodeRecord:
    return project(NodeRecord, NODE_FIELDS, kv)


def project_space(kv: Mapping[str, str]) -> SpaceRecord:
    return project(SpaceRecord, SPACE_FIELDS, kv)


def project_group(kv: Mapping[str, str]) -> GroupRecord:
    return project(GroupRecord, GROUP_FIELDS, kv)


def project_filesystem(kv: Mapping[str, str]) -> FSInfoRecord:
    return project(FSInfoRecord, FILESYSTEM_FIELDS, kv)


def parse_records(raw: str, projector: Callable[[Mapping[str, str]], R]) -> List[R]:
    """
    Parse raw monitoring output into one record per non-blank line.

    Records are returned in the order of the lines; nothing is merged or
    deduplicated.
    """
    records = [projector(tokenize(line)) for line in split_lines(raw)]
    logger.debug(f"Parsed {len(records)} records with {getattr(projector, '__name__', projector)}")
    return records


def parse_nodes(raw: str) -> List[NodeRecord]:
    return parse_records(raw, project_node)


def parse_spaces(raw: str) -> List[SpaceRecord]:
    return parse_records(raw, project_space)


def parse_groups(raw: str) -> List[GroupRecord]:
    return parse_records(raw, project_group)


def parse_filesystems(raw: str) -> List[FSInfoRecord]:
    return parse_records(raw, project_filesystem)
