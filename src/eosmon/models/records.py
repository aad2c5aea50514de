"""
Typed records produced from the EOS administration tool output.

Every record is an immutable snapshot of one entity taken at invocation
time. All fields are kept as the strings reported by the tool; a key that
was absent from the output leaves its field as an empty string. Converting
values to numbers is left to the consumer.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NodeRecord:
    """One FST storage server, as listed by ``node ls -m``."""

    hostport: str = ""
    status: str = ""
    nofs: str = ""
    sum_stat_statfs_free: str = ""
    sum_stat_statfs_used: str = ""
    sum_stat_statfs_total: str = ""
    sum_stat_stat_files_free: str = ""
    sum_stat_stat_files_used: str = ""
    sum_stat_stat_files_total: str = ""
    sum_stat_ropen: str = ""
    sum_stat_wopen: str = ""
    cfg_stat_sys_threads: str = ""
    sum_stat_net_inratemib: str = ""
    sum_stat_net_outratemib: str = ""


@dataclass(frozen=True)
class SpaceRecord:
    """A named pool of filesystems, as listed by ``space ls -m``."""

    type: str = ""
    name: str = ""
    cfg_group_size: str = ""
    cfg_group_mod: str = ""
    nofs: str = ""
    avg_stat_disk_load: str = ""
    sig_stat_disk_load: str = ""
    sum_stat_disk_readratemb: str = ""
    sum_stat_disk_writeratemb: str = ""
    sum_stat_net_ethratemib: str = ""
    sum_stat_net_inratemib: str = ""
    sum_stat_net_outratemib: str = ""
    sum_stat_ropen: str = ""
    sum_stat_wopen: str = ""
    sum_stat_statfs_usedbytes: str = ""
    sum_stat_statfs_freebytes: str = ""
    sum_stat_statfs_capacity: str = ""
    sum_stat_usedfiles: str = ""
    sum_stat_statfs_ffiles: str = ""
    sum_stat_statfs_files: str = ""
    sum_stat_statfs_capacity_configstatus_rw: str = ""
    sum_nofs_configstatus_rw: str = ""
    cfg_quota: str = ""
    cfg_nominalsize: str = ""
    cfg_balancer: str = ""
    cfg_balancer_threshold: str = ""
    sum_stat_balancer_running: str = ""
    sum_stat_drainer_running: str = ""
    sum_stat_disk_iops_configstatus_rw: str = ""
    sum_stat_disk_bw_configstatus_rw: str = ""


@dataclass(frozen=True)
class GroupRecord:
    """A scheduling group within a space, as listed by ``group ls -m``."""

    name: str = ""
    cfg_status: str = ""
    nofs: str = ""
    avg_stat_disk_load: str = ""
    sig_stat_disk_load: str = ""
    sum_stat_disk_readratemb: str = ""
    sum_stat_disk_writeratemb: str = ""
    sum_stat_net_ethratemib: str = ""
    sum_stat_net_inratemib: str = ""
    sum_stat_net_outratemib: str = ""
    sum_stat_ropen: str = ""
    sum_stat_wopen: str = ""
    sum_stat_statfs_usedbytes: str = ""
    sum_stat_statfs_freebytes: str = ""
    sum_stat_statfs_capacity: str = ""
    sum_stat_usedfiles: str = ""
    sum_stat_statfs_ffree: str = ""
    sum_stat_statfs_files: str = ""
    dev_stat_statfs_filled: str = ""
    avg_stat_statfs_filled: str = ""
    sig_stat_statfs_filled: str = ""
    cfg_stat_balancing: str = ""
    sum_stat_balancer_running: str = ""
    sum_stat_drainer_running: str = ""


@dataclass(frozen=True)
class FSInfoRecord:
    """One physical filesystem, as listed by ``fs ls -m``."""

    host: str = ""
    port: str = ""
    id: str = ""
    uuid: str = ""
    path: str = ""
    schedgroup: str = ""
    stat_boot: str = ""
    configstatus: str = ""
    headroom: str = ""
    stat_errc: str = ""
    stat_errmsg: str = ""
    stat_disk_load: str = ""
    stat_disk_readratemb: str = ""
    stat_disk_writeratemb: str = ""
    stat_net_ethratemib: str = ""
    stat_net_inratemib: str = ""
    stat_net_outratemib: str = ""
    stat_ropen: str = ""
    stat_wopen: str = ""
    stat_statfs_freebytes: str = ""
    stat_statfs_usedbytes: str = ""
    stat_statfs_capacity: str = ""
    stat_usedfiles: str = ""
    stat_statfs_ffree: str = ""
    stat_statfs_fused: str = ""
    stat_statfs_files: str = ""
    drainstatus: str = ""
    stat_drainprogress: str = ""
    stat_drainfiles: str = ""
    stat_drainbytesleft: str = ""
    stat_drainretry: str = ""
    stat_drain_failed: str = ""
    graceperiod: str = ""
    stat_timeleft: str = ""
    stat_active: str = ""
    stat_balancer_running: str = ""
    stat_drainer_running: str = ""
    stat_disk_iops: str = ""
    stat_disk_bw: str = ""
    stat_geotag: str = ""
    stat_health: str = ""
    stat_health_redundancy_factor: str = ""
    stat_health_drives_failed: str = ""
    stat_health_drives_total: str = ""
    stat_health_indicator: str = ""


@dataclass(frozen=True)
class VersionRecord:
    """
    Software and process information for one host.

    Built from the JSON node report plus the MGM version string. The integer
    counters are rendered as decimal strings and ``uptime`` holds the number
    of days the host has been up.
    """

    eos_mgm: str = ""
    hostname: str = ""
    port: str = ""
    geotag: str = ""
    vsize: str = ""
    rss: str = ""
    threads: str = ""
    sockets: str = ""
    eos_fst: str = ""
    xrootd_fst: str = ""
    kernel: str = ""
    start: str = ""
    uptime: str = ""


@dataclass(frozen=True)
class NamespaceRecord:
    """Global namespace statistics from one ``ns stat -a -m`` rollup row."""

    boot_file_time: str = ""
    boot_status: str = ""
    boot_time: str = ""
    cache_container_maxsize: str = ""
    cache_container_occupancy: str = ""
    cache_files_maxsize: str = ""
    cache_files_occupancy: str = ""
    fds_all: str = ""
    fusex_activeclients: str = ""
    fusex_caps: str = ""
    fusex_clients: str = ""
    fusex_lockedclients: str = ""
    latency_dirs: str = ""
    latency_files: str = ""
    latency_pending_updates: str = ""
    latencypeak_eosviewmutex_1min: str = ""
    latencypeak_eosviewmutex_2min: str = ""
    latencypeak_eosviewmutex_5min: str = ""
    latencypeak_eosviewmutex_last: str = ""
    memory_growth: str = ""
    memory_resident: str = ""
    memory_share: str = ""
    memory_virtual: str = ""
    stat_threads: str = ""
    total_directories: str = ""
    total_directories_changelog_avg_entry_size: str = ""
    total_directories_changelog_size: str = ""
    total_files: str = ""
    total_files_changelog_avg_entry_size: str = ""
    total_files_changelog_size: str = ""
    uptime: str = ""


@dataclass(frozen=True)
class NamespaceActivityRecord:
    """Throughput of one namespace operation across all users and groups."""

    user: str = ""
    gid: str = ""
    operation: str = ""
    total: str = ""
    last_5s: str = ""
    last_60s: str = ""
    last_300s: str = ""
    last_3600s: str = ""
    exec_avg: str = ""
    exec_sigma: str = ""
    exec_99: str = ""
    exec_max: str = ""
