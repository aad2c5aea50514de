"""
Pytest configuration and shared fixtures for the eosmon test suite.

This module provides sample tool output, a factory for fake ``eos``
executables and configuration helpers shared by all test modules.
"""

import json
import os
import shutil
import sys
import tempfile
import textwrap
from pathlib import Path

import pytest

# Add src to Python path for testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# ============================================================================
# Test Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


# ============================================================================
# Core Fixtures
# ============================================================================


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path, ignore_errors=True)


# ============================================================================
# Sample Tool Output
# ============================================================================


NODE_LS_OUTPUT = (
    "type=nodesview hostport=fst01.example.org:1095 status=online nofs=2 "
    "sum.stat.statfs.freebytes=1000 sum.stat.statfs.usedbytes=24 "
    "sum.stat.statfs.capacity=1024 sum.stat.ropen=3 sum.stat.wopen=1 "
    "cfg.stat.sys.threads=212 sum.stat.net.inratemib=1.5 sum.stat.net.outratemib=0.25\n"
    "\n"
    "type=nodesview hostport=fst02.example.org:1095 status=offline nofs=0\n"
)

SPACE_LS_OUTPUT = (
    "type=spaceview name=default cfg.groupsize=4 cfg.groupmod=24 nofs=96 "
    "sum.<n>?configstatus@rw=90 sum.stat.statfs.capacity?configstatus@rw=4096 "
    "cfg.quota=off\n"
)

GROUP_LS_OUTPUT = (
    "name=default.0 cfg.status=on nofs=4 avg.stat.disk.load=0.12\n"
    "name=default.1 cfg.status=off nofs=4\n"
)

FS_LS_OUTPUT = (
    "host=fst01.example.org port=1095 id=17 path=/data01 schedgroup=default.0 "
    'configstatus=rw stat.errmsg="disk full" stat.geotag=site::rack1\n'
)

VERSION_OUTPUT = (
    "EOS_INSTANCE=eosexample\n"
    "EOS_SERVER_VERSION=4.8.10 EOS_SERVER_RELEASE=1\n"
    "EOS_CLIENT_VERSION=4.8.10 EOS_CLIENT_RELEASE=1\n"
)

NODE_JSON_OUTPUT = """{
  "errormsg": "",
  "result": [
    {
      "hostport": "fst01.example.org:1095",
      "cfg": {
        "stat": {
          "geotag": "site::rack1",
          "sys": {
            "vsize": 1234567,
            "rss": 7654321,
            "threads": 212,
            "sockets": 40,
            "kernel": "3.10.0-1160.el7.x86_64",
            "uptime": "14:35:06%20up%2012%20days,%20%203:41,%20%200%20users",
            "eos": {"version": "4.8.10-1", "start": "Mon Jan  4 10:00:00 2021"},
            "xrootd": {"version": "v4.12.5"}
          }
        }
      }
    },
    {"hostport": "fst02.example.org:1095"}
  ]
}
"""

NS_STAT_OUTPUT = (
    "uid=all gid=all ns.total.files=1000\n"
    "uid=all gid=all ns.total.directories=50\n"
    "uid=all gid=all ns.boot.status=booted\n"
    "uid=all gid=all cmd=Open total=12 5s=0.20 60s=0.10 300s=0.05 3600s=0.01 "
    "exec=1.2 execsig=0.3 exec99=4.5 execmax=9.0\n"
    "uid=all gid=all cmd=Rm total=0 5s=0.00 60s=0.00 300s=0.00 3600s=0.00\n"
    "uid=1000 gid=1000 cmd=Open total=7 5s=0.10 60s=0.10 300s=0.10 3600s=0.10\n"
)


@pytest.fixture
def sample_outputs():
    """Canned stdout of every eos subcommand the client runs."""
    return {
        "node ls -m": NODE_LS_OUTPUT,
        "space ls -m": SPACE_LS_OUTPUT,
        "group ls -m": GROUP_LS_OUTPUT,
        "fs ls -m": FS_LS_OUTPUT,
        "version": VERSION_OUTPUT,
        "--json node ls": NODE_JSON_OUTPUT,
        "ns stat -a -m": NS_STAT_OUTPUT,
    }


# ============================================================================
# Fake eos Executables
# ============================================================================


@pytest.fixture
def make_executable(tmp_path):
    """
    Factory writing an executable that runs a Python body.

    The child process gets no PATH, so the wrapper refers to the interpreter
    by absolute path. Inside the body, ``args`` holds the command arguments.
    """

    def _make(body: str, name: str = "eos") -> Path:
        script = tmp_path / f"{name}_impl.py"
        script.write_text(
            "import json, os, subprocess, sys, time\n"
            "args = sys.argv[1:]\n" + textwrap.dedent(body)
        )
        wrapper = tmp_path / name
        wrapper.write_text(f'#!/bin/sh\nexec "{sys.executable}" "{script}" "$@"\n')
        wrapper.chmod(0o755)
        return wrapper

    return _make


@pytest.fixture
def fake_eos(make_executable, tmp_path, sample_outputs):
    """
    A fake eos binary answering every listing with canned output.

    Invocations are appended to ``calls.log``, one JSON argv per line.
    A leading ``-r <uid> <gid>`` is recorded and stripped before dispatch.
    """
    outputs_file = tmp_path / "outputs.json"
    outputs_file.write_text(json.dumps(sample_outputs))
    calls_file = tmp_path / "calls.log"

    body = f"""
    with open({str(calls_file)!r}, "a") as log:
        log.write(json.dumps(args) + "\\n")
    if args[:1] == ["-r"]:
        args = args[3:]
    with open({str(outputs_file)!r}) as f:
        outputs = json.load(f)
    key = " ".join(args)
    if key not in outputs:
        sys.stderr.write("unknown command: " + key + "\\n")
        sys.exit(2)
    sys.stdout.write(outputs[key])
    """
    return make_executable(body)


@pytest.fixture
def eos_calls(tmp_path):
    """Callable returning the argv lists recorded by the fake eos binary."""
    calls_file = tmp_path / "calls.log"

    def _read():
        if not calls_file.exists():
            return []
        return [json.loads(line) for line in calls_file.read_text().splitlines() if line]

    return _read


@pytest.fixture
def client_config(fake_eos):
    """ClientConfig pointing at the fake eos binary."""
    from eosmon.models import ClientConfig

    return ClientConfig(binary=str(fake_eos), mgm_url="root://mgm.example.org", timeout=10.0)


@pytest.fixture
def config_file(tmp_path, fake_eos):
    """Write a config.toml using the fake eos binary and return its path."""
    path = tmp_path / "conf" / "config.toml"
    path.parent.mkdir()
    path.write_text(
        textwrap.dedent(
            f"""
            [eos]
            binary = "{fake_eos}"
            mgm_url = "root://mgm.example.org"
            timeout_seconds = 10
            identity = ""
            enable_command_logging = true

            [logging]
            level = "debug"

            [snapshot]
            format = "parquet"
            compression = "zstd"
            output_dir = "../snapshots"
            """
        )
    )
    return path


@pytest.fixture
def current_user():
    """Name, uid and gid of the user running the tests."""
    import pwd

    entry = pwd.getpwuid(os.getuid())
    return entry.pw_name, str(entry.pw_uid), str(entry.pw_gid)
