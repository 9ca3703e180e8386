"""Pytest configuration and reusable fixtures for hostblock tests."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Test path setup – make sure `src/` is importable when tests are invoked from
# the project root without installing the package first.
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"

if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from hostblock.codec import HostLineCodec  # noqa: E402
from hostblock.config import DEFAULT_MARKER, HostsConfig  # noqa: E402

MARKER = DEFAULT_MARKER


# ---------------------------------------------------------------------------
# Generic fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def hosts_path(tmp_path: Path) -> Path:
    """Return a hosts file with two managed entries and two foreign lines."""
    path = tmp_path / "hosts"
    path.write_text(
        "127.0.0.1 localhost\n"
        f"127.0.0.1 ads.example.com tracker.example.com {MARKER}\n"
        "# a comment of the user\n"
        f"# 127.0.0.1 news.example.org {MARKER}\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def config(hosts_path: Path) -> HostsConfig:
    return HostsConfig(hosts_path=hosts_path)


@pytest.fixture()
def codec() -> HostLineCodec:
    return HostLineCodec(HostsConfig())
