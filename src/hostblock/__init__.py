"""hostblock - toggle blocking of hostnames in the hosts file"""
from __future__ import annotations

__version__ = "0.1.0"

from .codec import HostLineCodec, ManagedHost  # noqa: E402
from .config import HostsConfig  # noqa: E402
from .hosts_manager import HostsManager  # noqa: E402

__all__: list[str] = [
    "HostLineCodec",
    "HostsConfig",
    "HostsManager",
    "ManagedHost",
]
