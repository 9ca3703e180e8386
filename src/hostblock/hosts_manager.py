from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from .codec import HostLineCodec, ManagedHost
from .config import HostsConfig
from .store import load_lines, save_lines
from .toggle import partition, render_report, set_blocked

__all__ = ["HostsManager"]

logger = logging.getLogger("hostblock.hosts_manager")


class HostsManager:
    """Toggle hostblock-managed entries in a hosts file.

    Only lines carrying the configured marker are ever rewritten; every other
    line is written back exactly as it was read.
    """

    def __init__(self, config: Optional[HostsConfig] = None) -> None:
        self.config = config or HostsConfig()
        self.config.validate()
        self.codec = HostLineCodec(self.config)
        self.lines: List[str] = []

    def load(self) -> List[str]:
        """Read the hosts file into :attr:`lines`."""
        self.lines = load_lines(self.config.hosts_path, self.config.buffer_size)
        return self.lines

    def set_blocked(self, blocked: bool, filters: Sequence[str] = ()) -> int:
        """Block or unblock matching managed lines. Returns the match count."""
        return set_blocked(self.lines, self.codec, blocked, filters)

    def save(self) -> None:
        """Overwrite the hosts file with :attr:`lines`."""
        save_lines(self.config.hosts_path, self.lines)
        logger.info(f"Saved {self.config.hosts_path}")

    def managed_hosts(self) -> Tuple[List[ManagedHost], List[ManagedHost]]:
        return partition(self.lines, self.codec)

    def report(self) -> str:
        return render_report(self.lines, self.codec)
