"""Recognising and rebuilding the hosts lines this tool manages.

A managed line looks like::

    127.0.0.1 example.com www.example.com # do not edit; managed by ...

It is *blocked* while active and *unblocked* when commented out with a
leading ``"# "``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional

from .config import HostsConfig

__all__ = ["ManagedHost", "HostLineCodec"]

UNBLOCKED_PREFIX = "# "


@dataclass
class ManagedHost:
    """Hostnames of one managed line and whether the line is active."""

    hosts: List[str] = field(default_factory=list)
    blocked: bool = False


class HostLineCodec:
    """Decode raw lines into :class:`ManagedHost` records and back.

    Both directions are pure. Hostnames are split and joined on single
    spaces with no escaping, so a double space yields an empty hostname and a
    hostname containing a space does not survive a round trip.
    """

    def __init__(self, config: HostsConfig) -> None:
        self.block_ip = config.block_ip
        self.marker = config.marker
        self._pattern = re.compile(
            "^(" + re.escape(UNBLOCKED_PREFIX) + ")?"
            + re.escape(self.block_ip)
            + " ([^#]+) "
            + re.escape(self.marker)
        )

    def decode(self, line: str) -> Optional[ManagedHost]:
        """Return the record encoded by *line*, or ``None`` if it is not ours."""
        match = self._pattern.match(line)
        if match is None:
            return None
        return ManagedHost(
            hosts=match.group(2).split(" "),
            blocked=match.group(1) is None,
        )

    def encode(self, host: ManagedHost) -> str:
        prefix = "" if host.blocked else UNBLOCKED_PREFIX
        return f"{prefix}{self.block_ip} {' '.join(host.hosts)} {self.marker}"
