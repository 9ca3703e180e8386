"""Filtering, toggling and reporting over a list of hosts file lines.

The line list is the only state. Records are decoded from it whenever they
are needed and changes are written straight back into the same slot, so
unmanaged lines and line positions never move.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Sequence, Tuple

from .codec import HostLineCodec, ManagedHost

logger = logging.getLogger("hostblock.toggle")

__all__ = [
    "matches_filters",
    "iter_managed",
    "set_blocked",
    "partition",
    "render_report",
]


def matches_filters(host: ManagedHost, filters: Sequence[str]) -> bool:
    """Return ``True`` if any hostname contains any filter as a substring.

    An empty filter list matches everything. Matching is case-sensitive.
    """
    if not filters:
        return True
    return any(f in name for f in filters for name in host.hosts)


def iter_managed(lines: Sequence[str], codec: HostLineCodec) -> Iterator[Tuple[int, ManagedHost]]:
    """Yield ``(index, record)`` for every managed line in file order."""
    for index, line in enumerate(lines):
        host = codec.decode(line)
        if host is not None:
            yield index, host


def set_blocked(
    lines: List[str],
    codec: HostLineCodec,
    blocked: bool,
    filters: Sequence[str] = (),
) -> int:
    """Set the blocked state of matching managed lines in place.

    Every matching line is re-encoded, even when its state does not change.
    Returns the number of lines that matched.
    """
    matched = 0
    for index, host in list(iter_managed(lines, codec)):
        if not matches_filters(host, filters):
            continue
        host.blocked = blocked
        lines[index] = codec.encode(host)
        matched += 1

    logger.debug(
        f"{'Blocked' if blocked else 'Unblocked'} {matched} managed lines "
        f"(filters: {list(filters) or 'none'})"
    )
    return matched


def partition(lines: Sequence[str], codec: HostLineCodec) -> Tuple[List[ManagedHost], List[ManagedHost]]:
    """Split managed records into ``(unblocked, blocked)``, keeping file order."""
    unblocked: List[ManagedHost] = []
    blocked: List[ManagedHost] = []
    for _, host in iter_managed(lines, codec):
        (blocked if host.blocked else unblocked).append(host)
    return unblocked, blocked


def render_report(lines: Sequence[str], codec: HostLineCodec) -> str:
    """Return the two-section status listing printed after every run.

    Example::

        Unblocked:
          example.com

        Blocked:
          ads.example.net, tracker.example.net
    """
    unblocked, blocked = partition(lines, codec)
    out: List[str] = []
    for i, (name, hosts) in enumerate((("Unblocked", unblocked), ("Blocked", blocked))):
        if i:
            out.append("\n")
        out.append(f"{name}:\n")
        out.extend(f"  {', '.join(host.hosts)}\n" for host in hosts)
    return "".join(out)
