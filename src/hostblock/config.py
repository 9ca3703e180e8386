"""Runtime configuration for hostblock."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .exceptions import ConfigError

__all__ = [
    "DEFAULT_HOSTS_PATH",
    "DEFAULT_MARKER",
    "DEFAULT_BLOCK_IP",
    "DEFAULT_BUFFER_SIZE",
    "HostsConfig",
]

DEFAULT_HOSTS_PATH = Path("/etc/hosts")
DEFAULT_MARKER = "# do not edit; managed by github.com/felixge/hosts"
DEFAULT_BLOCK_IP = "127.0.0.1"
# Size of the line reader's buffer, in bytes.
DEFAULT_BUFFER_SIZE = 4096


@dataclass(frozen=True)
class HostsConfig:
    """Values shared by the line store and the codec.

    Nothing here changes at runtime; tests build their own instance to point
    at a temporary hosts file or use a different marker.
    """

    hosts_path: Path = field(default=DEFAULT_HOSTS_PATH)
    marker: str = DEFAULT_MARKER
    block_ip: str = DEFAULT_BLOCK_IP
    buffer_size: int = DEFAULT_BUFFER_SIZE

    def __post_init__(self) -> None:
        object.__setattr__(self, "hosts_path", Path(self.hosts_path))

    def validate(self) -> None:
        """Raise :class:`ConfigError` when a value cannot work."""
        if not self.marker:
            raise ConfigError("marker must not be empty")
        if not self.block_ip:
            raise ConfigError("block_ip must not be empty")
        if self.buffer_size < 1:
            raise ConfigError(
                f"buffer_size must be positive, got {self.buffer_size}",
                {"buffer_size": self.buffer_size},
            )
