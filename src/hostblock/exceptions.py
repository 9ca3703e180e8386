"""
hostblock custom exceptions.

Every failure the tool reports to the user is one of the classes below; the
CLI turns them into a message on stderr and a non-zero exit status.
"""

from __future__ import annotations

from typing import Optional, Any, Dict


class HostBlockError(Exception):
    """Base exception for all hostblock-related errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigError(HostBlockError):
    """Raised when the configuration cannot be used."""

    pass


class HostsFileError(HostBlockError):
    """Raised when the hosts file cannot be opened, read or written."""

    pass


class LineTooLongError(HostBlockError):
    """Raised when a line does not fit into the reader's buffer."""

    def __init__(self, line_number: int, content: str):
        super().__init__(
            f"line too long: {line_number}: {content}",
            {"line_number": line_number},
        )
        self.line_number = line_number
        self.content = content


class UnknownCommandError(HostBlockError):
    """Raised for a command other than ``block`` or ``unblock``."""

    def __init__(self, command: str):
        super().__init__(f'unknown cmd: "{command}"', {"command": command})
        self.command = command


def format_error_message(error: Exception) -> str:
    """Format error messages consistently."""
    if isinstance(error, HostBlockError):
        message = error.message
        original = error.details.get("original_error")
        if original:
            message += f" ({original})"
    else:
        message = f"{type(error).__name__}: {str(error)}"

    return message
