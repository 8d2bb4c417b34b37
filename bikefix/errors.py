"""Result codes of the tracker's network set-up and the exception that carries them."""

from __future__ import annotations

import enum


class ErrorCode(enum.IntEnum):
    """Result codes; zero is success, negative values are failures."""

    SUCCESS = 0
    ERR_OPEN_BEARER_FAILED = -1
    ERR_HOLD_BEARER_FAILED = -2
    ERR_SOCKET_CREAT_FAILED = -3
    ERR_SOCKET_OPTION_FAILED = -4
    ERR_GET_HOSTBYNAME_FAILED = -5
    ERR_WAITING_HOSTNAME2IP = -6
    ERR_SOCKET_CONNECTED = -7
    ERR_SOCKET_WAITING = -8
    ERR_SOCKET_FAILED = -9


_MESSAGES = {
    ErrorCode.ERR_OPEN_BEARER_FAILED: "opening the bearer failed",
    ErrorCode.ERR_HOLD_BEARER_FAILED: "holding the bearer failed",
    ErrorCode.ERR_SOCKET_CREAT_FAILED: "creating the socket failed",
    ErrorCode.ERR_SOCKET_OPTION_FAILED: "setting a socket option failed",
    ErrorCode.ERR_GET_HOSTBYNAME_FAILED: "resolving the host name failed",
    ErrorCode.ERR_WAITING_HOSTNAME2IP: "waiting for the host name to resolve",
    ErrorCode.ERR_SOCKET_CONNECTED: "socket already connected",
    ErrorCode.ERR_SOCKET_WAITING: "socket connection in progress",
    ErrorCode.ERR_SOCKET_FAILED: "socket failed",
}


class TrackerError(Exception):
    """A non-success result code."""

    def __init__(self, code: int) -> None:
        self.code = ErrorCode(code)
        if self.code is ErrorCode.SUCCESS:
            raise ValueError("SUCCESS is not an error code")
        super().__init__(f"{_MESSAGES[self.code]} ({self.code.name}, {int(self.code)})")


def raise_for_code(code: int) -> ErrorCode:
    """Return ``ErrorCode.SUCCESS`` for zero, raise :class:`TrackerError` otherwise."""
    result = ErrorCode(code)
    if result is not ErrorCode.SUCCESS:
        raise TrackerError(result)
    return result