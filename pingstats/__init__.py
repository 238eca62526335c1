from .stats import PingStatistics, EMPTY_PING
from .errors import (
    PingError,
    ProcessLaunchError,
    ProcessStartError,
    SignalError,
    ReadError,
    WaitError,
    ParseError,
)
from .probes import ping_exec, try_ping

__all__ = [
    "PingStatistics", "EMPTY_PING", "ping_exec", "try_ping",
    "PingError", "ProcessLaunchError", "ProcessStartError", "SignalError",
    "ReadError", "WaitError", "ParseError",
]
