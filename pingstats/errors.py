from .stats import EMPTY_PING


class PingError(Exception):
    """Base for every probe failure. No statistics ever travel with one."""
    kind = "ping_error"

    def __init__(self, message, host=None):
        super().__init__(message)
        self.host = host
        self.stats = EMPTY_PING


class ProcessLaunchError(PingError):
    kind = "launch"


class ProcessStartError(PingError):
    kind = "start"


class SignalError(PingError):
    kind = "signal"


class ReadError(PingError):
    kind = "read"


class WaitError(PingError):
    kind = "wait"

    def __init__(self, message, host=None, returncode=None, output=""):
        super().__init__(message, host)
        self.returncode = returncode
        self.output = output


class ParseError(PingError):
    kind = "parse"

    def __init__(self, message, host=None, output=""):
        super().__init__(message, host)
        self.output = output
