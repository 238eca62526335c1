import os, shutil, signal, subprocess, threading, time

from .config import CFG
from .errors import (
    PingError,
    ProcessLaunchError,
    ProcessStartError,
    SignalError,
    ReadError,
    WaitError,
    ParseError,
)
from .logs import log_json
from .parsers import timing_stats_from_ping, packet_stats_from_ping
from .stats import PingStatistics


class OutputReader(threading.Thread):
    """Drains a text stream line by line until end-of-stream."""

    def __init__(self, stream):
        super().__init__(daemon=True)
        self.stream = stream
        self.lines = []
        self.error = None

    def run(self):
        try:
            for line in self.stream:
                self.lines.append(line)
        except (OSError, ValueError) as exc:
            self.error = exc

    @property
    def text(self) -> str:
        return "".join(self.lines)


def ping_command(host: str):
    binary = shutil.which(CFG["PING_BINARY"])
    if binary is None:
        raise ProcessLaunchError(f"ping executable not found: {CFG['PING_BINARY']!r}", host)
    # "--" keeps a host like "-f" from being read as an option
    return [binary, "-i", str(CFG["PING_INTERVAL_SEC"]), "--", host]


def _tail(text: str, lines: int = 5) -> str:
    return "".join(text.splitlines(keepends=True)[-lines:])


def _reap(proc, reader, timeout):
    # never leave a ping behind, whatever happened above
    if proc.poll() is None:
        proc.kill()
        proc.wait()
    reader.join(timeout)
    if not reader.is_alive():
        proc.stdout.close()


def _run(host: str, duration: float) -> PingStatistics:
    cmd = ping_command(host)
    try:
        proc = subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            encoding="utf-8",
            errors="replace",
            env={**os.environ, "LC_ALL": "C"},
        )
    except OSError as exc:
        raise ProcessStartError(f"could not start {cmd[0]}: {exc}", host) from exc

    wait_timeout = CFG["PING_WAIT_TIMEOUT_SEC"]
    reader = OutputReader(proc.stdout)
    reader.start()
    try:
        try:
            proc.wait(timeout=duration)  # exits early only on failure
        except subprocess.TimeoutExpired:
            try:
                proc.send_signal(signal.SIGINT)
            except (OSError, ValueError) as exc:
                raise SignalError(f"could not interrupt ping: {exc}", host) from exc
            try:
                proc.wait(timeout=wait_timeout)
            except subprocess.TimeoutExpired as exc:
                raise WaitError(
                    f"ping did not exit within {wait_timeout}s of interrupt", host
                ) from exc
        reader.join(wait_timeout)
        if reader.is_alive():
            raise ReadError("ping output never reached end-of-stream", host)
        if reader.error is not None:
            raise ReadError(f"reading ping output failed: {reader.error}", host) from reader.error
    finally:
        _reap(proc, reader, wait_timeout)

    text = reader.text
    if proc.returncode != 0:
        raise WaitError(
            f"ping exited with status {proc.returncode}", host, proc.returncode, _tail(text)
        )

    timing = timing_stats_from_ping(text)
    packets = packet_stats_from_ping(text)
    if timing is None or packets is None:
        raise ParseError("failed to parse ping output", host, _tail(text))
    return PingStatistics.from_parts(timing, packets)


def ping_exec(host: str, duration: float) -> PingStatistics:
    """
    Ping `host` for `duration` seconds, interrupt it, and return the
    statistics from its summary block. Raises a PingError subclass on any
    failure; the error's `stats` is always EMPTY_PING.
    """
    if duration < 0:
        raise ValueError(f"duration must be non-negative, got {duration!r}")
    t0 = time.time()
    try:
        stats = _run(host, duration)
    except PingError as exc:
        log_json({"event": "probe_failed", "host": host, "duration": duration,
                  "error": exc.kind, "detail": str(exc), "elapsed_s": time.time() - t0})
        raise
    log_json({"event": "probe_ok", "host": host, "duration": duration,
              "stats": stats.as_map(), "elapsed_s": time.time() - t0})
    return stats


def try_ping(host: str, duration: float):
    """Same as ping_exec, as a (stats, error) pair. error is None on success."""
    try:
        return ping_exec(host, duration), None
    except PingError as exc:
        return exc.stats, exc
