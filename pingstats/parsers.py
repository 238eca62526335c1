import re
from typing import List, Optional

# e.g. round-trip min/avg/max/stddev = 110.555/112.243/113.908/1.307 ms
#      rtt min/avg/max/mdev = 10.101/11.202/12.303/0.404 ms
TIMING_RE = re.compile(r"(\d+\.\d+)/(\d+\.\d+)/(\d+\.\d+)/(\d+\.\d+)")

# e.g. 5 packets transmitted, 5 packets received, 0.0% packet loss
#      5 packets transmitted, 3 received, +1 duplicates, +2 errors, 40% packet loss, time 4005ms
PACKETS_RE = re.compile(
    r"(\d+) packets transmitted, (\d+) (?:packets )?received,"
    r"(?: \+\d+ \w+,)* (\d+(?:\.\d+)?)% packet loss"
)


def timing_stats_from_ping(text: str) -> Optional[List[str]]:
    """[min, avg, max, stddev] from the round-trip summary line, or None."""
    m = TIMING_RE.search(text)
    if not m:
        return None
    return list(m.groups())


def packet_stats_from_ping(text: str) -> Optional[List[str]]:
    """[transmitted, received, loss %] from the packet summary line, or None."""
    m = PACKETS_RE.search(text)
    if not m:
        return None
    return list(m.groups())
