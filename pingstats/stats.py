from dataclasses import dataclass

# field name -> key used by as_map()
MAP_KEYS = {
    "round_trip_min": "roundTripMin",
    "round_trip_avg": "roundTripAvg",
    "round_trip_max": "roundTripMax",
    "round_trip_stddev": "roundTripStdDev",
    "packets_sent": "packetsSent",
    "packets_received": "packetsReceived",
    "packet_loss": "packetLoss",
}


@dataclass(frozen=True)
class PingStatistics:
    """
    Round-trip min/avg/max/stddev plus packets sent/received and % loss,
    kept as the text ping printed them.
    """
    # timing, ms
    round_trip_min: str = ""
    round_trip_avg: str = ""
    round_trip_max: str = ""
    round_trip_stddev: str = ""
    # packets
    packets_sent: str = ""
    packets_received: str = ""
    packet_loss: str = ""

    @classmethod
    def from_parts(cls, timing, packets):
        return cls(*timing, *packets)

    @property
    def is_empty(self) -> bool:
        return self == EMPTY_PING

    def as_map(self) -> dict:
        return {key: getattr(self, name) for name, key in MAP_KEYS.items()}

    def as_numbers(self) -> dict:
        if self.is_empty:
            raise ValueError("empty ping statistics have no numeric view")
        return {key: float(val) for key, val in self.as_map().items()}


EMPTY_PING = PingStatistics()
