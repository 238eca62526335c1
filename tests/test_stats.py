import dataclasses
import pytest

from pingstats.stats import PingStatistics, EMPTY_PING

KEYS = {"roundTripMin", "roundTripAvg", "roundTripMax", "roundTripStdDev",
        "packetsSent", "packetsReceived", "packetLoss"}


def sample():
    return PingStatistics.from_parts(["110.555", "112.243", "113.908", "1.307"], ["5", "5", "0.0"])


def test_as_map_keys_and_values():
    m = sample().as_map()
    assert set(m) == KEYS
    assert m["roundTripAvg"] == "112.243"
    assert m["packetsSent"] == "5"
    assert m["packetLoss"] == "0.0"


def test_empty_sentinel():
    assert all(v == "" for v in EMPTY_PING.as_map().values())
    assert EMPTY_PING.is_empty
    assert not sample().is_empty


def test_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        EMPTY_PING.round_trip_avg = "1.0"


def test_as_numbers():
    n = sample().as_numbers()
    assert set(n) == KEYS
    assert n["roundTripMax"] == pytest.approx(113.908)
    assert n["packetsReceived"] == 5.0
    with pytest.raises(ValueError):
        EMPTY_PING.as_numbers()
