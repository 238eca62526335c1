from fastapi import FastAPI, Path, Query
from fastapi.responses import JSONResponse, Response
from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
    CONTENT_TYPE_LATEST,
)
from collections import OrderedDict
from contextlib import asynccontextmanager
import threading, time
from typing import Optional

from .config import CFG
from .errors import PingError
from .logs import log_json
from .probes import ping_exec

reg = CollectorRegistry()
PROBES = Counter("ping_probes_total", "probes run", ["outcome"], registry=reg)
PROBE_TIME = Histogram("ping_probe_seconds", "probe wall time", registry=reg)
RTT = Gauge("ping_round_trip_ms", "last round-trip stats", ["host", "stat"], registry=reg)
LOSS = Gauge("ping_packet_loss_pct", "last packet loss", ["host"], registry=reg)
RTT_STATS = [("min", "roundTripMin"), ("avg", "roundTripAvg"),
             ("max", "roundTripMax"), ("stddev", "roundTripStdDev")]

hosts = OrderedDict()  # hosts with live gauge series, least recently probed first


def record(host, stats):
    nums = stats.as_numbers()
    for stat, key in RTT_STATS:
        RTT.labels(host=host, stat=stat).set(nums[key])
    LOSS.labels(host=host).set(nums["packetLoss"])
    hosts.pop(host, None)
    hosts[host] = True
    while len(hosts) > CFG["MAX_METRIC_HOSTS"]:
        old, _ = hosts.popitem(last=False)
        for stat, _ in RTT_STATS:
            RTT.remove(old, stat)
        LOSS.remove(old)


def probe(host, duration):
    t0 = time.time()
    try:
        stats = ping_exec(host, duration)
    except PingError as exc:
        PROBES.labels(outcome=exc.kind).inc()
        raise
    finally:
        PROBE_TIME.observe(time.time() - t0)
    PROBES.labels(outcome="ok").inc()
    record(host, stats)
    return stats


def probe_loop():
    while True:
        t0 = time.time()
        try:
            probe(CFG["TARGET_HOST"], CFG["PROBE_DURATION_SEC"])
        except PingError:
            pass  # counted and logged already
        time.sleep(max(1, CFG["PROBE_INTERVAL_SEC"] - (time.time() - t0)))


def start_probe_loop():
    if CFG["PROBE_INTERVAL_SEC"] > 0:
        log_json({"event": "probe_loop_started", "host": CFG["TARGET_HOST"],
                  "interval_s": CFG["PROBE_INTERVAL_SEC"]})
        threading.Thread(target=probe_loop, daemon=True).start()


@asynccontextmanager
async def lifespan(app):
    start_probe_loop()
    yield


app = FastAPI(lifespan=lifespan)


@app.get("/healthz")
def health(): return {"ok": True}


@app.get("/metrics")
def metrics(): return Response(generate_latest(reg), media_type=CONTENT_TYPE_LATEST)


@app.get("/ping/{host}")
def ping_host(host: str = Path(..., pattern=r"^[^-]"),
              duration: Optional[int] = Query(None, ge=0)):
    if duration is None:
        duration = CFG["PROBE_DURATION_SEC"]
    try:
        stats = probe(host, duration)
    except PingError as exc:
        return JSONResponse(status_code=502, content={"host": host, "error": exc.kind, "detail": str(exc)})
    return {"host": host, "stats": stats.as_map()}
