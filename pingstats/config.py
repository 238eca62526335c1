import os, pathlib

CFG = {
    "PING_BINARY": os.getenv("PING_BINARY", "ping"),
    "PING_INTERVAL_SEC": os.getenv("PING_INTERVAL_SEC", "1"),
    "PING_WAIT_TIMEOUT_SEC": float(os.getenv("PING_WAIT_TIMEOUT_SEC", 5)),
    "TARGET_HOST": os.getenv("TARGET_HOST", "1.1.1.1"),
    "PROBE_DURATION_SEC": int(os.getenv("PROBE_DURATION_SEC", 5)),
    "PROBE_INTERVAL_SEC": int(os.getenv("PROBE_INTERVAL_SEC", 0)),
    "MAX_METRIC_HOSTS": int(os.getenv("MAX_METRIC_HOSTS", 32)),
    "LOG_PATH": os.getenv("LOG_PATH", str(pathlib.Path(__file__).resolve().parent / "pingstats.log")),
}

pathlib.Path(CFG["LOG_PATH"]).parent.mkdir(parents=True, exist_ok=True)
