import json
from datetime import datetime, timezone

from .config import CFG


def log_json(obj):
    """Append one JSON object per line to CFG["LOG_PATH"] (for Loki)."""
    record = {"ts": datetime.now(timezone.utc).isoformat(), **obj}
    try:
        with open(CFG["LOG_PATH"], "a") as f:
            f.write(json.dumps(record) + "\n")
    except OSError:
        pass
