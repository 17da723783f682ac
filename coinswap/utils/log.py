import json
import logging
import sys
from datetime import datetime, timezone
from coinswap.utils.settings import settings

FORMAT = "%(asctime)s | %(levelname)s | %(module)s | %(message)s"

def get_logger(name: str, level: str | None = None) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level or settings.log_level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(FORMAT))
        logger.addHandler(handler)
    return logger

_audit = get_logger("coinswap.audit")

def audit_event(source: str, **details):
    rec = {"ts": datetime.now(timezone.utc).isoformat(), "source": source, "details": details}
    _audit.info(json.dumps(rec, ensure_ascii=False, default=str))
    return rec
