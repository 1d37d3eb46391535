import logging
import json
import sys
from typing import Any, Dict
from datetime import datetime, timezone

class JsonFormatter(logging.Formatter):
    """
    Formatter that renders each LogRecord as a single-line JSON object.
    """

    def __init__(self, app_name: str = "casekit", **kwargs):
        super().__init__(**kwargs)
        self.app_name = app_name

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "app": self.app_name,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        if record.__dict__.get("data"):
            log_entry["data"] = record.__dict__["data"]

        return json.dumps(log_entry, default=str)

def setup_logging(
    level: str = "INFO",
    format_type: str = "text",
    app_name: str = "casekit",
    stream=None,
):
    """
    Configures the root logger with the specified format.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)

    if format_type.lower() == "json":
        formatter = JsonFormatter(app_name=app_name)
        handler.setFormatter(formatter)
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)

    root_logger.addHandler(handler)
