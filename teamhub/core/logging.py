import sys
import json
import traceback
from loguru import logger as loguru_logger

from teamhub.core.config import settings

# Remove default logger
loguru_logger.remove()


class StructuredLogSink:
    """
    Sink that writes each Loguru record as one JSON line on stderr
    """
    def __init__(self):
        self.env = settings.ENV
        self.service_name = settings.PROJECT_NAME

    def write(self, message):
        record = message.record

        entry = {
            "severity": record["level"].name,
            "time": record["time"].isoformat(),
            "logger": record["name"],
            "message": record["message"],
            "labels": {
                "environment": self.env,
                "service": self.service_name
            }
        }

        # Fields bound with logger.bind(...) or passed as kwargs
        for k, v in record["extra"].items():
            entry[k] = v

        if record["exception"] is not None:
            exc_type, exc_value, exc_tb = record["exception"]
            entry["exception"] = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))

        print(json.dumps(entry, default=str), file=sys.stderr)


loguru_logger.configure(
    handlers=[
        {
            "sink": StructuredLogSink().write,
            "level": settings.LOG_LEVEL,
            "backtrace": False,
            "diagnose": False,
        }
    ]
)

# Export the logger
logger = loguru_logger
