import logging
import sys
from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME = "ltti-engine"
LOG_FORMAT = '%(level)s %(name)s %(message)s'


class LttiJsonFormatter(JsonFormatter):
    """One JSON object per record, tagged with the service name and call site."""

    def __init__(self, fmt: str = LOG_FORMAT):
        super().__init__(fmt, timestamp=True, static_fields={"service": SERVICE_NAME})

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['level'] = record.levelname
        log_record['location'] = f"{record.module}:{record.lineno}"


def _has_json_handler(root_logger: logging.Logger) -> bool:
    return any(isinstance(h.formatter, LttiJsonFormatter) for h in root_logger.handlers)


def setup_logging(log_level_str: str = "INFO") -> None:
    """
    Sends root-logger output to stdout as JSON at the given level.

    Calling it again only changes the level.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not _has_json_handler(root_logger):
        log_handler = logging.StreamHandler(sys.stdout)
        log_handler.setFormatter(LttiJsonFormatter())
        root_logger.addHandler(log_handler)
    root_logger.info(f"LTTI logging level set to {logging.getLevelName(log_level)}")
