"""
Logging setup for the catalog service.

Console output plus rotating app/error files; JSON lines when LOG_JSON_FORMAT is on.
"""
import sys
import json
import logging
import logging.config

from catalog.core.config import settings


class JSONFormatter(logging.Formatter):
    """
    JSON formatter for production log collection
    """

    # Attributes every LogRecord carries; anything else arrived through `extra=`
    SKIP_KEYS = {
        "args", "asctime", "created", "exc_info", "exc_text", "filename",
        "funcName", "levelname", "levelno", "lineno", "module",
        "msecs", "message", "msg", "name", "pathname", "process",
        "processName", "relativeCreated", "stack_info", "thread", "threadName",
        "taskName",
    }

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "func_name": record.funcName,
            "line_no": record.lineno,
        }

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in self.SKIP_KEYS:
                log_record[key] = value

        return json.dumps(log_record, ensure_ascii=False, default=str)


def setup_logging():
    """
    Configure the `catalog` and uvicorn loggers
    """
    log_path = settings.BASE_DIR / settings.LOG_DIR
    if not log_path.exists():
        log_path.mkdir(parents=True, exist_ok=True)

    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    formatter_name = "json" if settings.LOG_JSON_FORMAT else "standard"

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,  # keep uvicorn's loggers alive

        "formatters": {
            "standard": {
                "format": "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "json": {
                "()": JSONFormatter,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },

        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": formatter_name,
                "stream": sys.stdout,
            },
            "file_info": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": log_level,
                "formatter": formatter_name,
                "filename": log_path / "app.log",
                "maxBytes": settings.LOG_MAX_BYTES,
                "backupCount": settings.LOG_BACKUP_COUNT,
                "encoding": "utf-8",
            },
            "file_error": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": "ERROR",
                "formatter": formatter_name,
                "filename": log_path / "error.log",
                "maxBytes": settings.LOG_MAX_BYTES,
                "backupCount": settings.LOG_BACKUP_COUNT,
                "encoding": "utf-8",
            }
        },

        "loggers": {
            "catalog": {
                "handlers": ["console", "file_info", "file_error"],
                "level": log_level,
                "propagate": False,
            },
            "uvicorn": {
                "handlers": ["console", "file_info"],
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.access": {
                "handlers": ["console", "file_info"],
                "level": "INFO",
                "propagate": False,
            },
            "uvicorn.error": {
                "handlers": ["console", "file_error"],
                "level": "INFO",
                "propagate": False,
            },
        }
    }

    logging.config.dictConfig(logging_config)
