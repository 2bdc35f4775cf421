# -*- coding: utf-8 -*-
"""
@File    : logger.py
@Desc    : 日志初始化, 控制台 + 轮转文件, 生产环境可切换 JSON 行格式
"""
import sys
import json
import logging
import logging.config
from typing import Any, Dict

from app.core.config import Settings, settings as default_settings


# LogRecord 自带属性, 其余字段视为 extra
_RESERVED_ATTRS = frozenset({
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "module",
    "msecs", "message", "msg", "name", "pathname", "process",
    "processName", "relativeCreated", "stack_info", "thread", "threadName",
    "taskName",
})


class JSONFormatter(logging.Formatter):
    """
    JSON 行格式化器，适用于生产环境日志收集
    """

    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        # logger.info("msg", extra={"blog_id": 1})
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and key not in log_record:
                log_record[key] = value

        return json.dumps(log_record, ensure_ascii=False, default=str)


def build_logging_config(settings: Settings) -> Dict[str, Any]:
    """根据配置生成 dictConfig 字典"""
    log_path = settings.BASE_DIR / settings.LOG_DIR
    log_level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO
    formatter_name = "json" if settings.LOG_JSON_FORMAT else "standard"

    def rotating(filename: str, level) -> Dict[str, Any]:
        return {
            "class": "logging.handlers.RotatingFileHandler",
            "level": level,
            "formatter": formatter_name,
            "filename": str(log_path / filename),
            "maxBytes": settings.LOG_MAX_BYTES,
            "backupCount": settings.LOG_BACKUP_COUNT,
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,  # 防止 uvicorn 日志被禁用
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
            "file_info": rotating("app.log", log_level),
            "file_error": rotating("error.log", "ERROR"),
        },
        "loggers": {
            # 所有 app.* 模块日志汇总到这里
            "app": {
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
        },
    }


def setup_logging(settings: Settings = default_settings):
    """
    初始化日志配置
    """
    log_path = settings.BASE_DIR / settings.LOG_DIR
    log_path.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(build_logging_config(settings))
