"""structlog 日誌設定"""

import logging
import sys
from typing import Optional

import structlog

from .config import settings


def configure_logging(debug: Optional[bool] = None, log_level: Optional[str] = None) -> None:
    """
    設置日誌

    未指定的參數使用全域 settings。匯入套件時不會自動呼叫，由應用程式決定。
    """
    if debug is None:
        debug = settings.debug
    if log_level is None:
        log_level = settings.log_level

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=log_level.upper())
    logging.getLogger().setLevel(log_level.upper())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer() if debug else structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )
