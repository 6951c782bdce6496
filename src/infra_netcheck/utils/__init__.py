"""工具模块：结构化日志"""

from .logging import configure_logging, get_logger

__all__ = ['configure_logging', 'get_logger']
