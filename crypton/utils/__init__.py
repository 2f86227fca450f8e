"""
工具模块

包含：
- get_logger: crypton 日志器
"""

from .logger import get_logger

__all__ = ['get_logger']
