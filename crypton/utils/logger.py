"""
日志工具

所有 crypton 模块共用 "crypton" 日志器，级别由环境变量 CRYPTON_LOG_LEVEL 控制。
"""

import logging
import os


ROOT_LOGGER_NAME = "crypton"


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    获取 crypton 日志器（或其子日志器）

    首次调用时为根日志器 "crypton" 挂载 StreamHandler。

    Args:
        name: 日志器名称，通常传入模块的 __name__

    Returns:
        logger: logging.Logger 实例
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.hasHandlers():
        handler = logging.StreamHandler()
        formatter = logging.Formatter('[%(asctime)s][%(levelname)s][%(name)s] %(message)s')
        handler.setFormatter(formatter)
        root.addHandler(handler)
        level_name = os.getenv("CRYPTON_LOG_LEVEL", "WARNING").upper()
        root.setLevel(getattr(logging, level_name, logging.WARNING))
    return logging.getLogger(name)
