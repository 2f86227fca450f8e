"""
强随机熵源

默认使用 os.urandom；也可以指定设备文件（如 /dev/urandom）或注入读取函数（测试用）。
读取失败或读取不足均视为致命错误，抛出 EntropyUnavailableError，不做重试。
"""

import os
from typing import Callable, Optional

from ..utils.logger import get_logger


logger = get_logger(__name__)


class EntropyUnavailableError(Exception):
    """熵源无法打开或读取时抛出此异常"""
    pass


class EntropySource:
    """
    熵源

    属性:
        device: 设备文件路径；为 None 时使用 os.urandom
        reader: 自定义读取函数 reader(n) -> bytes，优先于 device
    """

    def __init__(
        self,
        device: Optional[str] = None,
        reader: Optional[Callable[[int], bytes]] = None,
    ):
        self.device = device
        self.reader = reader

    def read(self, n: int) -> bytes:
        """
        读取 n 个强随机字节

        Args:
            n: 字节数

        Returns:
            data: 长度为 n 的字节串

        Raises:
            EntropyUnavailableError: 熵源不可用或返回数据不足
        """
        try:
            if self.reader is not None:
                data = self.reader(n)
            elif self.device is not None:
                with open(self.device, 'rb') as f:
                    data = f.read(n)
            else:
                data = os.urandom(n)
        except OSError as e:
            logger.error("熵源读取失败: %s", e)
            raise EntropyUnavailableError(f"熵源读取失败: {e}") from e

        if len(data) < n:
            raise EntropyUnavailableError(
                f"熵源数据不足：需要 {n} 字节，实际 {len(data)} 字节"
            )
        return bytes(data[:n])

    def read_u32(self) -> int:
        """读取一个 32 位无符号整数（小端）"""
        return int.from_bytes(self.read(4), 'little')
