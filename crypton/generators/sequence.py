"""
随机符号序列发生器（口令发生器）

从 GostRandom 逐字节取值，按 byte % M 映射到字母表，批量生成符号缓冲区；
缓冲区必须通过均匀性检验（频数 + 卡方）才被使用，否则整体丢弃重新生成。
"""

from typing import Optional

from ..config import SequenceConfig
from ..evaluation.uniformity import SymbolUniformityTest
from ..utils.logger import get_logger
from .prng import GostRandom, QualityGateExhaustedError


logger = get_logger(__name__)


class SequenceGenerator:
    """
    符号序列发生器

    非线程安全。构造时会初始化所持有的 GostRandom（若尚未初始化）。

    使用方法：
        gen = SequenceGenerator()
        password = gen.generate_sequence(8)
    """

    def __init__(
        self,
        config: Optional[SequenceConfig] = None,
        rng: Optional[GostRandom] = None,
    ):
        self.config = config or SequenceConfig()
        self.alphabet = self.config.alphabet
        self.buffer_length = self.config.buffer_length
        self.rng = rng or GostRandom()
        if not self.rng.initialized:
            self.rng.initialize()
        self._uniformity = SymbolUniformityTest(self.alphabet, self.buffer_length)
        self._symbols = ''
        self._cursor = self.buffer_length

    def _produce(self):
        """生成新的符号缓冲区，直到通过均匀性检验"""
        attempts = 0
        max_attempts = self.config.max_attempts
        m = len(self.alphabet)
        while True:
            attempts += 1
            symbols = ''.join(
                self.alphabet[self.rng.next_byte() % m]
                for _ in range(self.buffer_length)
            )
            if self._uniformity.passes(symbols):
                break
            logger.debug("符号缓冲区未通过均匀性检验，重新生成（第 %d 次）", attempts)
            if max_attempts is not None and attempts >= max_attempts:
                raise QualityGateExhaustedError(
                    f"符号缓冲区在 {max_attempts} 次尝试内未通过均匀性检验"
                )
        self._symbols = symbols
        self._cursor = 0

    def next_symbol(self) -> str:
        """取下一个符号，缓冲区耗尽时重新生成"""
        if self._cursor >= self.buffer_length:
            self._produce()
        ch = self._symbols[self._cursor]
        self._cursor += 1
        return ch

    def generate_sequence(self, length: int) -> str:
        """
        生成长度为 length 的随机符号序列

        Args:
            length: 序列长度

        Returns:
            sequence: 由字母表字符组成的字符串
        """
        if length < 0:
            raise ValueError(f"序列长度不能为负: {length}")
        return ''.join(self.next_symbol() for _ in range(length))
