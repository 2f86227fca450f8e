"""
弱伪随机数发生器（非密码学）

复现 C 库 random()/srandom() 的加性反馈发生器（TYPE_3：r[i] = r[i-31] + r[i-3]）。
仅用于填充密码模块自身的密钥材料和自检序列，真正的熵来自 EntropySource。

每个实例拥有独立状态，可随时重新播种；不存在进程级共享的发生器。
"""

import time
from typing import List, Optional


_DEGREE = 31
_SEPARATION = 3
_DISCARD = _DEGREE * 10
_MASK32 = 0xFFFFFFFF
_MODULUS = 2147483647


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _trunc_divmod(a: int, b: int):
    """C 语义的整数除法（向零截断）"""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


def time_seed() -> int:
    """以当前时间（秒）作为种子，对应 srandom(time(NULL))"""
    return int(time.time()) & _MASK32


class WeakRandom:
    """
    可重新播种的弱伪随机数发生器

    输出 31 位非负整数，与 glibc random() 逐值一致，
    以便固定种子下的自检校验和可以复现。
    """

    def __init__(self, seed: Optional[int] = None):
        self._state: List[int] = [0] * _DEGREE
        self._front = _SEPARATION
        self._rear = 0
        self.seed(time_seed() if seed is None else seed)

    def seed(self, seed: int):
        """
        重新播种（srandom 语义：种子 0 等价于 1）

        Args:
            seed: 32 位无符号种子
        """
        word = _to_int32(seed)
        if word == 0:
            word = 1
        state = [word & _MASK32]
        for _ in range(1, _DEGREE):
            hi, lo = _trunc_divmod(word, 127773)
            word = 16807 * lo - 2836 * hi
            if word < 0:
                word += _MODULUS
            state.append(word & _MASK32)
        self._state = state
        self._front = _SEPARATION
        self._rear = 0
        for _ in range(_DISCARD):
            self._step()

    def _step(self) -> int:
        state = self._state
        value = (state[self._front] + state[self._rear]) & _MASK32
        state[self._front] = value
        self._front = (self._front + 1) % _DEGREE
        self._rear = (self._rear + 1) % _DEGREE
        return value >> 1

    def random(self) -> int:
        """返回 [0, 2^31) 区间内的下一个值"""
        return self._step()

    def draw(self, count: int) -> List[int]:
        """连续抽取 count 个值"""
        return [self._step() for _ in range(count)]
