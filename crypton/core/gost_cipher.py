# -*- coding: utf-8 -*-
"""
GOST 28147-89 分组密码引擎

实现：
1. 基本步（main step）：模 (2^32 - 1) 加密钥、8 路 4 位替换、循环左移 11 位、异或
2. 循环 32-З / 32-Р / 16-З
3. 四种工作模式：
   - 简单替换（encrypt_block，ECB 行为）
   - 计数器式伽马（stream_counter）
   - 反馈式伽马（stream_feedback）
   - 仿冒插入 / 完整性标签（integrity_tag）

注意：
- 密钥加法采用模 (2^32 - 1)，与标准的 2^32 不同，自检校验和依赖于此。
- 同步向量 S 显式作为参数传入并随结果返回，引擎内部不保存流状态。
- 实例不是线程安全的；跨线程使用需由调用方加锁。
"""

from typing import List, Optional, Sequence, Tuple, Union

from .weak_random import WeakRandom, time_seed


BLOCK_SIZE = 8
KEY_WORDS = 8
TABLE_ROWS = 8
TABLE_COLUMNS = 16

MASK32 = 0xFFFFFFFF
KEY_ADD_MODULUS = 0xFFFFFFFF  # 2^32 - 1

# 计数器模式常量 C1 / C2
COUNTER_C1 = 0x01010101
COUNTER_C2 = 0x01010104

# 密钥序号顺序
_FORWARD = tuple(range(KEY_WORDS))
_REVERSE = tuple(reversed(_FORWARD))
_ORDER_32Z = _FORWARD * 3 + _REVERSE
_ORDER_32R = _FORWARD + _REVERSE * 3
_ORDER_16Z = _FORWARD * 2

BytesLike = Union[bytes, bytearray, memoryview]


class CipherError(Exception):
    """密码引擎错误基类"""
    pass


class BlockLengthError(CipherError, ValueError):
    """简单替换模式下数据长度不是 8 字节的整数倍"""
    pass


class KeyMaterialError(CipherError, ValueError):
    """密钥或替换表的形状/取值非法"""
    pass


def _as_buffer(data: BytesLike) -> bytearray:
    """bytearray 原地修改，其他字节类对象复制为新的 bytearray"""
    if isinstance(data, bytearray):
        return data
    return bytearray(data)


class GostCipher:
    """
    GOST 28147-89 密码引擎

    使用方法：
        cipher = GostCipher()
        cipher.initialize()              # 或 set_key() + set_substitution_table()
        cipher.encrypt_block(buf, True)
    """

    def __init__(self):
        self._key: List[int] = [0] * KEY_WORDS
        self._table: List[List[int]] = [[0] * TABLE_COLUMNS for _ in range(TABLE_ROWS)]
        self._rebuild_lookup()

    # ------------------------------------------------------------------ #
    # 密钥材料
    # ------------------------------------------------------------------ #

    def initialize(
        self,
        use_random_seed: bool = True,
        rng: Optional[WeakRandom] = None,
        seed: Optional[int] = None,
    ) -> WeakRandom:
        """
        用弱伪随机发生器填充密钥和替换表

        Args:
            use_random_seed: False 时以固定种子 0 播种（用于复现自检），
                True 时以当前时间（或 seed）播种
            rng: 可选的外部弱发生器；会被重新播种并继续被调用方使用
            seed: use_random_seed=True 时的显式种子（测试用）

        Returns:
            rng: 实际使用的弱发生器
        """
        if use_random_seed:
            seed_value = time_seed() if seed is None else seed
        else:
            seed_value = 0

        if rng is None:
            rng = WeakRandom(seed_value)
        else:
            rng.seed(seed_value)

        key = []
        table = []
        for _ in range(KEY_WORDS):
            key.append(rng.random() % 0xFFFFFFFF)
            table.append([rng.random() % 0xF for _ in range(TABLE_COLUMNS)])

        self._key = key
        self._table = table
        self._rebuild_lookup()
        return rng

    def set_key(self, words: Sequence[int]):
        """
        设置密钥

        Args:
            words: 8 个 32 位无符号整数
        """
        words = list(words)
        if len(words) != KEY_WORDS:
            raise KeyMaterialError(f"密钥必须为 {KEY_WORDS} 个 32 位字，实际 {len(words)} 个")
        for w in words:
            if not isinstance(w, int) or not 0 <= w <= MASK32:
                raise KeyMaterialError(f"密钥字超出 32 位无符号范围: {w!r}")
        self._key = words

    def set_substitution_table(self, table: Sequence[Sequence[int]]):
        """
        设置替换表

        Args:
            table: 8 x 16 矩阵，取值 [0, 15]
        """
        rows = [list(row) for row in table]
        if len(rows) != TABLE_ROWS or any(len(row) != TABLE_COLUMNS for row in rows):
            raise KeyMaterialError(f"替换表必须为 {TABLE_ROWS}x{TABLE_COLUMNS}")
        for row in rows:
            for v in row:
                if not isinstance(v, int) or not 0 <= v <= 0xF:
                    raise KeyMaterialError(f"替换表元素必须在 [0, 15] 内: {v!r}")
        self._table = rows
        self._rebuild_lookup()

    @property
    def key(self) -> Tuple[int, ...]:
        return tuple(self._key)

    @property
    def substitution_table(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(tuple(row) for row in self._table)

    def copy(self) -> 'GostCipher':
        """复制密钥材料，返回独立的引擎"""
        other = GostCipher()
        other._key = list(self._key)
        other._table = [list(row) for row in self._table]
        other._rebuild_lookup()
        return other

    def _rebuild_lookup(self):
        """把相邻两路 4 位替换合并为 4 张 256 项的字节替换表"""
        lookup = []
        for pair in range(4):
            low_row = self._table[2 * pair]
            high_row = self._table[2 * pair + 1]
            shift = 8 * pair
            lookup.append([
                (low_row[b & 0xF] | (high_row[b >> 4] << 4)) << shift
                for b in range(256)
            ])
        self._lookup = lookup

    # ------------------------------------------------------------------ #
    # 基本步与循环
    # ------------------------------------------------------------------ #

    def _main_step(self, block: int, key_index: int) -> int:
        n1 = block & MASK32
        n2 = block >> 32

        s = (n1 + self._key[key_index]) % KEY_ADD_MODULUS

        t0, t1, t2, t3 = self._lookup
        s = (t0[s & 0xFF] | t1[(s >> 8) & 0xFF]
             | t2[(s >> 16) & 0xFF] | t3[s >> 24])

        s = ((s << 11) | (s >> 21)) & MASK32
        s ^= n2

        return (n1 << 32) | s

    def _run(self, block: int, order) -> int:
        for key_index in order:
            block = self._main_step(block, key_index)
        return block

    @staticmethod
    def _swap_halves(block: int) -> int:
        return ((block & MASK32) << 32) | (block >> 32)

    def _cycle_32z(self, block: int) -> int:
        return self._swap_halves(self._run(block, _ORDER_32Z))

    def _cycle_32r(self, block: int) -> int:
        return self._swap_halves(self._run(block, _ORDER_32R))

    def _cycle_16z(self, block: int) -> int:
        return self._run(block, _ORDER_16Z)

    def encrypt_u64(self, block: int) -> int:
        """对单个 64 位整数执行 32-З 循环"""
        return self._cycle_32z(block)

    # ------------------------------------------------------------------ #
    # 工作模式
    # ------------------------------------------------------------------ #

    def encrypt_block(self, data: BytesLike, encrypting: bool = True) -> bytearray:
        """
        简单替换模式（各分组独立，无链接）

        Args:
            data: 长度为 8 的整数倍的数据；bytearray 会被原地修改
            encrypting: True 加密（32-З），False 解密（32-Р）

        Returns:
            buffer: 变换后的数据

        Raises:
            BlockLengthError: 长度不是 8 的整数倍（数据不被修改）
        """
        if len(data) % BLOCK_SIZE != 0:
            raise BlockLengthError(f"简单替换模式要求长度为 8 的整数倍，实际 {len(data)} 字节")

        buf = _as_buffer(data)
        cycle = self._cycle_32z if encrypting else self._cycle_32r
        for i in range(0, len(buf), BLOCK_SIZE):
            block = int.from_bytes(buf[i:i + BLOCK_SIZE], 'little')
            buf[i:i + BLOCK_SIZE] = cycle(block).to_bytes(BLOCK_SIZE, 'little')
        return buf

    def _xor_tail(self, buf: bytearray, offset: int, gamma: int):
        """尾部（1..8 字节）与伽马分组的低位字节异或，不做填充"""
        tail = len(buf) - offset
        if tail <= 0:
            return
        gamma_bytes = gamma.to_bytes(BLOCK_SIZE, 'little')
        for j in range(tail):
            buf[offset + j] ^= gamma_bytes[j]

    def stream_counter(self, data: BytesLike, sync_vector: int) -> Tuple[bytearray, int]:
        """
        计数器式伽马模式（加密与解密为同一操作）

        循环条件为 "剩余长度严格大于一个分组"：当长度恰为 8 的整数倍时，
        最后一个完整分组按尾部处理，使用上一个计数器值的伽马（计数器不再推进）。

        Args:
            data: 任意长度数据；bytearray 会被原地修改
            sync_vector: 64 位同步向量

        Returns:
            (buffer, sync_vector): 变换后的数据与推进后的同步向量
        """
        buf = _as_buffer(data)
        s = self._cycle_32z(sync_vector & 0xFFFFFFFFFFFFFFFF)
        s0 = s & MASK32
        s1 = s >> 32

        offset = 0
        while offset + BLOCK_SIZE < len(buf):
            s0 = (s0 + COUNTER_C1) & MASK32
            s1 = ((s1 + COUNTER_C2 - 1) & MASK32) % 0xFFFFFFFF + 1
            s = s0 | (s1 << 32)
            block = int.from_bytes(buf[offset:offset + BLOCK_SIZE], 'little')
            block ^= self._cycle_32z(s)
            buf[offset:offset + BLOCK_SIZE] = block.to_bytes(BLOCK_SIZE, 'little')
            offset += BLOCK_SIZE

        if offset < len(buf):
            self._xor_tail(buf, offset, self._cycle_32z(s))
        return buf, s

    def stream_feedback(
        self,
        data: BytesLike,
        sync_vector: int,
        encrypting: bool = True,
    ) -> Tuple[bytearray, int]:
        """
        反馈式伽马模式（CFB 链接）

        每个完整分组之后，同步向量更新为密文分组：
        加密时取刚产生的密文，解密时取刚读入的密文。尾部不更新同步向量。

        Args:
            data: 任意长度数据；bytearray 会被原地修改
            sync_vector: 64 位同步向量
            encrypting: True 加密，False 解密

        Returns:
            (buffer, sync_vector): 变换后的数据与更新后的同步向量
        """
        buf = _as_buffer(data)
        s = sync_vector & 0xFFFFFFFFFFFFFFFF

        offset = 0
        while offset + BLOCK_SIZE < len(buf):
            block = int.from_bytes(buf[offset:offset + BLOCK_SIZE], 'little')
            out = block ^ self._cycle_32z(s)
            buf[offset:offset + BLOCK_SIZE] = out.to_bytes(BLOCK_SIZE, 'little')
            s = out if encrypting else block
            offset += BLOCK_SIZE

        if offset < len(buf):
            self._xor_tail(buf, offset, self._cycle_32z(s))
        return buf, s

    def integrity_tag(self, data: BytesLike) -> int:
        """
        生成 32 位完整性标签（仿冒插入）

        累加器初值为 0，每个分组（尾部补零）异或后经过 16-З 循环，
        返回最终累加器的低 32 位。

        Args:
            data: 任意长度数据（不被修改）

        Returns:
            tag: 32 位无符号整数
        """
        view = bytes(data)
        acc = 0
        for offset in range(0, len(view), BLOCK_SIZE):
            block = int.from_bytes(view[offset:offset + BLOCK_SIZE], 'little')
            acc = self._cycle_16z(acc ^ block)
        return acc & MASK32
