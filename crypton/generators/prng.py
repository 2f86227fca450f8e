# -*- coding: utf-8 -*-
"""
质量门控伪随机数发生器

以 GOST 28147-89 反馈式伽马模式加密随机缓冲区，得到随机字节序列。

初始化流程：
1. 以固定种子初始化密码模块
2. 计算算法校验和并与参考值比较（不一致 → IntegrityCheckError）
3. 以时间种子重新初始化密码模块
4. 由弱发生器 32 位 + 熵源 32 位构造同步向量，经简单替换加密一次，
   置位平衡不合格则重试
5. 生成第一个随机缓冲区

每个缓冲区必须通过单比特频率、四位模式频率、游程三项测试才对外可见，
否则整体重新生成。
"""

from typing import Dict, Optional

import numpy as np

from ..config import GeneratorConfig
from ..core.entropy import EntropySource
from ..core.gost_cipher import MASK32, GostCipher
from ..core.weak_random import WeakRandom
from ..evaluation.randomness_tests import RandomnessTests
from ..utils.logger import get_logger


logger = get_logger(__name__)

RANDOM_BUFFER_SIZE = 2500  # 20000 位，与门控阈值对应
CHECKSUM_SYNC_VECTOR = 10781
CHECKSUM_WORDS = 100
CHECKSUM_MODULUS = (1 << 16) - 1


class GeneratorError(Exception):
    """随机数发生器错误基类"""
    pass


class IntegrityCheckError(GeneratorError):
    """算法自检校验和与参考值不一致（实现已损坏，不可恢复）"""
    pass


class QualityGateExhaustedError(GeneratorError):
    """质量门控在允许的重试次数内未能通过"""
    pass


class GostRandom:
    """
    质量门控伪随机数发生器

    非线程安全：所有状态（密钥、同步向量、缓冲区、游标）归实例独占，
    跨线程使用需由调用方加锁。

    使用方法：
        rng = GostRandom()
        rng.initialize()
        value = rng.next_u32()
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        entropy: Optional[EntropySource] = None,
        weak_rng: Optional[WeakRandom] = None,
    ):
        """
        Args:
            config: 发生器配置
            entropy: 强熵源（默认按 config.entropy_device 构造）
            weak_rng: 弱发生器（自检前会被重新播种）
        """
        self.config = config or GeneratorConfig()
        self.entropy = entropy or EntropySource(device=self.config.entropy_device)
        self._weak = weak_rng or WeakRandom(0)
        self._cipher = GostCipher()
        self._sync_vector = 0
        self._buffer = bytearray(RANDOM_BUFFER_SIZE)
        self._cursor = RANDOM_BUFFER_SIZE
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    # ------------------------------------------------------------------ #
    # 初始化
    # ------------------------------------------------------------------ #

    def initialize(self, seed: Optional[int] = None):
        """
        初始化发生器

        Args:
            seed: 第 3 步重新播种时使用的种子（默认取当前时间）

        Raises:
            IntegrityCheckError: 自检校验和不一致
            EntropyUnavailableError: 熵源不可用
            QualityGateExhaustedError: 重试次数耗尽
        """
        checksum = self.compute_checksum()
        if checksum != self.config.reference_checksum:
            logger.error(
                "算法校验和错误: 0x%012X != 0x%012X",
                checksum, self.config.reference_checksum,
            )
            raise IntegrityCheckError(
                f"校验和 0x{checksum:012X} 与参考值 0x{self.config.reference_checksum:012X} 不一致"
            )

        self._cipher.initialize(True, rng=self._weak, seed=seed)
        self._sync_vector = self._seed_sync_vector()
        self._initialized = True
        self._refill()
        logger.info("随机数发生器初始化完成")

    def compute_checksum(self) -> int:
        """
        计算算法校验和（固定种子，结果应等于参考值）

        会重置发生器状态，之后需重新 initialize()。

        Returns:
            checksum: 64 位校验和
        """
        self._initialized = False
        self._cipher.initialize(False, rng=self._weak)
        self._sync_vector = CHECKSUM_SYNC_VECTOR

        # 填充并加密，随后的第一次读取会触发重新生成
        self._buffer, self._sync_vector = self._cipher.stream_feedback(
            self._source_bytes(), self._sync_vector, True
        )
        self._cursor = RANDOM_BUFFER_SIZE

        s0 = 0
        s1 = 0
        for _ in range(CHECKSUM_WORDS):
            s0 = ((s0 + self._read_int(4)) & MASK32) % CHECKSUM_MODULUS
            s1 = (s1 + s0) % CHECKSUM_MODULUS
        return s0 | ((CHECKSUM_MODULUS - s1) << 32)

    def quality_report(self) -> Dict[str, float]:
        """
        当前随机缓冲区的门控指标（见 RandomnessTests.evaluate_buffer）

        compute_checksum() 之后即为自检过程中第一个通过门控的缓冲区。
        """
        return RandomnessTests.evaluate_buffer(self._buffer)

    def _seed_sync_vector(self) -> int:
        attempts = 0
        max_attempts = self.config.max_attempts
        while True:
            attempts += 1
            n1 = self._weak.random()
            n2 = self.entropy.read_u32()
            s = self._cipher.encrypt_u64(n1 | (n2 << 32))
            if RandomnessTests.bit_balance_ok(s, 64, self.config.seed_balance_tolerance):
                return s
            logger.debug("同步向量置位不平衡，重新生成（第 %d 次）", attempts)
            if max_attempts is not None and attempts >= max_attempts:
                raise QualityGateExhaustedError(
                    f"同步向量在 {max_attempts} 次尝试内未通过平衡检验"
                )

    # ------------------------------------------------------------------ #
    # 缓冲区
    # ------------------------------------------------------------------ #

    def _source_bytes(self) -> bytearray:
        """待加密的原始数据：初始化前取自弱发生器，之后取自熵源"""
        if self._initialized:
            return bytearray(self.entropy.read(RANDOM_BUFFER_SIZE))
        words = self._weak.draw(RANDOM_BUFFER_SIZE // 4)
        return bytearray(np.asarray(words, dtype='<u4').tobytes())

    def _refill(self):
        attempts = 0
        max_attempts = self.config.max_attempts
        while True:
            attempts += 1
            buf, self._sync_vector = self._cipher.stream_feedback(
                self._source_bytes(), self._sync_vector, True
            )
            if RandomnessTests.passes_all(buf):
                break
            logger.debug("随机缓冲区未通过质量检验，重新生成（第 %d 次）", attempts)
            if max_attempts is not None and attempts >= max_attempts:
                raise QualityGateExhaustedError(
                    f"随机缓冲区在 {max_attempts} 次尝试内未通过质量检验"
                )
        self._buffer = buf
        self._cursor = 0

    def _next_byte(self) -> int:
        if self._cursor >= RANDOM_BUFFER_SIZE:
            self._refill()
        value = self._buffer[self._cursor]
        self._cursor += 1
        return value

    def _read_int(self, width: int) -> int:
        value = 0
        for i in range(width):
            value |= self._next_byte() << (8 * i)
        return value

    def _check_ready(self):
        if not self._initialized:
            raise GeneratorError("随机数发生器尚未初始化，请先调用 initialize()")

    # ------------------------------------------------------------------ #
    # 对外接口
    # ------------------------------------------------------------------ #

    def next_byte(self) -> int:
        """8 位随机数"""
        self._check_ready()
        return self._next_byte()

    def next_u32(self) -> int:
        """32 位随机数（小端拼接）"""
        self._check_ready()
        return self._read_int(4)

    def next_u64(self) -> int:
        """64 位随机数（小端拼接）"""
        self._check_ready()
        return self._read_int(8)

    def random_bytes(self, n: int) -> bytes:
        """n 个随机字节"""
        if n < 0:
            raise ValueError(f"字节数不能为负: {n}")
        self._check_ready()
        return bytes(self._next_byte() for _ in range(n))
