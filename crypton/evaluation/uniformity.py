"""
符号序列均匀性检验

对长度 N、字母表大小 M 的序列：
1. 频数检验：每个符号的出现次数 ∈ [(N − 2.58·√(N(M−1)))/M, (N + 2.58·√(N(M−1)))/M]
   （99% 置信度的正态近似）
2. 卡方检验：χ² = Σ (m_i − N/M)² / (N/M) ∈ [(√(2M−1) − 2.33)²/2, (√(2M−1) + 2.33)²/2]
"""

import math
from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np
from scipy import stats


COUNT_QUANTILE = 2.58
CHI2_QUANTILE = 2.33


@dataclass
class SymbolUniformityTest:
    """
    均匀性检验

    属性:
        alphabet: 字母表（字符互不相同）
        length: 被检验序列的长度 N
    """
    alphabet: str
    length: int

    def __post_init__(self):
        if len(set(self.alphabet)) != len(self.alphabet) or len(self.alphabet) < 2:
            raise ValueError("字母表至少需要 2 个互不相同的字符")
        if self.length <= 0:
            raise ValueError(f"序列长度必须为正数: {self.length}")
        self._index = {ch: i for i, ch in enumerate(self.alphabet)}

    @property
    def count_bounds(self) -> Tuple[float, float]:
        """单个符号频数的上下界"""
        n = self.length
        m = len(self.alphabet)
        spread = COUNT_QUANTILE * math.sqrt(n * (m - 1.0))
        return (n - spread) / m, (n + spread) / m

    @property
    def chi2_bounds(self) -> Tuple[float, float]:
        """卡方统计量的上下界"""
        root = math.sqrt(2.0 * len(self.alphabet) - 1.0)
        return (root - CHI2_QUANTILE) ** 2 / 2.0, (root + CHI2_QUANTILE) ** 2 / 2.0

    def symbol_counts(self, sequence: str) -> np.ndarray:
        """统计每个字母表符号的出现次数"""
        indices = np.fromiter((self._index[ch] for ch in sequence), dtype=np.int64,
                              count=len(sequence))
        return np.bincount(indices, minlength=len(self.alphabet))

    def evaluate(self, sequence: str) -> Dict[str, float]:
        """
        计算检验统计量

        Args:
            sequence: 待检验的序列（长度须等于 length）

        Returns:
            result: {'min_count', 'max_count', 'chi2', 'p_value', 'counts_pass', 'chi2_pass', 'passed'}
        """
        if len(sequence) != self.length:
            raise ValueError(f"序列长度 {len(sequence)} 与检验长度 {self.length} 不一致")

        counts = self.symbol_counts(sequence)
        low, high = self.count_bounds
        counts_pass = bool(((counts >= low) & (counts <= high)).all())

        # p_value 仅用于报告，门控只看 chi2_bounds
        chi2, p_value = stats.chisquare(counts)
        g1, g2 = self.chi2_bounds
        chi2_pass = bool(g1 <= chi2 <= g2)

        return {
            'min_count': int(counts.min()),
            'max_count': int(counts.max()),
            'chi2': float(chi2),
            'p_value': float(p_value),
            'counts_pass': counts_pass,
            'chi2_pass': chi2_pass,
            'passed': counts_pass and chi2_pass,
        }

    def passes(self, sequence: str) -> bool:
        """频数检验与卡方检验均通过"""
        return self.evaluate(sequence)['passed']
