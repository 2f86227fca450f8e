# -*- coding: utf-8 -*-
"""
crypton - GOST 28147-89 密码原语库

包含：
1. GostCipher: 分组密码引擎（简单替换、计数器伽马、反馈伽马、完整性标签）
2. GostRandom: 以反馈伽马模式驱动、带统计质量门控的伪随机数发生器
3. SequenceGenerator: 基于 GostRandom 的随机符号序列（口令）发生器

版本: 1.0.0
"""

from .core import (
    BlockLengthError,
    CipherError,
    CounterStream,
    EntropySource,
    EntropyUnavailableError,
    FeedbackStream,
    GostCipher,
    KeyMaterialError,
    WeakRandom,
)
from .generators import (
    GeneratorError,
    GostRandom,
    IntegrityCheckError,
    QualityGateExhaustedError,
    SequenceGenerator,
)

__version__ = '1.0.0'

__all__ = [
    '__version__',
    'GostCipher',
    'CounterStream',
    'FeedbackStream',
    'WeakRandom',
    'EntropySource',
    'GostRandom',
    'SequenceGenerator',
    # Errors
    'CipherError',
    'BlockLengthError',
    'KeyMaterialError',
    'EntropyUnavailableError',
    'GeneratorError',
    'IntegrityCheckError',
    'QualityGateExhaustedError',
]
