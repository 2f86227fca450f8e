"""
随机数与符号序列发生器
"""

from .prng import (
    GostRandom,
    GeneratorError,
    IntegrityCheckError,
    QualityGateExhaustedError,
)
from .sequence import SequenceGenerator

__all__ = [
    'GostRandom',
    'GeneratorError',
    'IntegrityCheckError',
    'QualityGateExhaustedError',
    'SequenceGenerator',
]
