"""
核心密码模块
包含 GOST 28147-89 引擎、流对象、熵源和弱种子发生器
"""

from .gost_cipher import (
    GostCipher,
    CipherError,
    BlockLengthError,
    KeyMaterialError,
)
from .stream import CounterStream, FeedbackStream
from .entropy import EntropySource, EntropyUnavailableError
from .weak_random import WeakRandom

__all__ = [
    'GostCipher',
    'CipherError',
    'BlockLengthError',
    'KeyMaterialError',
    'CounterStream',
    'FeedbackStream',
    'EntropySource',
    'EntropyUnavailableError',
    'WeakRandom',
]
