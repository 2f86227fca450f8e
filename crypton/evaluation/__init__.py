"""
统计检验模块
"""

from .randomness_tests import RandomnessTests
from .uniformity import SymbolUniformityTest

__all__ = ['RandomnessTests', 'SymbolUniformityTest']
