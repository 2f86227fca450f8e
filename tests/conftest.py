"""
Pytest 配置文件 - Hypothesis 属性测试配置与共享 Fixtures

配置 Hypothesis 库进行属性测试，默认每个属性测试运行 100 次迭代。
"""

import os
import sys

import pytest

# 确保项目根目录在路径中
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from hypothesis import settings, Verbosity, Phase

from crypton.core.entropy import EntropySource
from crypton.core.gost_cipher import GostCipher


# 默认配置：100次迭代
settings.register_profile(
    "default",
    max_examples=100,
    verbosity=Verbosity.normal,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.target],
    deadline=None,  # 纯 Python 分组运算较慢
)

# CI 配置：50次迭代（更快）
settings.register_profile(
    "ci",
    max_examples=50,
    verbosity=Verbosity.normal,
    deadline=None,
)

# 开发配置：10次迭代（快速验证）
settings.register_profile(
    "dev",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)

# 详细配置：200次迭代（更彻底）
settings.register_profile(
    "thorough",
    max_examples=200,
    verbosity=Verbosity.normal,
    deadline=None,
)

# 根据环境变量选择配置
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))


# ============ 共享 Fixtures ============

@pytest.fixture
def fixed_cipher():
    """固定种子（0）初始化的引擎，对应参考向量"""
    cipher = GostCipher()
    cipher.initialize(False)
    return cipher


@pytest.fixture
def counting_entropy():
    """记录读取次数的熵源，底层仍为 os.urandom"""
    calls = []

    def reader(n):
        calls.append(n)
        return os.urandom(n)

    source = EntropySource(reader=reader)
    source.calls = calls
    return source


@pytest.fixture
def failing_entropy():
    """始终读取失败的熵源"""
    def reader(n):
        raise OSError("entropy device unavailable")
    return EntropySource(reader=reader)


@pytest.fixture(scope="session")
def initialized_rng():
    """已初始化的 GostRandom（会话级别，避免重复自检）"""
    from crypton.generators.prng import GostRandom
    rng = GostRandom()
    rng.initialize()
    return rng


# ============ Hypothesis 自定义策略 ============

def key_words():
    """8 个 32 位密钥字"""
    from hypothesis import strategies as st
    return st.lists(st.integers(min_value=0, max_value=0xFFFFFFFF), min_size=8, max_size=8)


def substitution_tables():
    """8 x 16 替换表"""
    from hypothesis import strategies as st
    row = st.lists(st.integers(min_value=0, max_value=15), min_size=16, max_size=16)
    return st.lists(row, min_size=8, max_size=8)


def sync_vectors():
    """64 位同步向量"""
    from hypothesis import strategies as st
    return st.integers(min_value=0, max_value=0xFFFFFFFFFFFFFFFF)
