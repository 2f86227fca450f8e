"""
日志工具测试模块。
"""

import logging

from crypton.utils.logger import ROOT_LOGGER_NAME, get_logger


def test_child_logger_name():
    logger = get_logger("crypton.generators.prng")
    assert logger.name == "crypton.generators.prng"


def test_root_has_handler():
    get_logger()
    assert logging.getLogger(ROOT_LOGGER_NAME).hasHandlers()


def test_retry_logged_at_debug(monkeypatch, caplog, initialized_rng):
    from crypton.config import SequenceConfig
    from crypton.evaluation.uniformity import SymbolUniformityTest
    from crypton.generators.sequence import SequenceGenerator

    calls = {'n': 0}
    original = SymbolUniformityTest.passes

    def flaky(self, sequence):
        calls['n'] += 1
        return calls['n'] > 1 and original(self, sequence)

    monkeypatch.setattr(SymbolUniformityTest, 'passes', flaky)
    gen = SequenceGenerator(SequenceConfig(max_attempts=None), rng=initialized_rng)
    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
        gen.next_symbol()
    assert any("均匀性检验" in r.getMessage() for r in caplog.records)
