# -*- coding: utf-8 -*-
"""
crypton 测试模块

测试文件组织：

密码引擎:
- test_weak_random.py              - 弱种子发生器（与 C 库 random() 逐值一致）
- test_gost_cipher.py              - 三种模式与完整性标签的参考向量、属性测试
- test_stream.py                   - 可续接的流对象
- test_entropy.py                  - 熵源

质量门控:
- test_randomness_tests.py         - 单比特 / 四位模式 / 游程测试
- test_uniformity.py               - 符号均匀性检验
- test_prng.py                     - 自检校验和、缓冲区重新生成
- test_sequence.py                 - 口令发生器

其他:
- test_config.py / test_logger.py / test_cli.py
- conftest.py                      - Hypothesis配置和共享fixtures

运行测试:
    HYPOTHESIS_PROFILE=dev pytest tests/
"""
