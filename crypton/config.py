# -*- coding: utf-8 -*-
"""
配置

默认值为固定参数；可通过 YAML 文件覆盖：

```yaml
generator:
  max_attempts: 1000
  entropy_device: /dev/urandom
sequence:
  alphabet: "0123456789abcdef"
  buffer_length: 1200
```
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml


ALPHANUMERIC_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

# 自检参考校验和（固定种子下的算法指纹）
REFERENCE_CHECKSUM = 0xA5DC00007F6B

DEFAULT_MAX_ATTEMPTS = 1000


@dataclass
class GeneratorConfig:
    """
    随机数发生器配置

    属性:
        max_attempts: 质量门控的最大重试次数（None 表示不设上限）
        seed_balance_tolerance: 同步向量置位平衡容差（占位宽的比例）
        reference_checksum: 自检参考校验和
        entropy_device: 熵源设备路径（None 时使用 os.urandom）
    """
    max_attempts: Optional[int] = DEFAULT_MAX_ATTEMPTS
    seed_balance_tolerance: float = 0.12
    reference_checksum: int = REFERENCE_CHECKSUM
    entropy_device: Optional[str] = None

    def __post_init__(self):
        if self.max_attempts is not None and self.max_attempts <= 0:
            raise ValueError(f"max_attempts 必须为正数或 None: {self.max_attempts}")
        if not 0.0 < self.seed_balance_tolerance <= 1.0:
            raise ValueError(f"seed_balance_tolerance 必须在 (0, 1] 内: {self.seed_balance_tolerance}")


@dataclass
class SequenceConfig:
    """
    符号序列发生器配置

    属性:
        alphabet: 字母表（2..256 个互不相同的字符）
        buffer_length: 符号缓冲区长度（None 时字母表少于 100 个字符取 1200，否则 2400）
        max_attempts: 均匀性检验的最大重试次数（None 表示不设上限）
    """
    alphabet: str = ALPHANUMERIC_ALPHABET
    buffer_length: Optional[int] = None
    max_attempts: Optional[int] = DEFAULT_MAX_ATTEMPTS

    def __post_init__(self):
        if len(self.alphabet) < 2 or len(set(self.alphabet)) != len(self.alphabet):
            raise ValueError("字母表至少需要 2 个互不相同的字符")
        if len(self.alphabet) > 256:
            raise ValueError(f"字母表最多 256 个字符（符号由单个字节取模得到），实际 {len(self.alphabet)} 个")
        if self.buffer_length is None:
            self.buffer_length = 1200 if len(self.alphabet) < 100 else 2400
        if self.buffer_length <= 0:
            raise ValueError(f"buffer_length 必须为正数: {self.buffer_length}")
        if self.max_attempts is not None and self.max_attempts <= 0:
            raise ValueError(f"max_attempts 必须为正数或 None: {self.max_attempts}")


@dataclass
class CryptonConfig:
    """完整配置"""
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    sequence: SequenceConfig = field(default_factory=SequenceConfig)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'CryptonConfig':
        """从字典构造配置，未知字段抛出 ValueError"""
        data = data or {}
        unknown = set(data) - {'generator', 'sequence'}
        if unknown:
            raise ValueError(f"未知配置节: {sorted(unknown)}")
        return cls(
            generator=_build(GeneratorConfig, data.get('generator')),
            sequence=_build(SequenceConfig, data.get('sequence')),
        )


def _build(config_cls, section: Optional[Dict[str, Any]]):
    section = section or {}
    allowed = {f.name for f in fields(config_cls)}
    unknown = set(section) - allowed
    if unknown:
        raise ValueError(f"{config_cls.__name__} 未知字段: {sorted(unknown)}")
    return config_cls(**section)


def load_config(config_path: Union[str, Path]) -> CryptonConfig:
    """
    加载 YAML 配置文件

    Args:
        config_path: 配置文件路径

    Returns:
        config: CryptonConfig
    """
    with open(config_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    return CryptonConfig.from_dict(data)
