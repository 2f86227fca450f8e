"""
crypton 命令行入口
==================

库的便捷包装，不属于库接口本身。

使用方法:
    # 算法自检（附第一个通过门控的缓冲区指标）
    python main.py selftest

    # 生成口令
    python main.py password --length 8 --count 3

    # 运行加密演示
    python main.py demo
"""

import argparse
import sys

import yaml

from .config import CryptonConfig, load_config
from .core.entropy import EntropyUnavailableError
from .core.gost_cipher import GostCipher
from .generators.prng import GeneratorError, GostRandom
from .generators.sequence import SequenceGenerator


def run_selftest(config: CryptonConfig) -> bool:
    """计算算法校验和并与参考值比较，打印缓冲区门控指标"""
    rng = GostRandom(config.generator)
    checksum = rng.compute_checksum()
    ok = checksum == config.generator.reference_checksum
    print(f"校验和: 0x{checksum:012X}")
    print(f"参考值: 0x{config.generator.reference_checksum:012X}")

    metrics = rng.quality_report()
    print("\n随机缓冲区:")
    print(f"  单比特频率: {metrics['monobit_ones']} {'✓' if metrics['monobit_pass'] else '✗'}")
    print(f"  四位模式 X: {metrics['poker_x']:.2f} {'✓' if metrics['poker_pass'] else '✗'}")
    print(f"  最长游程: {metrics['longest_run']} {'✓' if metrics['runs_pass'] else '✗'}")
    print(f"  信息熵: {metrics['entropy']:.4f} bits/byte")

    print(f"\n状态: {'✓ 通过' if ok else '✗ 失败'}")
    return ok


def run_password(config: CryptonConfig, length: int, count: int) -> bool:
    """生成 count 个长度为 length 的口令"""
    rng = GostRandom(config.generator)
    gen = SequenceGenerator(config.sequence, rng=rng)
    for _ in range(count):
        print(gen.generate_sequence(length))
    return True


def run_demo() -> bool:
    """以固定种子密钥演示三种模式和完整性标签"""
    cipher = GostCipher()
    cipher.initialize(False)
    sync = 0x0123456789ABCDEF

    block = cipher.encrypt_block(b"12345678", True)
    print(f"简单替换: 12345678 -> {block.hex()}")
    restored = cipher.encrypt_block(block, False)
    print(f"  解密: {bytes(restored).decode()}")

    message = b"gamma mode message"
    gamma, _ = cipher.stream_counter(message, sync)
    print(f"计数器式伽马: {gamma.hex()}")
    feedback, _ = cipher.stream_feedback(message, sync, True)
    print(f"反馈式伽马: {feedback.hex()}")
    print(f"完整性标签: 0x{cipher.integrity_tag(message):08X}")
    return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='crypton: GOST 28147-89 密码引擎与随机数发生器',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
    python main.py selftest              # 算法自检
    python main.py password              # 生成一个 8 位口令
    python main.py password --length 12 --count 5
    python main.py demo                  # 运行加密演示
        """
    )
    parser.add_argument('--config', type=str, default=None, help='YAML 配置文件路径')

    subparsers = parser.add_subparsers(dest='command', help='可用命令')

    subparsers.add_parser('selftest', help='算法自检')

    password_parser = subparsers.add_parser('password', help='生成随机口令')
    password_parser.add_argument('--length', type=int, default=8, help='口令长度')
    password_parser.add_argument('--count', type=int, default=1, help='口令个数')

    subparsers.add_parser('demo', help='运行加密演示')

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else CryptonConfig()
        if args.command == 'selftest':
            success = run_selftest(config)
        elif args.command == 'password':
            success = run_password(config, args.length, args.count)
        elif args.command == 'demo':
            success = run_demo()
        else:
            parser.print_help()
            return 0
    except (GeneratorError, EntropyUnavailableError) as e:
        print(f"错误: {e}", file=sys.stderr)
        return 1
    except (ValueError, OSError, yaml.YAMLError) as e:
        print(f"配置错误: {e}", file=sys.stderr)
        return 1

    return 0 if success else 1
