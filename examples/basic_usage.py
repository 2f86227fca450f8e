#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
crypton 基础使用示例

演示密码引擎、可续接的流对象、随机数发生器和口令发生器
"""

import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from crypton import CounterStream, FeedbackStream, GostCipher, GostRandom, SequenceGenerator


def example_1_cipher_modes():
    """示例1：三种加密模式与完整性标签"""
    print("=" * 70)
    print("示例1：三种加密模式与完整性标签")
    print("=" * 70)

    cipher = GostCipher()
    cipher.initialize(True)

    data = bytearray(b"secret!!" * 4)
    cipher.encrypt_block(data, True)
    print(f"简单替换密文: {data.hex()}")
    cipher.encrypt_block(data, False)
    print(f"解密: {bytes(data)}")

    tag = cipher.integrity_tag(b"message to protect")
    print(f"完整性标签: 0x{tag:08X}")
    print()


def example_2_streams():
    """示例2：分段加密一条流"""
    print("=" * 70)
    print("示例2：分段加密一条流")
    print("=" * 70)

    cipher = GostCipher()
    cipher.initialize(True)
    sync = 0x1122334455667788

    sender = FeedbackStream(cipher, sync)
    receiver = FeedbackStream(cipher, sync)
    for chunk in (b"first chunk 16b!", b"second chunk 16!"):
        received = receiver.decrypt(sender.encrypt(chunk))
        print(f"  {chunk!r} -> {bytes(received)!r}")

    counter = CounterStream(cipher, sync)
    out = counter.process(b"counter mode")
    print(f"计数器式伽马: {out.hex()}")
    print()


def example_3_random():
    """示例3：随机数与口令"""
    print("=" * 70)
    print("示例3：随机数与口令")
    print("=" * 70)

    rng = GostRandom()
    rng.initialize()
    print(f"8 位: {rng.next_byte()}")
    print(f"32 位: {rng.next_u32()}")
    print(f"64 位: {rng.next_u64()}")

    gen = SequenceGenerator(rng=rng)
    for _ in range(3):
        print(f"口令: {gen.generate_sequence(8)}")
    print()


if __name__ == '__main__':
    example_1_cipher_modes()
    example_2_streams()
    example_3_random()
