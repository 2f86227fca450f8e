"""
可续接的流密码对象

把同步向量封装在对象中，连续多次调用即可续接同一条密钥流。
"""

from dataclasses import dataclass

from .gost_cipher import BytesLike, GostCipher


@dataclass
class CounterStream:
    """
    计数器式伽马流

    属性:
        cipher: 已设置密钥的 GostCipher
        sync_vector: 当前同步向量（每次 process 后推进）
    """
    cipher: GostCipher
    sync_vector: int

    def process(self, data: BytesLike) -> bytearray:
        """加密或解密（同一操作），并推进同步向量"""
        buf, self.sync_vector = self.cipher.stream_counter(data, self.sync_vector)
        return buf


@dataclass
class FeedbackStream:
    """
    反馈式伽马流

    加密端和解密端各自持有一个对象，从相同的初始同步向量出发。
    """
    cipher: GostCipher
    sync_vector: int

    def encrypt(self, data: BytesLike) -> bytearray:
        buf, self.sync_vector = self.cipher.stream_feedback(data, self.sync_vector, True)
        return buf

    def decrypt(self, data: BytesLike) -> bytearray:
        buf, self.sync_vector = self.cipher.stream_feedback(data, self.sync_vector, False)
        return buf
