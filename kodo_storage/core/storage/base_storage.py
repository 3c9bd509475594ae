"""
存储抽象基类
定义统一的存储接口，任意存储后端（Kodo 或其他）都需实现，保证适配器可互换
"""

from abc import ABC, abstractmethod
from typing import BinaryIO


class BaseStorage(ABC):
    """存储抽象基类"""

    @abstractmethod
    def put(self, key: str, reader: BinaryIO, length: int, content_type: str) -> None:
        """
        上传数据流

        Args:
            key: 存储键
            reader: 二进制数据流
            length: 数据的准确字节数
            content_type: MIME类型

        Raises:
            StorageError: 上传失败时抛出，调用方需从头重试
        """

    @abstractmethod
    def put_file(self, key: str, local_path: str, content_type: str) -> None:
        """
        上传本地文件

        Raises:
            LocalFileNotFoundError: 本地文件不存在或不可读
            StorageError: 上传失败时抛出
        """

    @abstractmethod
    def get(self, key: str) -> BinaryIO:
        """
        获取对象内容

        Returns:
            从偏移量0开始的可读流，由调用方负责关闭

        Raises:
            StorageError: 请求失败时抛出
        """

    @abstractmethod
    def rename(self, src_key: str, dest_key: str, force: bool = True) -> None:
        """移动对象，成功后源对象不再存在"""

    @abstractmethod
    def copy(self, src_key: str, dest_key: str, force: bool = True) -> None:
        """复制对象，成功后源对象仍然存在"""

    @abstractmethod
    def exists(self, key: str) -> bool:
        """
        检查对象是否存在

        对象不存在时返回 False；其他后端错误原样抛出。
        """

    @abstractmethod
    def size(self, key: str) -> int:
        """获取对象字节数，对象不存在时同样抛出异常"""

    @abstractmethod
    def delete(self, key: str) -> None:
        """删除对象"""

    @abstractmethod
    def url(self, key: str) -> str:
        """生成对象的完整访问URL，纯计算，不发起网络请求"""


__all__ = ['BaseStorage']
