"""
远程存储客户端协议
适配器只依赖该协议，具体实现（七牛SDK或测试替身）通过注入提供
"""

from typing import Protocol

from kodo_storage.core.storage.models import ObjectStat


class RemoteObjectStore(Protocol):
    """
    远程对象存储协议

    所有方法失败时抛出 StorageError 子类；对象不存在时
    stat 必须抛出 ObjectNotFoundError。
    """

    def upload_stream(self, key: str, data: bytes, content_type: str) -> None:
        ...

    def upload_file(self, key: str, local_path: str, content_type: str) -> None:
        ...

    def move(self, src_key: str, dest_key: str, force: bool) -> None:
        ...

    def copy(self, src_key: str, dest_key: str, force: bool) -> None:
        ...

    def stat(self, key: str) -> ObjectStat:
        ...

    def delete(self, key: str) -> None:
        ...

    def make_public_url(self, base_url: str) -> str:
        ...

    def make_private_url(self, base_url: str, deadline: int) -> str:
        """为 base_url 附加过期时间 deadline（Unix秒）与签名"""
        ...


__all__ = ['RemoteObjectStore']
