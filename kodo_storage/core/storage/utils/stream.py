"""
对象下载流工具
通过 httpx 以流式方式获取URL内容，返回由调用方负责关闭的可读流
"""

import io
from typing import Iterator, Optional

import httpx

from kodo_storage.core.storage.exceptions import HTTPError, NetworkError


class ResponseStream(io.RawIOBase):
    """
    基于 httpx 流式响应的只读二进制流

    关闭时释放响应连接；若客户端由本流创建，则一并关闭客户端。
    """

    def __init__(
        self,
        response: httpx.Response,
        client: Optional[httpx.Client] = None,
        chunk_size: int = 65536
    ) -> None:
        super().__init__()
        self._response = response
        self._client = client
        self._chunks: Iterator[bytes] = response.iter_bytes(chunk_size)
        self._pending = b""

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def content_type(self) -> Optional[str]:
        return self._response.headers.get("content-type")

    @property
    def content_length(self) -> Optional[int]:
        value = self._response.headers.get("content-length")
        return int(value) if value is not None else None

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        """填满 buffer 或读到响应末尾才返回，跨越多个网络分块"""
        view = memoryview(buffer).cast("B")
        filled = 0
        while filled < len(view):
            if not self._pending:
                try:
                    self._pending = next(self._chunks)
                except StopIteration:
                    break
                continue
            size = min(len(view) - filled, len(self._pending))
            view[filled:filled + size] = self._pending[:size]
            self._pending = self._pending[size:]
            filled += size
        return filled

    def close(self) -> None:
        if not self.closed:
            try:
                self._response.close()
            finally:
                if self._client is not None:
                    self._client.close()
        super().close()


def open_url_stream(
    url: str,
    client: Optional[httpx.Client] = None,
    chunk_size: int = 65536
) -> ResponseStream:
    """
    以流式GET请求打开URL

    Args:
        url: 访问地址
        client: 可选的 httpx 客户端；未提供时临时创建，并随流一起关闭
        chunk_size: 每次从网络读取的字节数

    Returns:
        ResponseStream: 位于偏移量0处的可读流

    Raises:
        HTTPError: 响应状态码非2xx
        NetworkError: 网络请求失败
    """
    owned_client = client is None
    if client is None:
        client = httpx.Client()

    try:
        request = client.build_request("GET", url)
        response = client.send(request, stream=True, follow_redirects=True)
    except httpx.RequestError as e:
        if owned_client:
            client.close()
        raise NetworkError(f"下载失败 (网络错误): {str(e)}") from e

    if not response.is_success:
        status_code = response.status_code
        response.close()
        if owned_client:
            client.close()
        raise HTTPError(f"下载失败 (HTTP {status_code})", status_code=status_code)

    return ResponseStream(response, client if owned_client else None, chunk_size)


__all__ = ['ResponseStream', 'open_url_stream']
