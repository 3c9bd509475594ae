"""
七牛云Kodo存储适配器
实现BaseStorage接口，将通用存储操作转发给远程存储客户端
"""

import os
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING, BinaryIO, Callable, Iterator, Optional
from urllib.parse import quote

import httpx

from kodo_storage.core.config import settings
from kodo_storage.core.config.kodo_config import KodoConfig, get_kodo_config, validate_kodo_config
from kodo_storage.core.log_messages import log_messages
from kodo_storage.core.log_utils import get_logger
from kodo_storage.core.storage.base_storage import BaseStorage
from kodo_storage.core.storage.exceptions import (
    ConfigurationError,
    LocalFileNotFoundError,
    ObjectNotFoundError,
    StorageError,
    UploadError,
)
from kodo_storage.core.storage.models import ObjectStat
from kodo_storage.core.storage.remote import RemoteObjectStore
from kodo_storage.core.storage.utils import ResponseStream, normalize_key, open_url_stream

if TYPE_CHECKING:
    from kodo_storage.core.storage.factory import StorageRegistry

logger = get_logger(__name__)

# 私有空间URL有效期（秒）
PRIVATE_URL_EXPIRES = 3600


def _read_exactly(reader: BinaryIO, length: int) -> bytes:
    """从流中读取 length 字节，流提前结束时返回实际读到的数据"""
    chunks = []
    remaining = length
    while remaining > 0:
        chunk = reader.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


class KodoAdapter(BaseStorage):
    """
    七牛云Kodo存储适配器

    - 所有存储键在使用前统一规范化，包括URL生成
    - 远程错误原样抛出，不做重试；仅 exists 将"对象不存在"视为 False
    - 私有空间生成带签名、一小时后过期的URL，公有空间生成固定URL
    """

    # 适配器名称，用于注册表查找
    ADAPTER_NAME: str = "kodo"

    def __init__(
        self,
        config: Optional[KodoConfig] = None,
        remote: Optional[RemoteObjectStore] = None,
        http_client: Optional[httpx.Client] = None,
        clock: Callable[[], float] = time.time,
        registry: Optional["StorageRegistry"] = None,
    ) -> None:
        """
        初始化Kodo适配器

        Args:
            config: Kodo配置，不指定则从全局配置读取
            remote: 远程存储客户端，不指定则使用七牛SDK创建
            http_client: get 使用的 httpx 客户端，不指定则每次请求临时创建
            clock: 返回当前Unix时间（秒）的函数，用于计算URL过期时间
            registry: 指定后初始化完成即注册到该注册表

        Raises:
            ConfigurationError: 配置不完整时抛出
        """
        self.config = config if config is not None else get_kodo_config()

        if not validate_kodo_config(self.config):
            raise ConfigurationError("七牛云Kodo配置不完整，请检查环境变量")

        self._remote = remote if remote is not None else self._create_client()
        self._http_client = http_client
        self._clock = clock
        self._chunk_size = settings.download_chunk_size

        if registry is not None:
            registry.register_instance(self.ADAPTER_NAME, self)

    def _create_client(self) -> RemoteObjectStore:
        """
        创建七牛SDK远程存储客户端

        Raises:
            StorageError: SDK未安装时抛出
        """
        try:
            from kodo_storage.core.storage.adapters.qiniu_remote import QiniuRemoteStore
        except ImportError as e:
            logger.warning("七牛云SDK未安装")
            raise StorageError(
                "七牛云SDK未安装，请运行: pip install qiniu",
                code="SDK_NOT_INSTALLED"
            ) from e

        return QiniuRemoteStore(self.config)

    @contextmanager
    def _remote_call(self, operation_name: str, **fields) -> Iterator[None]:
        """记录远程调用失败日志后原样抛出异常"""
        try:
            yield
        except ObjectNotFoundError:
            logger.debug(log_messages.REMOTE_CALL_FAILED, operation_name=operation_name, **fields)
            raise
        except StorageError as e:
            logger.error(log_messages.REMOTE_CALL_FAILED, exception=e, operation_name=operation_name, **fields)
            raise

    def put(self, key: str, reader: BinaryIO, length: int, content_type: str) -> None:
        key = normalize_key(key)
        logger.debug(log_messages.OBJECT_UPLOAD_START, key=key)

        data = _read_exactly(reader, length)
        if len(data) != length:
            raise UploadError(
                "数据流长度不足: 期望{}字节，实际读取{}字节".format(length, len(data)),
                details={'key': key, 'length': length}
            )

        with self._remote_call("put", key=key):
            self._remote.upload_stream(key, data, content_type)
        logger.info(log_messages.OBJECT_UPLOAD_SUCCESS, key=key)

    def put_file(self, key: str, local_path: str, content_type: str) -> None:
        key = normalize_key(key)
        local_path = os.fspath(local_path)
        logger.debug(log_messages.OBJECT_UPLOAD_START, key=key)

        if not os.path.isfile(local_path) or not os.access(local_path, os.R_OK):
            raise LocalFileNotFoundError(
                "本地文件不存在或不可读: {}".format(local_path),
                details={'local_path': local_path}
            )

        with self._remote_call("put_file", key=key):
            self._remote.upload_file(key, local_path, content_type)
        logger.info(log_messages.OBJECT_UPLOAD_SUCCESS, key=key)

    def get(self, key: str) -> ResponseStream:
        """
        下载对象

        对 url(key) 发起GET请求，返回的流由调用方关闭（支持 with 语句）。
        """
        key = normalize_key(key)
        logger.debug(log_messages.OBJECT_DOWNLOAD_START, key=key)

        try:
            return open_url_stream(
                self.url(key),
                client=self._http_client,
                chunk_size=self._chunk_size
            )
        except StorageError as e:
            logger.error(log_messages.OBJECT_DOWNLOAD_FAILED, exception=e, key=key)
            raise

    def rename(self, src_key: str, dest_key: str, force: bool = True) -> None:
        src_key = normalize_key(src_key)
        dest_key = normalize_key(dest_key)

        with self._remote_call("rename", src_key=src_key, dest_key=dest_key):
            self._remote.move(src_key, dest_key, force)
        logger.info(log_messages.OBJECT_MOVE_SUCCESS, src_key=src_key, dest_key=dest_key)

    def copy(self, src_key: str, dest_key: str, force: bool = True) -> None:
        src_key = normalize_key(src_key)
        dest_key = normalize_key(dest_key)

        with self._remote_call("copy", src_key=src_key, dest_key=dest_key):
            self._remote.copy(src_key, dest_key, force)
        logger.info(log_messages.OBJECT_COPY_SUCCESS, src_key=src_key, dest_key=dest_key)

    def exists(self, key: str) -> bool:
        key = normalize_key(key)
        try:
            self.stat(key)
        except ObjectNotFoundError:
            logger.debug(log_messages.OBJECT_NOT_FOUND, key=key)
            return False
        return True

    def stat(self, key: str) -> ObjectStat:
        """获取对象元信息，对象不存在时抛出 ObjectNotFoundError"""
        key = normalize_key(key)
        with self._remote_call("stat", key=key):
            return self._remote.stat(key)

    def size(self, key: str) -> int:
        return self.stat(key).size

    def delete(self, key: str) -> None:
        key = normalize_key(key)
        with self._remote_call("delete", key=key):
            self._remote.delete(key)
        logger.info(log_messages.OBJECT_DELETE_SUCCESS, key=key)

    def url(self, key: str) -> str:
        """
        生成访问URL

        私有空间：URL 附带 e=<当前时间+3600> 与签名 token；
        公有空间：scheme + domain + "/" + key，结果稳定不变。
        """
        key = normalize_key(key)
        prefix = "https://" if self.config.is_ssl else "http://"
        # 域名配置中若带协议头，以 is_ssl 为准
        domain = self.config.domain.split("://", 1)[-1].rstrip("/")
        base_url = "{}{}/{}".format(prefix, domain, quote(key, safe="/~"))

        if self.config.is_private:
            deadline = int(self._clock()) + PRIVATE_URL_EXPIRES
            return self._remote.make_private_url(base_url, deadline)

        return self._remote.make_public_url(base_url)


__all__ = ['KodoAdapter', 'PRIVATE_URL_EXPIRES']
