"""
七牛云SDK远程存储实现
将七牛 Python SDK 的 (ret, info) 返回约定转换为 StorageError 异常体系
"""

from io import BytesIO
from typing import Any, Optional, Type

from qiniu import Auth, BucketManager
from qiniu.services.storage.uploaders import FormUploader

from kodo_storage.core.config.kodo_config import KodoConfig
from kodo_storage.core.storage.exceptions import (
    DeleteError,
    MetadataError,
    ObjectNotFoundError,
    OperationError,
    StorageError,
    UploadError,
)
from kodo_storage.core.storage.models import ObjectStat

# 七牛资源管理接口约定：612 表示指定资源不存在
NOT_FOUND_STATUS = 612


def _force_flag(force: bool) -> str:
    """七牛 move/copy 接口的 force 参数为字符串"""
    return 'true' if force else 'false'


def raise_for_info(info: Any, error_class: Type[StorageError], **details: Any) -> None:
    """
    检查七牛SDK返回的 ResponseInfo，失败时抛出对应异常

    远程返回的错误信息原样作为异常消息；状态码612统一抛出 ObjectNotFoundError。

    Args:
        info: qiniu.http.ResponseInfo
        error_class: 非"不存在"错误时使用的异常类型
        **details: 附加到异常 details 中的上下文（如 key）
    """
    if info is not None and info.ok():
        return

    status_code = getattr(info, 'status_code', None)
    message = getattr(info, 'error', None) or getattr(info, 'text_body', None) or "未知错误"
    details.update({
        'status_code': status_code,
        'req_id': getattr(info, 'req_id', None),
    })
    cause = getattr(info, 'exception', None)

    if status_code == NOT_FOUND_STATUS:
        raise ObjectNotFoundError(message, details=details) from cause
    raise error_class(message, details=details) from cause


class QiniuRemoteStore:
    """
    基于七牛 Python SDK 的远程存储

    上传使用表单上传（FormUploader），资源管理使用 BucketManager，
    私有URL签名使用 Auth.token。上传与资源管理请求的协议由 is_ssl 决定。
    """

    def __init__(
        self,
        config: KodoConfig,
        auth: Optional[Auth] = None,
        bucket_manager: Optional[BucketManager] = None,
        uploader: Optional[FormUploader] = None
    ) -> None:
        self.config = config
        scheme = 'https' if config.is_ssl else 'http'
        self._auth = auth or Auth(config.access_key, config.secret_key)
        self._bucket_manager = bucket_manager or BucketManager(self._auth, preferred_scheme=scheme)
        self._uploader = uploader or FormUploader(config.bucket, auth=self._auth, preferred_scheme=scheme)

    def _upload_token(self, key: str) -> str:
        # 作用域为 bucket:key，允许覆盖同名对象
        return self._auth.upload_token(self.config.bucket, key)

    def upload_stream(self, key: str, data: bytes, content_type: str) -> None:
        # 包装为流，空对象也能上传
        _, info = self._uploader.upload(
            key, data=BytesIO(data), mime_type=content_type, up_token=self._upload_token(key)
        )
        raise_for_info(info, UploadError, key=key)

    def upload_file(self, key: str, local_path: str, content_type: str) -> None:
        _, info = self._uploader.upload(
            key, file_path=local_path, mime_type=content_type, up_token=self._upload_token(key)
        )
        raise_for_info(info, UploadError, key=key, local_path=local_path)

    def move(self, src_key: str, dest_key: str, force: bool) -> None:
        bucket = self.config.bucket
        _, info = self._bucket_manager.move(bucket, src_key, bucket, dest_key, force=_force_flag(force))
        raise_for_info(info, OperationError, src_key=src_key, dest_key=dest_key)

    def copy(self, src_key: str, dest_key: str, force: bool) -> None:
        bucket = self.config.bucket
        _, info = self._bucket_manager.copy(bucket, src_key, bucket, dest_key, force=_force_flag(force))
        raise_for_info(info, OperationError, src_key=src_key, dest_key=dest_key)

    def stat(self, key: str) -> ObjectStat:
        ret, info = self._bucket_manager.stat(self.config.bucket, key)
        raise_for_info(info, MetadataError, key=key)
        return ObjectStat.from_stat_result(key, ret or {})

    def delete(self, key: str) -> None:
        _, info = self._bucket_manager.delete(self.config.bucket, key)
        raise_for_info(info, DeleteError, key=key)

    def make_public_url(self, base_url: str) -> str:
        return base_url

    def make_private_url(self, base_url: str, deadline: int) -> str:
        """与 Auth.private_download_url 的签名方式相同，但过期时间为传入的绝对时间戳"""
        separator = '&' if '?' in base_url else '?'
        url = '{}{}e={}'.format(base_url, separator, deadline)
        return '{}&token={}'.format(url, self._auth.token(url))


__all__ = ['QiniuRemoteStore', 'raise_for_info', 'NOT_FOUND_STATUS']
