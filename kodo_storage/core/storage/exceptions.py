"""
存储服务异常定义
定义存储模块中使用的所有异常类型
"""

from typing import Any, Dict, Optional


class StorageError(Exception):
    """
    存储操作基础异常

    所有存储相关异常的基类。远程存储返回的错误信息原样保存在 message 中。

    Attributes:
        message: 错误消息
        code: 错误码
        details: 错误详情（如 status_code、req_id）
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    @property
    def status_code(self) -> Optional[int]:
        """远程存储返回的HTTP状态码（如有）"""
        return self.details.get("status_code")

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ConfigurationError(StorageError):
    """存储配置错误"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="CONFIG_ERROR", details=details)


class UploadError(StorageError):
    """文件上传错误"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="UPLOAD_ERROR", details=details)


class DeleteError(StorageError):
    """文件删除错误"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="DELETE_ERROR", details=details)


class OperationError(StorageError):
    """移动/复制等对象管理操作错误"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="OPERATION_ERROR", details=details)


class MetadataError(StorageError):
    """元数据获取错误"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="METADATA_ERROR", details=details)


class ObjectNotFoundError(StorageError):
    """远程对象不存在"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="NOT_FOUND", details=details)


class LocalFileNotFoundError(StorageError):
    """待上传的本地文件不存在或不可读"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="LOCAL_FILE_NOT_FOUND", details=details)


class HTTPError(StorageError):
    """HTTP请求错误"""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        details = dict(details or {})
        if status_code is not None:
            details.setdefault("status_code", status_code)
        super().__init__(message, code="HTTP_ERROR", details=details)


class NetworkError(StorageError):
    """网络请求错误"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="NETWORK_ERROR", details=details)


__all__ = [
    'StorageError',
    'ConfigurationError',
    'UploadError',
    'DeleteError',
    'OperationError',
    'MetadataError',
    'ObjectNotFoundError',
    'LocalFileNotFoundError',
    'HTTPError',
    'NetworkError',
]
