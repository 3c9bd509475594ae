"""
存储服务模块
提供统一的存储服务访问接口，支持多种存储适配器
"""

from typing import Optional

from kodo_storage.core.config.kodo_config import get_kodo_config, validate_kodo_config
from kodo_storage.core.storage.adapters.qiniu_kodo import KodoAdapter
from kodo_storage.core.storage.base_storage import BaseStorage
from kodo_storage.core.storage.exceptions import *
from kodo_storage.core.storage.factory import StorageRegistry
from kodo_storage.core.storage.models import ObjectStat
from kodo_storage.core.storage.remote import RemoteObjectStore
from kodo_storage.core.storage.utils import normalize_key


def create_default_registry() -> StorageRegistry:
    """创建已注册七牛云Kodo适配器的注册表"""
    registry = StorageRegistry()
    registry.register_adapter(KodoAdapter.ADAPTER_NAME, KodoAdapter)
    return registry


def get_storage_service(
    registry: StorageRegistry,
    adapter_name: Optional[str] = None
) -> BaseStorage:
    """
    从注册表获取存储服务实例

    Args:
        registry: 存储适配器注册表
        adapter_name: 适配器名称（如 'kodo'），不指定则自动检测

    Returns:
        BaseStorage: 存储服务实例

    Raises:
        ConfigurationError: 当没有可用的存储服务时抛出

    Example:
        >>> registry = create_default_registry()
        >>> storage = get_storage_service(registry)
        >>> storage.url('images/a.png')
    """
    if adapter_name is None:
        if validate_kodo_config(get_kodo_config()):
            adapter_name = KodoAdapter.ADAPTER_NAME
        else:
            raise ConfigurationError("没有可用的存储服务。请配置七牛云Kodo存储")

    return registry.get_storage(adapter_name)


__all__ = [
    # 注册表
    'StorageRegistry',
    'create_default_registry',
    'get_storage_service',
    # 抽象接口
    'BaseStorage',
    'RemoteObjectStore',
    # 适配器类
    'KodoAdapter',
    # 数据模型与工具
    'ObjectStat',
    'normalize_key',
    # 异常
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
