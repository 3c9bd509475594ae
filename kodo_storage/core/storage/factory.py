"""
存储适配器注册表
提供适配器注册、创建及按名称获取共享实例的功能
"""

import threading
from typing import Any, Dict, List, Type

from kodo_storage.core.log_messages import log_messages
from kodo_storage.core.log_utils import get_logger
from kodo_storage.core.storage.base_storage import BaseStorage
from kodo_storage.core.storage.exceptions import ConfigurationError

logger = get_logger(__name__)


class StorageRegistry:
    """
    存储适配器注册表

    由调用方显式创建并按引用传递，不使用模块级全局状态。
    get_storage 对每个名称只构造一次适配器，并发首次调用也只会构造一次。

    Example:
        >>> registry = StorageRegistry()
        >>> registry.register_adapter('kodo', KodoAdapter)
        >>> storage = registry.get_storage('kodo')
    """

    def __init__(self) -> None:
        self._adapter_classes: Dict[str, Type[BaseStorage]] = {}
        self._instances: Dict[str, BaseStorage] = {}
        # 适配器初始化时可能回调 register_instance，需可重入
        self._lock = threading.RLock()

    def register_adapter(self, name: str, adapter_class: Type[BaseStorage]) -> None:
        """
        注册存储适配器类

        Args:
            name: 适配器名称（如 'kodo'）
            adapter_class: 适配器类
        """
        with self._lock:
            self._adapter_classes[name] = adapter_class
        logger.info(log_messages.ADAPTER_REGISTERED, adapter=name)

    def get_adapter_class(self, name: str) -> Type[BaseStorage]:
        """
        获取适配器类

        Raises:
            ConfigurationError: 适配器不存在时抛出
        """
        adapter_class = self._adapter_classes.get(name)
        if not adapter_class:
            available = ', '.join(self._adapter_classes.keys())
            raise ConfigurationError(
                "存储适配器 '{}' 不存在，可用适配器: {}".format(name, available)
            )
        return adapter_class

    def create_adapter(self, name: str, **kwargs: Any) -> BaseStorage:
        """
        创建新的适配器实例（不缓存）

        Args:
            name: 适配器名称
            **kwargs: 传给适配器构造函数的参数

        Raises:
            ConfigurationError: 适配器不存在或创建失败时抛出
        """
        adapter_class = self.get_adapter_class(name)
        try:
            return adapter_class(**kwargs)
        except Exception as e:
            logger.error(log_messages.ADAPTER_CREATE_FAILED, exception=e, adapter=name)
            raise ConfigurationError(
                "创建存储适配器 '{}' 失败: {}".format(name, str(e))
            ) from e

    def register_instance(self, name: str, storage: BaseStorage) -> None:
        """将已初始化的适配器实例登记到指定名称下"""
        with self._lock:
            self._instances[name] = storage
        logger.info(log_messages.ADAPTER_INITIALIZED, adapter=name)

    def get_storage(self, name: str, **kwargs: Any) -> BaseStorage:
        """
        获取共享的适配器实例，首次调用时创建

        Args:
            name: 适配器名称
            **kwargs: 仅在首次创建时传给适配器构造函数

        Returns:
            BaseStorage: 已完成初始化的适配器实例
        """
        storage = self._instances.get(name)
        if storage is not None:
            return storage

        with self._lock:
            storage = self._instances.get(name)
            if storage is None:
                storage = self.create_adapter(name, **kwargs)
                self.register_instance(name, storage)
        return storage

    def list_available_adapters(self) -> List[str]:
        """列出所有已注册的适配器名称"""
        return list(self._adapter_classes.keys())


__all__ = ['StorageRegistry']
