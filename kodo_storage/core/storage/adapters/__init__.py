"""
存储适配器模块
提供各种对象存储服务的适配器实现
"""

from kodo_storage.core.storage.adapters.qiniu_kodo import KodoAdapter

__all__ = ['KodoAdapter']
