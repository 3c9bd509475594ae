"""
存储工具模块
提供存储相关的工具函数
"""

from kodo_storage.core.storage.utils.keys import normalize_key
from kodo_storage.core.storage.utils.stream import ResponseStream, open_url_stream

__all__ = ['normalize_key', 'ResponseStream', 'open_url_stream']
