"""
存储服务数据模型
定义存储操作中使用的数据结构
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ObjectStat:
    """
    对象元信息

    Attributes:
        key: 存储键
        size: 文件大小（字节）
        hash: 文件哈希（七牛 etag）
        mime_type: MIME类型
        put_time: 上传时间，单位为100纳秒的Unix时间戳
    """
    key: str
    size: int
    hash: Optional[str] = None
    mime_type: Optional[str] = None
    put_time: Optional[int] = None

    @classmethod
    def from_stat_result(cls, key: str, result: Dict[str, Any]) -> "ObjectStat":
        """由七牛 stat 接口的返回体构建"""
        return cls(
            key=key,
            size=int(result.get('fsize', 0)),
            hash=result.get('hash'),
            mime_type=result.get('mimeType'),
            put_time=result.get('putTime'),
        )


__all__ = ['ObjectStat']
