"""
存储键工具
"""


def normalize_key(key: str) -> str:
    """
    规范化存储键

    反斜杠统一为"/"，合并连续分隔符，去掉首尾分隔符和"."路径段，
    使 "/a/b.txt"、"a//b.txt"、"a\\b.txt" 指向同一个对象。
    结果满足幂等性：normalize_key(normalize_key(k)) == normalize_key(k)。

    注意：末尾分隔符同样被去掉，七牛控制台创建的"目录占位"键（如 "dir/"）
    会折叠为 "dir"，因此无法通过本适配器访问以"/"结尾的对象。

    Example:
        >>> normalize_key("/images//2024/./a.png")
        'images/2024/a.png'
    """
    segments = key.replace("\\", "/").split("/")
    return "/".join(segment for segment in segments if segment and segment != ".")


__all__ = ['normalize_key']
