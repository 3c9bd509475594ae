"""
通用工具模块包
提供项目通用的工具函数
"""

from .config_utils import (
    get_project_root,
    get_workspace_path,
    get_config_path,
    ensure_directory_exists
)

__all__ = [
    'get_project_root', 'get_workspace_path', 'get_config_path', 'ensure_directory_exists',
]
