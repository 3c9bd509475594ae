"""
应用配置管理模块
统一管理所有配置信息，包括环境变量和文件配置
"""

from pydantic import ConfigDict
from pydantic_settings import BaseSettings

from kodo_storage.utils.config_utils import get_config_path, get_workspace_path


class Settings(BaseSettings):
    """应用配置类 - 统一管理所有配置信息"""

    # ==================== 基础配置 ====================
    app_name: str = "Kodo Storage"
    app_version: str = "1.0.0"
    app_debug: bool = False
    app_env: str = "development"

    # ==================== 七牛云Kodo存储配置 ====================
    kodo_access_key: str = ""
    kodo_secret_key: str = ""
    kodo_bucket: str = ""
    kodo_domain: str = ""
    kodo_is_ssl: bool = False
    kodo_is_private: bool = False

    # 流式下载时每次读取的字节数
    download_chunk_size: int = 65536

    # ==================== 日志配置 ====================
    log_level: str = "INFO"
    log_dir: str = "log"
    log_file: str = "kodo_storage.log"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # ==================== 计算属性 ====================
    @property
    def absolute_log_dir(self) -> str:
        """获取绝对日志目录路径"""
        return str(get_workspace_path(self.log_dir))

    @property
    def absolute_log_file(self) -> str:
        """获取绝对日志文件路径"""
        return str(get_workspace_path(self.log_dir) / self.log_file)

    @property
    def kodo_enabled(self) -> bool:
        """检查Kodo是否启用"""
        return bool(
            self.kodo_access_key and self.kodo_secret_key
            and self.kodo_bucket and self.kodo_domain
        )

    model_config = ConfigDict(
        env_file=get_config_path(".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
        validate_default=True
    )


def get_settings() -> Settings:
    """获取应用配置实例"""
    # 每次调用都重新读取环境变量，便于测试时覆盖
    return Settings()


# 全局配置实例
settings = get_settings()
