"""
七牛云Kodo配置模块
从全局配置构建Kodo存储配置，并校验其完整性
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from kodo_storage.core.config.config import Settings, get_settings


class KodoConfig(BaseModel):
    """Kodo配置数据类，初始化后不可修改"""

    model_config = ConfigDict(frozen=True)

    access_key: str = Field(default="", description="七牛云 AccessKey")
    secret_key: str = Field(default="", description="七牛云 SecretKey")
    bucket: str = Field(default="", description="存储空间名称")
    domain: str = Field(default="", description="绑定的访问域名（不含协议头）")
    is_ssl: bool = Field(default=False, description="访问URL是否使用https")
    is_private: bool = Field(default=False, description="是否为私有空间（私有空间生成带签名的URL）")


def get_kodo_config(settings: Optional[Settings] = None) -> KodoConfig:
    """从全局配置获取Kodo配置"""
    settings = settings or get_settings()
    return KodoConfig(
        access_key=settings.kodo_access_key,
        secret_key=settings.kodo_secret_key,
        bucket=settings.kodo_bucket,
        domain=settings.kodo_domain,
        is_ssl=settings.kodo_is_ssl,
        is_private=settings.kodo_is_private,
    )


def validate_kodo_config(config: Optional[KodoConfig]) -> bool:
    """验证Kodo配置完整性"""
    if config is None:
        return False

    required_fields = ["access_key", "secret_key", "bucket", "domain"]

    for field in required_fields:
        if not getattr(config, field):
            return False

    return True


__all__ = ['KodoConfig', 'get_kodo_config', 'validate_kodo_config']
