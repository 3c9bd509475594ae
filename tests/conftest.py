"""
测试配置和fixtures
为所有测试提供共享的配置和fixtures
"""

import pytest

from kodo_storage.core.config.kodo_config import KodoConfig
from kodo_storage.core.storage import KodoAdapter
from tests.utils import InMemoryRemoteStore, MockBuilder


@pytest.fixture
def kodo_config() -> KodoConfig:
    """公有空间、http 访问的测试配置"""
    return KodoConfig(
        access_key="test-access-key",
        secret_key="test-secret-key",
        bucket="test-bucket",
        domain="cdn.example.com",
        is_ssl=False,
        is_private=False
    )


@pytest.fixture
def private_kodo_config(kodo_config: KodoConfig) -> KodoConfig:
    """私有空间、https 访问的测试配置"""
    return kodo_config.model_copy(update={"is_private": True, "is_ssl": True})


@pytest.fixture
def memory_store() -> InMemoryRemoteStore:
    return InMemoryRemoteStore()


@pytest.fixture
def mock_remote():
    return MockBuilder.create_mock_remote_store()


@pytest.fixture
def kodo_adapter(kodo_config, memory_store) -> KodoAdapter:
    """使用内存远程存储的Kodo适配器"""
    return KodoAdapter(config=kodo_config, remote=memory_store)
