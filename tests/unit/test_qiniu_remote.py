"""
七牛SDK远程存储单元测试
mock 掉 SDK 的网络调用，校验返回值到异常的映射以及URL签名
"""

import base64
import hashlib
import hmac
from unittest.mock import ANY, patch

import pytest
from qiniu import Auth

from kodo_storage.core.storage.adapters.qiniu_kodo import KodoAdapter
from kodo_storage.core.storage.adapters.qiniu_remote import QiniuRemoteStore, raise_for_info
from kodo_storage.core.storage.exceptions import (
    DeleteError,
    MetadataError,
    ObjectNotFoundError,
    OperationError,
    UploadError,
)
from tests.utils import MockBuilder


def _expected_token(access_key: str, secret_key: str, url: str) -> str:
    digest = hmac.new(secret_key.encode(), url.encode(), hashlib.sha1).digest()
    return '{}:{}'.format(access_key, base64.urlsafe_b64encode(digest).decode())


@pytest.mark.unit
@pytest.mark.qiniu_sdk
class TestRaiseForInfo:
    """ResponseInfo 到异常的映射测试"""

    def test_ok_does_not_raise(self):
        raise_for_info(MockBuilder.create_response_info(200), UploadError)

    def test_not_found_status(self):
        info = MockBuilder.create_response_info(612, error="no such file or directory")

        with pytest.raises(ObjectNotFoundError) as exc_info:
            raise_for_info(info, MetadataError, key="k")

        error = exc_info.value
        assert error.message == "no such file or directory"
        assert error.code == "NOT_FOUND"
        assert error.details == {'key': 'k', 'status_code': 612, 'req_id': 'test-req-id'}

    def test_other_status_uses_error_class(self):
        info = MockBuilder.create_response_info(401, error="bad token")

        with pytest.raises(DeleteError, match="bad token") as exc_info:
            raise_for_info(info, DeleteError)
        assert exc_info.value.status_code == 401

    def test_network_failure_chains_exception(self):
        cause = ConnectionError("connection reset")
        info = MockBuilder.create_response_info(-1, error="connection reset", exception=cause)

        with pytest.raises(UploadError) as exc_info:
            raise_for_info(info, UploadError)
        assert exc_info.value.__cause__ is cause

    def test_missing_info(self):
        with pytest.raises(UploadError, match="未知错误"):
            raise_for_info(None, UploadError)


@pytest.mark.unit
@pytest.mark.qiniu_sdk
class TestQiniuRemoteStore:
    """QiniuRemoteStore 单元测试类"""

    @pytest.fixture
    def mock_auth(self):
        return MockBuilder.create_mock_auth()

    @pytest.fixture
    def mock_bucket_manager(self):
        return MockBuilder.create_mock_bucket_manager()

    @pytest.fixture
    def mock_uploader(self):
        return MockBuilder.create_mock_uploader()

    @pytest.fixture
    def store(self, kodo_config, mock_auth, mock_bucket_manager, mock_uploader):
        return QiniuRemoteStore(
            kodo_config,
            auth=mock_auth,
            bucket_manager=mock_bucket_manager,
            uploader=mock_uploader
        )

    @pytest.mark.parametrize("is_ssl, scheme", [(True, 'https'), (False, 'http')])
    def test_scheme_follows_is_ssl(self, kodo_config, is_ssl, scheme):
        """上传与资源管理请求使用 is_ssl 决定的协议"""
        store = QiniuRemoteStore(kodo_config.model_copy(update={"is_ssl": is_ssl}))

        assert store._bucket_manager.preferred_scheme == scheme
        assert store._uploader.preferred_scheme == scheme
        assert store._uploader.bucket_name == "test-bucket"

    def test_upload_stream(self, store, mock_auth, mock_uploader):
        store.upload_stream("a.txt", b"data", "text/plain")

        mock_auth.upload_token.assert_called_once_with("test-bucket", "a.txt")
        mock_uploader.upload.assert_called_once_with(
            "a.txt", data=ANY, mime_type="text/plain", up_token="test-upload-token"
        )
        assert mock_uploader.upload.call_args[1]['data'].read() == b"data"

    def test_upload_empty_stream(self, store, mock_uploader):
        store.upload_stream("empty.txt", b"", "text/plain")

        assert mock_uploader.upload.call_args[1]['data'].read() == b""

    def test_upload_stream_failure(self, store, mock_uploader):
        mock_uploader.upload.return_value = (
            None, MockBuilder.create_response_info(401, error="expired token")
        )
        with pytest.raises(UploadError, match="expired token"):
            store.upload_stream("a.txt", b"data", "text/plain")

    def test_upload_file(self, store, mock_uploader, tmp_path):
        local_file = tmp_path / "a.txt"
        local_file.write_bytes(b"data")

        store.upload_file("a.txt", str(local_file), "text/plain")

        mock_uploader.upload.assert_called_once_with(
            "a.txt", file_path=str(local_file), mime_type="text/plain", up_token="test-upload-token"
        )

    @pytest.mark.parametrize("force, flag", [(True, 'true'), (False, 'false')])
    def test_move_force_flag(self, store, mock_bucket_manager, force, flag):
        store.move("a", "b", force)
        mock_bucket_manager.move.assert_called_once_with(
            "test-bucket", "a", "test-bucket", "b", force=flag
        )

    def test_copy_failure(self, store, mock_bucket_manager):
        mock_bucket_manager.copy.return_value = (
            None, MockBuilder.create_response_info(614, error="file exists")
        )
        with pytest.raises(OperationError, match="file exists"):
            store.copy("a", "b", False)

    def test_stat(self, store, mock_bucket_manager):
        stat = store.stat("a.txt")

        mock_bucket_manager.stat.assert_called_once_with("test-bucket", "a.txt")
        assert stat.key == "a.txt"
        assert stat.size == 1024
        assert stat.hash == "FhtestHash"
        assert stat.mime_type == "text/plain"
        assert stat.put_time == 17000000000000000

    def test_stat_not_found(self, store, mock_bucket_manager):
        mock_bucket_manager.stat.return_value = (
            None, MockBuilder.create_response_info(612, error="no such file or directory")
        )
        with pytest.raises(ObjectNotFoundError):
            store.stat("missing")

    def test_delete(self, store, mock_bucket_manager):
        store.delete("a.txt")
        mock_bucket_manager.delete.assert_called_once_with("test-bucket", "a.txt")

    def test_public_url_unchanged(self, store):
        assert store.make_public_url("http://cdn.example.com/a") == "http://cdn.example.com/a"

    def test_private_url_signature(self, kodo_config, mock_bucket_manager):
        """私有URL的签名覆盖包含过期时间的完整URL"""
        store = QiniuRemoteStore(
            kodo_config,
            auth=Auth(kodo_config.access_key, kodo_config.secret_key),
            bucket_manager=mock_bucket_manager
        )

        url = store.make_private_url("https://cdn.example.com/x", 1700003600)

        signed = "https://cdn.example.com/x?e=1700003600"
        expected_token = _expected_token("test-access-key", "test-secret-key", signed)
        assert url == "{}&token={}".format(signed, expected_token)

    def test_private_url_matches_sdk_download_url(self, kodo_config, mock_bucket_manager):
        """与 SDK 的 private_download_url 在同一时刻生成的URL一致"""
        auth = Auth(kodo_config.access_key, kodo_config.secret_key)
        store = QiniuRemoteStore(kodo_config, auth=auth, bucket_manager=mock_bucket_manager)

        with patch('qiniu.auth.time.time', return_value=1700000000):
            sdk_url = auth.private_download_url("http://cdn.example.com/a.png?imageslim", expires=3600)

        assert store.make_private_url("http://cdn.example.com/a.png?imageslim", 1700003600) == sdk_url

    def test_private_url_existing_query(self, store, mock_auth):
        url = store.make_private_url("https://cdn.example.com/x?imageView2/1/w/100", 1)

        mock_auth.token.assert_called_once_with("https://cdn.example.com/x?imageView2/1/w/100&e=1")
        assert url.endswith("&e=1&token=test-access-key:test-signature")


@pytest.mark.unit
@pytest.mark.qiniu_sdk
def test_adapter_private_url_with_sdk(private_kodo_config):
    """适配器与七牛SDK签名组合后的完整私有URL"""
    adapter = KodoAdapter(config=private_kodo_config, clock=lambda: 1700000000)

    url = adapter.url("/x")

    signed = "https://cdn.example.com/x?e=1700003600"
    assert url == "{}&token={}".format(
        signed, _expected_token("test-access-key", "test-secret-key", signed)
    )
