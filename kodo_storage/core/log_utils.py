"""
统一日志管理模块
提供结构化的业务日志记录功能
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Dict, Any

from kodo_storage.core.config import settings
from kodo_storage.core.log_messages import log_messages
from kodo_storage.utils.config_utils import ensure_directory_exists


class UnifiedLogger:
    """统一的业务日志记录器，消息模板参数同时作为结构化数据输出"""

    def __init__(self, name: str):
        """初始化日志记录器"""
        self.logger = logging.getLogger(name)
        self.name = name

    def _render(self, message_template: str, **kwargs: Any) -> str:
        """
        渲染消息模板

        只有提供了格式化参数时才进行格式化，避免对已格式化的字符串
        （例如包含字典的 f-string）再次格式化。
        """
        if not kwargs:
            return message_template
        try:
            return log_messages.format_message(message_template, **kwargs)
        except (KeyError, ValueError, IndexError):
            return message_template

    def _format_extra_data(self, **kwargs: Any) -> Dict[str, Any]:
        """格式化日志额外数据"""
        return log_messages.get_structured_data(
            log_module=self.name,
            **kwargs
        )

    def debug(self, message_template: str, **kwargs: Any) -> None:
        self.logger.debug(
            self._render(message_template, **kwargs),
            extra=self._format_extra_data(**kwargs)
        )

    def info(self, message_template: str, **kwargs: Any) -> None:
        """
        记录信息级别日志

        示例:
            logger.info("简单消息")
            logger.info("{operation_name} 完成", operation_name="上传")
        """
        self.logger.info(
            self._render(message_template, **kwargs),
            extra=self._format_extra_data(**kwargs)
        )

    def warning(self, message_template: str, **kwargs: Any) -> None:
        self.logger.warning(
            self._render(message_template, **kwargs),
            extra=self._format_extra_data(**kwargs)
        )

    def error(self, message_template: str, exception: Optional[BaseException] = None, **kwargs: Any) -> None:
        """
        记录错误级别日志

        Args:
            message_template: 日志消息模板
            exception: 异常对象（可选），类型与消息会附加到结构化数据中
            **kwargs: 格式化参数（可选）
        """
        message = self._render(message_template, **kwargs)
        extra_data = self._format_extra_data(**kwargs)

        if exception is not None:
            extra_data.update({
                "exception_type": type(exception).__name__,
                "exception_message": str(exception)
            })
            self.logger.error(message, extra=extra_data, exc_info=exception)
        else:
            self.logger.error(message, extra=extra_data)


# 全局日志实例缓存
_loggers_cache: Dict[str, UnifiedLogger] = {}


def get_logger(name: str = __name__) -> UnifiedLogger:
    """
    获取统一的业务日志记录器

    Args:
        name: 日志记录器名称，默认为当前模块名

    Returns:
        UnifiedLogger实例
    """
    if name not in _loggers_cache:
        _loggers_cache[name] = UnifiedLogger(name)
    return _loggers_cache[name]


def setup_logging(log_file: Optional[Path] = None) -> None:
    """
    配置全局日志系统

    Args:
        log_file: 日志文件路径，默认使用配置中的 workspace/log 目录
    """
    log_file_path = Path(log_file) if log_file else Path(settings.absolute_log_file)
    ensure_directory_exists(log_file_path.parent)

    root_logger = logging.getLogger()
    if settings.app_debug:
        log_level = logging.DEBUG
    else:
        log_level = logging.getLevelName(settings.log_level.upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO
    root_logger.setLevel(log_level)

    # 清除现有的处理器
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(settings.log_format)

    file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    # 第三方HTTP库日志过于冗长
    for logger_name in ["httpx", "httpcore", "urllib3"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)

    get_logger(__name__).info(log_messages.OPERATION_SUCCESS, operation_name="日志系统配置")
