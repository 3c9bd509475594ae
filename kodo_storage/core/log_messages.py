"""
日志消息模板模块
统一管理所有业务日志消息模板，便于维护和国际化
"""

from typing import Dict, Any


class LogMessages:
    """日志消息模板类"""

    # ==================== 通用日志消息 ====================
    OPERATION_SUCCESS = "操作成功完成: {operation_name}"

    # ==================== 适配器生命周期 ====================
    ADAPTER_REGISTERED = "已注册存储适配器: {adapter}"
    ADAPTER_INITIALIZED = "存储适配器初始化完成: {adapter}"
    ADAPTER_CREATE_FAILED = "创建存储适配器失败: {adapter}"

    # ==================== 对象操作 ====================
    OBJECT_UPLOAD_START = "开始上传对象: {key}"
    OBJECT_UPLOAD_SUCCESS = "对象上传成功: {key}"

    OBJECT_DOWNLOAD_START = "开始下载对象: {key}"
    OBJECT_DOWNLOAD_FAILED = "对象下载失败: {key}"

    OBJECT_MOVE_SUCCESS = "对象移动成功: {src_key} -> {dest_key}"
    OBJECT_COPY_SUCCESS = "对象复制成功: {src_key} -> {dest_key}"
    OBJECT_DELETE_SUCCESS = "对象删除成功: {key}"

    OBJECT_NOT_FOUND = "对象不存在: {key}"
    REMOTE_CALL_FAILED = "远程存储调用失败: {operation_name}"

    @classmethod
    def format_message(cls, message_template: str, **kwargs: Any) -> str:
        """格式化日志消息模板"""
        return message_template.format(**kwargs)

    @classmethod
    def get_structured_data(cls, **kwargs: Any) -> Dict[str, Any]:
        """获取结构化日志数据"""
        return kwargs


# 全局实例
log_messages = LogMessages()
