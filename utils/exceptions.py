"""
统一异常定义模块
提供项目特定的异常类和错误处理机制
"""

from typing import Optional, Dict, Any


class HealingSystemError(Exception):
    """治愈系统基础异常类"""

    def __init__(self, message: str, error_code: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


class ConfigurationError(HealingSystemError):
    """配置相关错误"""
    pass


class CatalogError(HealingSystemError):
    """目录数据相关错误"""
    pass


class RecordNotFoundError(CatalogError):
    """指定ID的记录不存在"""

    # 对外返回的提示信息
    public_message = "未找到相关内容"

    def __init__(self, record_id: Any):
        super().__init__(
            f"Healing text not found: {record_id!r}",
            ErrorCodes.CATALOG_RECORD_NOT_FOUND,
            context={"record_id": record_id}
        )
        self.record_id = record_id


class UnknownActionError(HealingSystemError):
    """客户端事件分发中的未知动作"""
    pass


# 错误代码常量
class ErrorCodes:
    """错误代码常量"""

    # 配置错误
    CONFIG_INVALID_FORMAT = "CONFIG_002"
    CONFIG_LOAD_ERROR = "CONFIG_003"
    CONFIG_SAVE_ERROR = "CONFIG_004"

    # 目录错误
    CATALOG_RECORD_NOT_FOUND = "CAT_001"
    CATALOG_DUPLICATE_ID = "CAT_002"

    # 客户端错误
    CLIENT_UNKNOWN_ACTION = "CLI_001"
    CLIENT_FETCH_FAILED = "CLI_002"


def create_error_response(error: HealingSystemError,
                         include_traceback: bool = False) -> Dict[str, Any]:
    """创建标准化的错误响应"""
    response = {
        "error": True,
        "error_code": error.error_code,
        "message": error.message,
        "context": error.context
    }

    if include_traceback:
        import traceback
        response["traceback"] = traceback.format_exc()

    return response
