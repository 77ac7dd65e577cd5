"""
工具模块包
提供项目所需的通用工具和功能
"""

# 导出核心工具
from .config_manager import (
    config_manager,
    UnifiedConfigManager,
    LoggingConfig,
    LoggingModuleConfig,
    ApiConfig,
    StaticConfig,
    ClientConfig,
)
from .exceptions import (
    HealingSystemError,
    ConfigurationError,
    CatalogError,
    RecordNotFoundError,
    UnknownActionError,
    ErrorCodes,
    create_error_response,
)
from .logging_manager import (
    LogContext,
    log_execution,
    logging_manager,
    LogConfig,
    initialize_logging,
    ModuleLoggers,
    api_logger,
    catalog_logger,
    client_logger,
    config_logger,
    main_logger,
)
from .path_utils import BASE_DIR, CONFIG_DIR, LOG_DIR, PUBLIC_DIR, PUBLIC_SUBDIRS, ensure_directories

# 版本信息
__version__ = "1.0.0"

__all__ = [
    # 配置管理
    "config_manager",
    "UnifiedConfigManager",
    "LoggingConfig",
    "LoggingModuleConfig",
    "ApiConfig",
    "StaticConfig",
    "ClientConfig",

    # 异常处理
    "HealingSystemError",
    "ConfigurationError",
    "CatalogError",
    "RecordNotFoundError",
    "UnknownActionError",
    "ErrorCodes",
    "create_error_response",

    # 日志工具
    "LogContext",
    "log_execution",
    "logging_manager",
    "LogConfig",
    "initialize_logging",
    "ModuleLoggers",
    "api_logger",
    "catalog_logger",
    "client_logger",
    "config_logger",
    "main_logger",

    # 路径工具
    "BASE_DIR",
    "CONFIG_DIR",
    "LOG_DIR",
    "PUBLIC_DIR",
    "PUBLIC_SUBDIRS",
    "ensure_directories",
]
