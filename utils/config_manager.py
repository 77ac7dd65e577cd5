"""
统一的配置管理模块
整合底层配置操作和应用层类型安全访问
"""

import json
import logging
import os
from typing import Any, Optional, Dict, List, TypeVar
from dataclasses import dataclass, field, replace
from pathlib import Path

from .exceptions import ConfigurationError, ErrorCodes
from .path_utils import CONFIG_DIR, PUBLIC_DIR, PUBLIC_SUBDIRS

# 获取配置专用日志器
config_logger = logging.getLogger("Config")

# 为泛型类型定义一个TypeVar
T = TypeVar('T')

# 默认监听端口
DEFAULT_PORT = 3000

# ============================================================================
# 配置数据类型定义
# ============================================================================

@dataclass
class LoggingModuleConfig:
    """模块日志配置"""
    level: str = "INFO"
    enabled: bool = True

@dataclass
class FileLoggingConfig:
    """文件日志配置"""
    enabled: bool = True
    directory: str = "log"
    filename: str = "sys.log"
    rotation: Optional[Dict[str, Any]] = None

@dataclass
class ConsoleLoggingConfig:
    """控制台日志配置"""
    enabled: bool = True

@dataclass
class LoggingConfig:
    """完整日志配置"""
    level: str = "INFO"
    format: str = "[%(levelname)s][%(asctime)s][%(filename)s:%(lineno)d] - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"
    file_config: FileLoggingConfig = field(default_factory=FileLoggingConfig)
    console_config: ConsoleLoggingConfig = field(default_factory=ConsoleLoggingConfig)
    modules: Dict[str, LoggingModuleConfig] = field(default_factory=dict)

@dataclass
class ApiConfig:
    """API配置"""
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    reload: bool = False
    title: str = "Healing Texts API"
    version: str = "1.0.0"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

@dataclass
class StaticConfig:
    """静态资源配置"""
    public_dir: str = str(PUBLIC_DIR)
    subdirs: List[str] = field(default_factory=lambda: list(PUBLIC_SUBDIRS))

@dataclass
class ClientConfig:
    """客户端渲染配置"""
    base_url: str = f"http://localhost:{DEFAULT_PORT}"


# ============================================================================
# 统一配置管理器
# ============================================================================

class UnifiedConfigManager:
    """统一配置管理器 - 整合底层操作和应用层抽象"""

    def __init__(self, config_dir: Optional[str] = None):
        self._config_dir = Path(config_dir or os.environ.get("HEALING_CONFIG_DIR") or CONFIG_DIR)
        self._config_data: Dict[str, Any] = {}

        # 类型化配置缓存
        self._typed_cache: Dict[str, Any] = {}

        # 初始化配置
        self._load_config()

    def _load_config(self) -> None:
        """加载配置文件"""
        merged_config = {}

        if not self._config_dir.is_dir():
            # 目录缺失时使用默认配置
            config_logger.warning(f"Configuration directory not found, using defaults: {self._config_dir}")
            self._config_data = merged_config
            self._typed_cache.clear()
            return

        config_logger.info(f"Loading configuration from directory: {self._config_dir}")

        # 按文件名排序加载，确保加载顺序一致
        config_files = sorted(self._config_dir.glob('*.json'))
        for config_file in config_files:
            if config_file.name == "config.merged.json":
                continue
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    merged_config.update(json.load(f))
                config_logger.debug(f"Loaded and merged: {config_file.name}")
            except json.JSONDecodeError as e:
                raise ConfigurationError(
                    f"Invalid JSON in configuration file {config_file.name}: {e}",
                    ErrorCodes.CONFIG_INVALID_FORMAT
                ) from e
            except OSError as e:
                raise ConfigurationError(
                    f"Failed to read configuration file {config_file.name}: {e}",
                    ErrorCodes.CONFIG_LOAD_ERROR
                ) from e

        self._config_data = merged_config
        config_logger.info(f"Configuration loaded and merged from {len(config_files)} files.")
        # 清除类型化缓存
        self._typed_cache.clear()

    def reload_config(self) -> None:
        """重新加载配置"""
        config_logger.info("Reloading configuration...")
        self._load_config()

    # ========================================================================
    # 底层访问方法
    # ========================================================================

    def get(self, key: str, default: Optional[T] = None) -> Optional[T]:
        """获取配置值"""
        return self._config_data.get(key, default)

    def get_nested(self, path: str, default: Optional[T] = None) -> Optional[T]:
        """获取嵌套配置值，支持点分隔路径"""
        keys = path.split('.')
        current = self._config_data

        for key in keys:
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default

        return current

    def set(self, key: str, value: Any) -> None:
        """设置配置值"""
        self._config_data[key] = value
        # 清除相关缓存
        self._typed_cache.pop(key, None)

    def set_nested(self, path: str, value: Any) -> None:
        """设置嵌套配置值"""
        keys = path.split('.')
        current = self._config_data

        for key in keys[:-1]:
            if key not in current:
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value
        self._typed_cache.pop(keys[0], None)

    def __contains__(self, key: str) -> bool:
        """支持 'in' 操作符"""
        return key in self._config_data

    def __getitem__(self, key: str) -> Any:
        """支持字典式访问"""
        return self._config_data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        """支持字典式设置"""
        self.set(key, value)

    # ========================================================================
    # 类型安全访问方法
    # ========================================================================

    def get_logging_config(self) -> LoggingConfig:
        """获取日志配置（类型安全）"""
        if 'logging_config' not in self._typed_cache:
            try:
                logging_data = self.get_nested('logging_config', {})

                # 解析文件日志配置
                file_data = logging_data.get('file_config', {})
                file_config = FileLoggingConfig(
                    enabled=file_data.get('enabled', True),
                    directory=file_data.get('directory', 'log'),
                    filename=file_data.get('filename', 'sys.log'),
                    rotation=file_data.get('rotation')
                )

                # 解析控制台日志配置
                console_data = logging_data.get('console_config', {})
                console_config = ConsoleLoggingConfig(
                    enabled=console_data.get('enabled', True)
                )

                # 解析模块配置
                modules = {}
                for module_name, module_data in logging_data.get('modules', {}).items():
                    modules[module_name] = LoggingModuleConfig(
                        level=module_data.get('level', 'INFO'),
                        enabled=module_data.get('enabled', True)
                    )

                self._typed_cache['logging_config'] = LoggingConfig(
                    level=logging_data.get('level', 'INFO'),
                    file_config=file_config,
                    console_config=console_config,
                    modules=modules
                )
            except Exception as e:
                config_logger.error(f"Failed to parse logging config: {e}")
                self._typed_cache['logging_config'] = LoggingConfig()

        return self._typed_cache['logging_config']

    def get_api_config(self) -> ApiConfig:
        """获取API配置（类型安全），PORT 环境变量优先于配置文件"""
        if 'api_config' not in self._typed_cache:
            try:
                api_data = self.get_nested('api_config', {})
                self._typed_cache['api_config'] = ApiConfig(
                    host=api_data.get('host', '0.0.0.0'),
                    port=int(api_data.get('port', DEFAULT_PORT)),
                    reload=api_data.get('reload', False),
                    title=api_data.get('title', 'Healing Texts API'),
                    version=api_data.get('version', '1.0.0'),
                    cors_origins=api_data.get('cors_origins', ['*'])
                )
            except Exception as e:
                config_logger.error(f"Failed to parse api config: {e}")
                self._typed_cache['api_config'] = ApiConfig()

        api_config = self._typed_cache['api_config']
        env_port = os.environ.get('PORT')
        if env_port:
            try:
                return replace(api_config, port=int(env_port))
            except ValueError:
                config_logger.warning(f"Ignoring invalid PORT value: {env_port!r}")
        return api_config

    def get_static_config(self) -> StaticConfig:
        """获取静态资源配置（类型安全）"""
        if 'static_config' not in self._typed_cache:
            try:
                static_data = self.get_nested('static_config', {})
                public_dir = Path(static_data.get('public_dir', str(PUBLIC_DIR)))
                # 相对路径相对于项目根目录
                if not public_dir.is_absolute():
                    public_dir = PUBLIC_DIR.parent / public_dir
                self._typed_cache['static_config'] = StaticConfig(
                    public_dir=str(public_dir),
                    subdirs=static_data.get('subdirs', list(PUBLIC_SUBDIRS))
                )
            except Exception as e:
                config_logger.error(f"Failed to parse static config: {e}")
                self._typed_cache['static_config'] = StaticConfig()

        return self._typed_cache['static_config']

    def get_client_config(self) -> ClientConfig:
        """获取客户端配置（类型安全）"""
        if 'client_config' not in self._typed_cache:
            client_data = self.get_nested('client_config', {})
            self._typed_cache['client_config'] = ClientConfig(
                base_url=client_data.get('base_url', f"http://localhost:{DEFAULT_PORT}")
            )

        return self._typed_cache['client_config']

    # ========================================================================
    # 便捷方法
    # ========================================================================

    def save_config(self, file_path: Optional[str] = None) -> None:
        """保存配置到文件"""
        save_path = Path(file_path) if file_path else self._config_dir / "config.merged.json"

        try:
            save_path.parent.mkdir(parents=True, exist_ok=True)

            with open(save_path, 'w', encoding='utf-8') as f:
                json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)
            config_logger.info(f"Current merged configuration saved to: {save_path}")
        except OSError as e:
            raise ConfigurationError(
                f"Failed to save configuration: {e}",
                ErrorCodes.CONFIG_SAVE_ERROR
            ) from e

    def to_dict(self) -> Dict[str, Any]:
        """返回配置数据的字典副本"""
        return self._config_data.copy()


# ============================================================================
# 全局单例实例
# ============================================================================

config_manager = UnifiedConfigManager()
