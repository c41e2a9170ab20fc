"""
配置模块 (config)
================
本模块是 urlbot 的配置系统入口，负责：
1. 定义配置数据模型（schema.py）—— 使用 Pydantic 定义所有配置项的结构和默认值
2. 加载/保存配置文件（loader.py）—— TOML 格式的读写
3. 组装运行时数据快照（runtime.py）—— 配置文件 + 命令行参数 → Rtd
"""

from urlbot.config.errors import ConfigError, ConfigParseError, ConfigSerializeError
from urlbot.config.loader import get_config_path, load_config, save_config
from urlbot.config.runtime import Paths, Rtd, RtdOptions, load_rtd
from urlbot.config.schema import Config, DbType

__all__ = [
    "Config",
    "ConfigError",
    "ConfigParseError",
    "ConfigSerializeError",
    "DbType",
    "Paths",
    "Rtd",
    "RtdOptions",
    "get_config_path",
    "load_config",
    "load_rtd",
    "save_config",
]
