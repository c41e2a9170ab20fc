"""
配置层异常定义 (config/errors.py)

异常层次：
ConfigError
├── ConfigParseError      - 配置文件不是合法的 TOML，或字段类型不匹配
└── ConfigSerializeError  - 配置无法渲染为 TOML

文件读写、目录创建失败直接抛出内置的 OSError，不做包装。
"""

from pathlib import Path


class ConfigError(Exception):
    """配置层异常基类。"""
    pass


class ConfigParseError(ConfigError):
    """
    配置文件解析失败。

    属性:
        path: 出错的配置文件路径
        reason: 底层错误描述（TOML 语法错误或 pydantic 校验错误）
    """

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse config `{path}`: {reason}")


class ConfigSerializeError(ConfigError):
    """配置无法序列化为 TOML（在当前 schema 下实际不可达）。"""
    pass
