"""
配置加载工具模块 (config/loader.py)
=================================
本模块负责 urlbot 配置文件的加载与保存，是配置层唯一接触持久化状态的地方：
- 配置文件格式为 TOML，默认路径: <平台配置目录>/urlbot/config.toml
- 加载时缺失的字段自动用默认值补齐
- 保存时输出是确定的：相同的配置总是写出逐字节相同的文件

与“配置文件不存在”相关的兜底逻辑（生成默认配置）位于 runtime.py，
这里的 load_config 对不存在的文件直接抛出 OSError。
"""

from pathlib import Path
import tomllib

from loguru import logger
from pydantic import ValidationError

from urlbot.config.errors import ConfigParseError
from urlbot.config.schema import Config, render_settings
from urlbot.utils.helpers import DirsProvider, SystemDirs

CONFIG_DIR_NAME = "urlbot"
CONFIG_FILE_NAME = "config.toml"


def get_config_path(dirs: DirsProvider | None = None) -> Path:
    """
    获取默认配置文件路径。

    平台配置目录无法确定时退回当前工作目录下的 config.toml。
    """
    config_dir = (dirs or SystemDirs()).config_dir()
    if config_dir is None:
        return Path(CONFIG_FILE_NAME)
    return config_dir / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_config(path: Path) -> Config:
    """
    从 TOML 文件加载配置。

    加载流程：
    1. 读取文件字节（失败时 OSError 原样抛出），再按 UTF-8 解码
    2. 使用 tomllib 解析为字典
    3. 使用 Pydantic 的 model_validate 进行类型验证和反序列化，缺失字段取默认值

    参数:
        path: 配置文件路径

    返回:
        Config 配置对象实例

    异常:
        ConfigParseError: 文件不是合法的 UTF-8 或 TOML，或某个字段类型不匹配
        OSError: 文件无法读取
    """
    path = Path(path)
    with open(path, "rb") as f:
        raw = f.read()

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        raise ConfigParseError(path, str(e)) from e

    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        raise ConfigParseError(path, str(e)) from e

    logger.debug(f"Loaded config from {path}")
    return config


def dumps_config(config: Config) -> str:
    """将配置序列化为 TOML 文本。"""
    return render_settings(config)


def save_config(config: Config, path: Path) -> None:
    """
    将配置对象保存为 TOML 文件，文件已存在时会被覆盖。

    不会创建父目录：调用方需先用 ensure_parent_dir 确保目录存在。
    统一使用 \\n 换行，保证不同平台写出的文件逐字节一致。

    参数:
        config: 要保存的配置对象
        path: 目标文件路径

    异常:
        ConfigSerializeError: 配置无法序列化
        OSError: 文件无法创建或写入
    """
    text = dumps_config(config)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)
    logger.debug(f"Saved config to {path}")
