"""
运行时数据组装模块 (config/runtime.py)
====================================
本模块把命令行参数、配置文件内容以及由两者推导出的参数组装成一个
运行时数据快照 Rtd（run time data），交给程序其余部分使用。

组装流程（load_rtd，线性执行，任一步失败即整体失败）：
1. 展开配置文件路径中的 ~
2. 确保配置文件的父目录存在
3. 配置文件不存在时写入一份默认配置，并提示用户修改
4. 加载配置文件
5. 推导历史数据库路径（见 _resolve_db_path）
6. 确保数据库文件的父目录存在
7. 把 urlbot 版本号写入 IRC 连接配置
8. 返回 Rtd

对于 Java 开发者：
- RtdOptions 类似于一个只读的启动参数 DTO，由 CLI 层一次性构造后传入
- Rtd 类似于不可变的 record，组装完成后不再修改
"""

from dataclasses import dataclass, field, replace
from pathlib import Path

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from urlbot import VERSION
from urlbot.config.loader import get_config_path, load_config, save_config
from urlbot.config.schema import Config, DbType
from urlbot.utils.helpers import DirsProvider, ensure_parent_dir, expand_home


class RtdOptions(BaseSettings):
    """
    启动参数：配置文件路径及可选的数据库路径覆盖。

    除了由命令行显式传入，也支持从环境变量读取：
    - URLBOT_CONF: 配置文件路径
    - URLBOT_DB: 数据库文件路径（覆盖配置文件中的 database.path）
    显式传入的参数优先于环境变量。
    """
    conf: Path = Field(default_factory=get_config_path)
    db: Path | None = None

    model_config = SettingsConfigDict(env_prefix="URLBOT_")


@dataclass(frozen=True)
class Paths:
    """解析后的文件路径。db 只在启用历史记录且后端为 SQLite 时存在。"""
    conf: Path
    db: Path | None = None


@dataclass(frozen=True)
class Rtd:
    """
    运行时数据快照。

    属性:
        paths: 解析后的配置文件与数据库路径
        conf: 配置文件内容（已写入版本号）
        history: 是否启用历史记录（features.history 的冗余副本）
    """
    paths: Paths
    conf: Config = field(default_factory=Config)
    history: bool = False

    def copy(self) -> "Rtd":
        """按值复制快照，调用方可以在副本上修改配置而不影响原快照。"""
        return replace(self, conf=self.conf.model_copy(deep=True))


def load_rtd(options: RtdOptions | None = None, dirs: DirsProvider | None = None) -> Rtd:
    """
    组装运行时数据快照。

    参数:
        options: 启动参数，为 None 时从环境变量/默认值构造
        dirs: 目录提供者（用于 ~ 展开），为 None 时使用当前系统

    返回:
        组装完成的 Rtd

    异常:
        ConfigParseError: 配置文件解析失败
        ConfigSerializeError: 默认配置无法序列化
        OSError: 文件或目录读写失败
    """
    options = options or RtdOptions()
    conf_path = expand_home(options.conf, dirs)

    ensure_parent_dir(conf_path)

    # 配置文件不存在时生成默认配置
    if not conf_path.exists():
        logger.info(f"Configuration `{conf_path}` doesn't exist, creating default")
        logger.warning("You should modify this file to include a useful IRC configuration")
        save_config(Config(), conf_path)

    config = load_config(conf_path)

    db_path = _resolve_db_path(config, options.db)
    if db_path is not None:
        db_path = expand_home(db_path, dirs)
        ensure_parent_dir(db_path)

    # 把 urlbot 版本号写入 IRC 客户端配置（用于 CTCP VERSION 应答）
    config.connection.version = VERSION

    logger.debug(f"Runtime paths: conf={conf_path}, db={db_path}")
    return Rtd(
        paths=Paths(conf=conf_path, db=db_path),
        conf=config,
        history=config.features.history,
    )


def _resolve_db_path(config: Config, override: Path | None) -> Path | None:
    """
    推导历史数据库文件路径。

    优先级（仅在 features.history 开启时生效）：
    - 后端为 InMemory：没有数据库文件，命令行覆盖被丢弃
    - 后端为 SQLite：命令行覆盖 > 配置文件 database.path > 无
    """
    if not config.features.history:
        return None

    if config.database.db_type == DbType.IN_MEMORY:
        if override is not None:
            logger.warning(
                f"Ignoring database path `{override}`: database type is "
                f"{DbType.IN_MEMORY.value}"
            )
        return None

    if override is not None:
        return Path(override)
    if config.database.path:
        return Path(config.database.path)
    return None
