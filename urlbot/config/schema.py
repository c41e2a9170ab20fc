"""
配置数据模型定义 (config/schema.py)
=================================
本模块使用 Pydantic 定义 urlbot 的完整配置结构。
所有配置项都有默认值，用户只需在 config.toml 中覆盖需要修改的部分，
缺省的字段（或整张表）在加载时自动用默认值补齐。

整体配置结构（树形，括号内为 TOML 表名）：
Config (根配置)
├── network      [network]     - 网络标识（名称）
├── features     [features]    - 功能开关（全部默认关闭）
├── parameters   [parameters]  - 可调参数（URL 数量上限、语言、状态频道等）
├── database     [database]    - 历史记录存储后端（内存 / SQLite 文件）
└── connection   [connection]  - IRC 客户端连接参数（由 IRC 客户端消费，本层只整体读写）

对于 Java 开发者：
- Pydantic 的 BaseModel 类似于 Java 的 POJO/Record，但自带字段验证和默认值
- Field(default_factory=...) 类似于 Java 中用工厂方法创建可变默认值，避免共享引用问题
- StrictBool / StrictInt / StrictStr 关闭隐式类型转换：配置文件里写 history = 1 或 url_limit = 3.0
  会直接报错，而不是被悄悄转换成 true / 3
"""

from enum import Enum

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

from urlbot.config.errors import ConfigSerializeError


def render_settings(group: BaseModel) -> str:
    """
    将任意配置组渲染为 TOML 文本。

    值为 None 的字段不输出（TOML 没有 null），枚举输出其字符串值。
    字段按模型声明顺序输出，相同的配置总是得到相同的文本。

    参数:
        group: 任意配置组（Features、Parameters、Config 等）

    返回:
        TOML 文本

    异常:
        ConfigSerializeError: 值无法用 TOML 表示
    """
    data = group.model_dump(mode="json", by_alias=True, exclude_none=True)
    try:
        return tomli_w.dumps(data)
    except (TypeError, ValueError) as e:
        raise ConfigSerializeError(f"Failed to serialize {type(group).__name__}: {e}") from e


class SettingsGroup(BaseModel):
    """配置组基类：str() 输出该组的 TOML 文本，用于诊断展示。"""

    def __str__(self) -> str:
        return render_settings(self)


# ==============================================================================
# 各配置组
# ==============================================================================


class Network(SettingsGroup):
    """网络标识。name 用于在日志和多实例部署中区分不同 IRC 网络。"""
    name: StrictStr = "default"


class Features(SettingsGroup):
    """功能开关。本层只把它们作为布尔值暴露，具体行为由消息处理模块解释。"""
    report_metadata: StrictBool = False  # 回帖时附带页面元数据（大小、修改时间等）
    report_mime: StrictBool = False  # 非 HTML 链接回帖 MIME 类型
    mask_highlights: StrictBool = False  # 屏蔽标题中出现的昵称，避免误高亮
    send_notice: StrictBool = False  # 使用 NOTICE 而不是 PRIVMSG 回帖
    history: StrictBool = False  # 记录链接历史（启用后才会解析数据库路径）
    invite: StrictBool = False  # 接受邀请自动加入频道
    autosave: StrictBool = False  # 频道列表变化时自动写回配置文件
    send_errors_to_poster: StrictBool = False  # 抓取错误私信给发链接的人
    reply_with_errors: StrictBool = False  # 抓取错误直接回复到频道
    partial_urls: StrictBool = False  # 接受不带协议头的链接（如 example.com/foo）
    nick_response: StrictBool = False  # 被点名时回复 nick_response_str


class DbType(str, Enum):
    """历史记录存储后端。IN_MEMORY 为默认值。"""
    IN_MEMORY = "InMemory"
    SQLITE = "SQLite"


class Database(SettingsGroup):
    """
    历史记录存储配置。

    TOML 中的键名是 type，Python 中用 db_type 避免与内置函数重名。
    path 只在 type = "SQLite" 时生效，可被命令行 --db 覆盖。
    """
    model_config = ConfigDict(populate_by_name=True)

    db_type: DbType = Field(default=DbType.IN_MEMORY, alias="type")
    path: StrictStr | None = None


class Parameters(SettingsGroup):
    """可调参数。"""
    url_limit: StrictInt = Field(default=10, ge=0, le=255)  # 单条消息最多处理的 URL 数量
    accept_lang: StrictStr = "en"  # 抓取页面时的 Accept-Language
    status_channels: list[StrictStr] = Field(default_factory=list)  # 管理/状态频道，按顺序
    nick_response_str: StrictStr = ""  # nick_response 开启时的回复内容


class ConnectionConfig(BaseModel):
    """
    IRC 客户端连接参数。

    字段全部可选，未设置（None）的字段不会写入配置文件，由 IRC 客户端自行决定默认值。
    本层只整体读写这一组配置，并修改其中的 channels 与 version。
    """
    owners: list[StrictStr] | None = None
    nickname: StrictStr | None = None
    alt_nicks: list[StrictStr] | None = None
    nick_password: StrictStr | None = None
    username: StrictStr | None = None
    realname: StrictStr | None = None
    server: StrictStr | None = None
    port: StrictInt | None = Field(default=None, ge=0, le=65535)
    password: StrictStr | None = None
    use_ssl: StrictBool | None = None
    encoding: StrictStr | None = None
    channels: list[StrictStr] | None = None
    umodes: StrictStr | None = None
    user_info: StrictStr | None = None
    version: StrictStr | None = None
    source: StrictStr | None = None
    ping_time: StrictInt | None = None  # 秒
    ping_timeout: StrictInt | None = None  # 秒


def default_connection() -> ConnectionConfig:
    """新生成的配置文件中使用的 IRC 连接参数。"""
    return ConnectionConfig(
        nickname="urlbot",
        alt_nicks=["urlbot_"],
        nick_password="",
        username="urlbot",
        realname="urlbot",
        server="127.0.0.1",
        port=6667,
        password="",
        use_ssl=False,
        channels=["#urlbot"],
        user_info="Feed me URLs.",
    )


# ==============================================================================
# 根配置类 —— 整个 urlbot 的配置入口
# ==============================================================================


class Config(BaseModel):
    """
    urlbot 根配置类，对应一个完整的 config.toml。

    缺失的表整体使用默认值；存在的表中缺失的字段使用该字段的默认值。
    未知的键被忽略。
    """
    network: Network = Field(default_factory=Network)
    features: Features = Field(default_factory=Features)
    parameters: Parameters = Field(default_factory=Parameters)
    database: Database = Field(default_factory=Database)
    connection: ConnectionConfig = Field(default_factory=default_connection)

    def add_channel(self, name: str) -> None:
        """
        将频道加入连接配置的频道列表（末尾追加）。

        已存在（大小写敏感的精确匹配）时不做任何操作，因此重复调用是幂等的。
        """
        if self.connection.channels is None:
            self.connection.channels = []
        if name not in self.connection.channels:
            self.connection.channels.append(name)

    def remove_channel(self, name: str) -> None:
        """从频道列表中移除第一个与 name 精确匹配的条目，不存在时不做任何操作。"""
        channels = self.connection.channels
        if channels and name in channels:
            channels.remove(name)
