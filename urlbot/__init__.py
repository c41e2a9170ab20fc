"""
urlbot - 贴链接标题的 IRC 机器人

模块概述：
    本文件是 urlbot 包的入口文件（__init__.py），定义了包的元信息。
    urlbot 监听频道中的 URL，抓取页面标题并回帖到频道。

    本仓库覆盖的是机器人的配置层：
    - 配置数据模型与默认值（config/schema.py）
    - TOML 配置文件的读写（config/loader.py）
    - 运行时数据快照 Rtd 的组装（config/runtime.py）
    - 路径规范化：~ 展开、父目录创建（utils/helpers.py）
"""

# 版本号，遵循语义化版本规范（主版本.次版本.修订号）
__version__ = "0.1.0"

# 写入 IRC 客户端配置 connection.version 的版本字符串（CTCP VERSION 应答内容）
VERSION = f"urlbot v{__version__}"

# 项目 logo 表情符号，用于 CLI 输出
__logo__ = "🔗"
