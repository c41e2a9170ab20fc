"""
路径工具集合 - urlbot 配置层使用的路径规范化函数。

本模块提供：
- DirsProvider / SystemDirs：用户目录提供者（家目录、配置目录），可在测试中替换
- expand_home：将路径开头的 ~ 展开为用户家目录
- ensure_parent_dir：确保文件的父目录存在，不存在则递归创建

所有函数都是同步、无状态的，只在启动阶段被 Rtd 组装流程调用。
"""

import os
import sys
from abc import ABC, abstractmethod
from pathlib import Path

from loguru import logger

# 家目录标记：只有路径的第一个组成部分恰好是 "~" 时才展开
HOME_MARKER = "~"


class DirsProvider(ABC):
    """
    用户目录提供者的抽象基类。

    配置层需要知道当前用户的家目录（用于 ~ 展开）和平台配置目录
    （用于默认配置文件路径）。通过注入提供者而非直接调用 Path.home()，
    测试可以传入一个返回固定目录的假实现。
    """

    @abstractmethod
    def home_dir(self) -> Path | None:
        """返回当前用户家目录；无法确定时返回 None。"""
        pass

    @abstractmethod
    def config_dir(self) -> Path | None:
        """返回平台配置根目录；无法确定时返回 None。"""
        pass


class SystemDirs(DirsProvider):
    """
    基于当前平台的目录提供者。

    配置目录位置：
        - Windows: %APPDATA%
        - macOS: ~/Library/Application Support
        - Linux: $XDG_CONFIG_HOME 或 ~/.config
    """

    def home_dir(self) -> Path | None:
        try:
            home = Path.home()
        except RuntimeError:
            return None
        # 旧版本 Python 在无法解析时会原样返回 "~"
        return home if home.is_absolute() else None

    def config_dir(self) -> Path | None:
        home = self.home_dir()
        if sys.platform == "win32":
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata)
            return home / "AppData" / "Roaming" if home else None
        if sys.platform == "darwin":
            return home / "Library" / "Application Support" if home else None
        xdg = os.environ.get("XDG_CONFIG_HOME")
        if xdg:
            return Path(xdg)
        return home / ".config" if home else None


_SYSTEM_DIRS = SystemDirs()


def expand_home(path: str | Path, dirs: DirsProvider | None = None) -> Path:
    """
    展开路径开头的 ~ 为用户家目录。

    规则：
    - "~" 或 "~/sub" → <home>/sub
    - "/abs/path"、"rel/path" → 原样返回
    - "/abc/~def"（~ 不在开头）、"~user/x"（不是单独的 ~）→ 原样返回
    - 提供者无法给出家目录时 → 原样返回

    参数:
        path: 待展开的路径
        dirs: 目录提供者，为 None 时使用 SystemDirs

    返回:
        展开后的 Path 对象
    """
    path = Path(path)
    parts = path.parts
    if not parts or parts[0] != HOME_MARKER:
        return path

    home = (dirs or _SYSTEM_DIRS).home_dir()
    if home is None:
        return path
    return home.joinpath(*parts[1:])


def ensure_parent_dir(path: str | Path) -> bool:
    """
    确保文件的父目录存在，不存在则递归创建。

    不带目录部分的裸文件名（如 "test.f"、"./test.f"）视为位于当前工作目录，
    当前工作目录总是存在，因此不做任何操作。

    参数:
        path: 文件路径（绝对或相对当前工作目录）

    返回:
        本次调用是否创建了目录。目录已存在时返回 False。

    异常:
        OSError: 目录创建失败（已存在的情况除外），包括父路径被普通文件占用
    """
    path = Path(path)
    if len(path.parts) <= 1:
        return False

    parent = path.parent
    if parent.is_dir():
        return False

    logger.info(f"directory `{parent}` doesn't exist, creating it")
    parent.mkdir(parents=True, exist_ok=True)
    return True
