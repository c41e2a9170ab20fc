"""
工具函数模块 - 提供 urlbot 配置层通用的路径辅助函数。

本模块包含：
- expand_home：展开路径开头的 ~
- ensure_parent_dir：确保文件的父目录存在
- DirsProvider / SystemDirs：用户目录提供者
"""

from urlbot.utils.helpers import DirsProvider, SystemDirs, ensure_parent_dir, expand_home

__all__ = ["DirsProvider", "SystemDirs", "ensure_parent_dir", "expand_home"]
