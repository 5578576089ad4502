"""
共享模块

存放引擎与客户端共用的常量定义。

组件说明：
- constants: 回合时长、队伍数量、存档键名、窗口参数、颜色与事件名

提示：
- 引擎（alias_game.game）只依赖本模块，不依赖 pygame
- 若新增公共工具，可在此模块下添加并在 __all__ 中显式导出
"""

from . import constants

__all__ = ["constants"]
