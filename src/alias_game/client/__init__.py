"""
客户端模块

负责游戏界面、用户交互、计时调度与存档等客户端功能。

模块组成：
- game: ClientGame，把界面动作接到 GameSession 并处理存档
- ui: UI 组件（按钮、输入框、HUD、计时条），供界面层组合
- audio: 最后几秒的提示音

入口提示：
- 运行 `alias-game`（或 python -m alias_game.client.main）启动 Pygame 客户端
"""

from . import audio, game, ui

__all__ = ["audio", "game", "ui"]
