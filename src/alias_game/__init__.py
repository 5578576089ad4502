"""
Alias - 三队轮流猜词派对游戏

A hot-seat team word-guessing party game built with Python and Pygame.
"""

__version__ = "0.1.0"
__author__ = "Alias Team"
__license__ = "MIT"

# 导出主要组件
from . import client, game, shared

__all__ = ["client", "game", "shared", "__version__"]
