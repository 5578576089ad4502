"""
游戏逻辑模块

实现游戏核心逻辑，包括词库、回合计时、回合控制、计分与会话状态机。
该模块不依赖 pygame，界面层通过事件回调与之联动。
"""

from .errors import (
    EXHAUSTED,
    GameError,
    InvalidInputError,
    InvalidStateError,
    PersistenceError,
    ValidationError,
)
from .round import RoundController, RoundPhase
from .scoring import ScoreLedger
from .session import GamePhase, GameSession
from .storage import JsonFileStore, SessionStore
from .timer import RoundTimer
from .word_pool import WordPool
from .wordlist import parse_word_list, read_word_file

__all__ = [
    "EXHAUSTED",
    "GameError",
    "InvalidInputError",
    "InvalidStateError",
    "PersistenceError",
    "ValidationError",
    "RoundController",
    "RoundPhase",
    "ScoreLedger",
    "GamePhase",
    "GameSession",
    "JsonFileStore",
    "SessionStore",
    "RoundTimer",
    "WordPool",
    "parse_word_list",
    "read_word_file",
]
