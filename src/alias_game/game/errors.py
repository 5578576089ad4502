"""
游戏异常与信号定义

- ValidationError: 配置阶段输入不合法（队名为空、词库为空），需提示用户
- InvalidStateError: 在错误的状态下调用操作，属于编程错误，由宿主记录并忽略
- PersistenceError: 存档读写失败，不影响内存中的游戏
- EXHAUSTED: 词库耗尽信号，不是异常，是正常的状态转移依据
"""


class GameError(Exception):
    """游戏引擎异常基类"""


class ValidationError(GameError):
    """配置参数不合法"""


class InvalidInputError(ValidationError):
    """词库载入后为空"""


class InvalidStateError(GameError):
    """操作在当前状态下无效"""


class PersistenceError(GameError):
    """存档后端不可用或数据损坏"""


class _Exhausted:
    """词库耗尽哨兵，draw() 在没有可用词时返回它。"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "EXHAUSTED"


EXHAUSTED = _Exhausted()
