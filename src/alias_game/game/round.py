"""
回合控制器

负责一个队伍的一次限时回合：
- start_round: 重置回合得分、启动计时器、抽第一个词
- guess / skip: 猜对加分或跳过当前词，然后抽下一个词或结束回合
- on_timer_expired: 计时归零，结束回合，正在展示的词不计分
- acknowledge_round: 玩家确认回合结果，把控制权交还给 GameSession

状态：IDLE -> ACTIVE -> ENDED -> CLOSED；词库耗尽时进入 EXHAUSTED。
词库和计分板在回合期间只由本控制器修改。
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional

from .errors import EXHAUSTED, InvalidStateError
from .scoring import ScoreLedger
from .timer import RoundTimer
from .word_pool import WordPool

logger = logging.getLogger(__name__)


class RoundPhase(Enum):
    IDLE = "idle"
    ACTIVE = "active"
    ENDED = "ended"
    CLOSED = "closed"
    EXHAUSTED = "exhausted"


class RoundController:
    """回合状态机"""

    def __init__(self, pool: WordPool, ledger: ScoreLedger, timer: Optional[RoundTimer] = None):
        self.pool = pool
        self.ledger = ledger
        self.timer = timer or RoundTimer()
        self.phase = RoundPhase.IDLE
        self.team_index = 0
        self.current_word: Optional[str] = None
        self.round_score = 0
        # 事件钩子：changed / ended / exhausted -> callback(controller)
        self._handlers: Dict[str, Callable[["RoundController"], Any]] = {}
        self.timer.on("expired", lambda _remaining: self.on_timer_expired())

    @property
    def active(self) -> bool:
        return self.phase is RoundPhase.ACTIVE

    @property
    def time_left(self) -> int:
        return self.timer.remaining

    def on(self, event: str, handler: Callable[["RoundController"], Any]) -> None:
        self._handlers[event] = handler

    def _emit(self, event: str) -> None:
        cb = self._handlers.get(event)
        if cb:
            cb(self)

    def start_round(self, team_index: int) -> bool:
        """开始新回合。

        Returns:
            True 表示回合已进入 ACTIVE；False 表示词库已耗尽。

        Raises:
            InvalidStateError: 当前回合仍在进行中。
        """
        if self.phase is RoundPhase.ACTIVE:
            raise InvalidStateError("cannot start a round while one is active")
        self.team_index = team_index
        self.round_score = 0
        self.current_word = None
        self.timer.start()
        word = self.pool.draw()
        if word is EXHAUSTED:
            self._exhaust()
            return False
        self.current_word = word
        self.phase = RoundPhase.ACTIVE
        logger.info("队伍 %d 回合开始", team_index)
        self._emit("changed")
        return True

    def guess(self) -> bool:
        """当前词猜对：本队加一分并继续。回合未进行时忽略。"""
        if self.phase is not RoundPhase.ACTIVE:
            logger.debug("忽略回合外的猜对操作 (phase=%s)", self.phase.value)
            return False
        self.ledger.increment(self.team_index)
        self.round_score += 1
        self._advance()
        return True

    def skip(self) -> bool:
        """跳过当前词：该词本局不再出现，不影响得分。回合未进行时忽略。"""
        if self.phase is not RoundPhase.ACTIVE:
            logger.debug("忽略回合外的跳过操作 (phase=%s)", self.phase.value)
            return False
        self.pool.mark_skipped(self.current_word)
        self._advance()
        return True

    def on_timer_expired(self) -> None:
        if self.phase is not RoundPhase.ACTIVE:
            return
        logger.info("队伍 %d 时间到，本回合得分 %d", self.team_index, self.round_score)
        self._end()

    def acknowledge_round(self) -> None:
        if self.phase is not RoundPhase.ENDED:
            raise InvalidStateError(f"cannot acknowledge a round in phase {self.phase.value}")
        self.phase = RoundPhase.CLOSED
        self.current_word = None

    def cancel(self) -> None:
        """放弃当前回合（整局重置时使用），不结算任何得分"""
        self.timer.stop()
        self.phase = RoundPhase.IDLE
        self.current_word = None
        self.round_score = 0

    def _advance(self) -> None:
        if self.timer.remaining <= 0:
            self._end()
            return
        word = self.pool.draw()
        if word is EXHAUSTED:
            self._exhaust()
            return
        self.current_word = word
        self._emit("changed")

    def _end(self) -> None:
        self.timer.stop()
        self.phase = RoundPhase.ENDED
        self._emit("ended")

    def _exhaust(self) -> None:
        self.timer.stop()
        self.phase = RoundPhase.EXHAUSTED
        self.current_word = None
        logger.info("词库已耗尽")
        self._emit("exhausted")
