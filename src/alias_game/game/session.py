"""
游戏会话

顶层状态机：SETUP -> PLAYING -> GAME_OVER。
- configure: 校验队名与词库，进入 PLAYING 并为第一队开局
- advance_team: 回合结束后轮到下一队；词库耗尽则结束游戏
- tick: 宿主每秒调用一次，推进当前回合的计时器

界面层通过 on(event, handler) 订阅变化通知，收到通知后重新读取
snapshot()，引擎本身不关心渲染。
"""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence

from alias_game.shared.constants import (
    EVT_CHANGED,
    EVT_GAME_OVER,
    EVT_LOW_TIME,
    EVT_ROUND_ENDED,
    EVT_ROUND_STARTED,
    EVT_TICK,
    ROUND_TIME,
    TEAM_COUNT,
)

from .errors import InvalidStateError, ValidationError
from .round import RoundController, RoundPhase
from .scoring import ScoreLedger
from .timer import RoundTimer
from .word_pool import WordPool

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    SETUP = "setup"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class GameSession:
    """一局完整游戏：从设置到终局，跨越多支队伍的多个回合"""

    def __init__(
        self,
        team_count: int = TEAM_COUNT,
        round_time: int = ROUND_TIME,
        rng: Optional[random.Random] = None,
    ):
        self.team_count = team_count
        self.teams: List[str] = [""] * team_count
        self.phase = GamePhase.SETUP
        self.current_team_index = 0
        self.pool = WordPool(rng=rng)
        self.ledger = ScoreLedger(team_count)
        self.timer = RoundTimer(round_time)
        self.round = RoundController(self.pool, self.ledger, self.timer)
        # 恢复存档或整局重置后保留的词表，供下一局直接开始
        self._prefill_words: List[str] = []
        self._final_scores: Optional[Dict[int, int]] = None
        # 事件钩子供 UI 层订阅：类型 -> 回调(payload)
        self._handlers: Dict[str, Callable[[Dict[str, Any]], None]] = {}

        self.round.on("changed", lambda _r: self._emit(EVT_CHANGED))
        self.round.on("ended", lambda _r: self.on_round_ended())
        self.round.on("exhausted", lambda _r: self._finish())
        self.timer.on("tick", lambda remaining: self._emit(EVT_TICK, {"time_left": remaining}))
        self.timer.on("low_time", lambda remaining: self._emit(EVT_LOW_TIME, {"time_left": remaining}))

    # 事件订阅
    def on(self, event: str, handler: Callable[[Dict[str, Any]], None]) -> None:
        self._handlers[event] = handler

    def _emit(self, event: str, payload: Optional[Dict[str, Any]] = None) -> None:
        cb = self._handlers.get(event)
        if cb:
            cb(payload or {})

    # 查询
    @property
    def words(self) -> List[str]:
        if self.pool.loaded:
            return list(self.pool.words)
        return list(self._prefill_words)

    @property
    def current_team(self) -> str:
        return self.teams[self.current_team_index]

    @property
    def final_scores(self) -> Optional[Dict[int, int]]:
        return dict(self._final_scores) if self._final_scores is not None else None

    def snapshot(self) -> Dict[str, Any]:
        """界面渲染所需的全部只读状态"""
        return {
            "phase": self.phase.value,
            "teams": list(self.teams),
            "current_team_index": self.current_team_index,
            "current_word": self.round.current_word,
            "time_left": self.timer.remaining,
            "round_time": self.timer.duration,
            "active": self.round.active,
            "round_ended": self.round.phase is RoundPhase.ENDED,
            "round_score": self.round.round_score,
            "scores": self.ledger.snapshot(),
            "word_count": len(self.words),
            "remaining_words": len(self.pool.available()),
        }

    def state(self) -> Dict[str, Any]:
        """可持久化的状态：只有队名、词表和分数，进行中的回合不保存"""
        return {
            "teams": list(self.teams),
            "words": self.words,
            "scores": self.ledger.as_list(),
        }

    # 会话流程
    def restore(self, state: Dict[str, Any]) -> None:
        """用存档预填设置界面：队名、词表、累计分数"""
        if self.phase is not GamePhase.SETUP:
            raise InvalidStateError("can only restore a saved game during setup")
        teams = list(state.get("teams") or [])
        if len(teams) != self.team_count:
            raise ValidationError(f"expected {self.team_count} team names, got {len(teams)}")
        self.ledger.restore(state.get("scores") or [0] * self.team_count)
        self.teams = [str(t) for t in teams]
        self._prefill_words = [str(w) for w in state.get("words") or []]
        logger.info("已恢复存档: %d 支队伍, %d 个词", len(self.teams), len(self._prefill_words))
        self._emit(EVT_CHANGED)

    def configure(self, team_names: Sequence[str], words: Sequence[str]) -> None:
        """校验设置并开始游戏。

        Raises:
            ValidationError: 队名数量不对、有空队名，或词库去掉空行后为空。
            InvalidStateError: 游戏已经开始。
        """
        if self.phase is not GamePhase.SETUP:
            raise InvalidStateError(f"cannot configure in phase {self.phase.value}")
        names = list(team_names)
        if len(names) != self.team_count:
            raise ValidationError(f"expected {self.team_count} team names, got {len(names)}")
        if any(not isinstance(n, str) or not n.strip() for n in names):
            raise ValidationError("every team needs a name")
        if not any(isinstance(w, str) and w.strip() for w in words):
            raise ValidationError("word list is empty")

        self.pool.load(words)
        self.teams = names
        self._prefill_words = []
        self._final_scores = None
        self.phase = GamePhase.PLAYING
        self.current_team_index = 0
        logger.info("游戏开始: %s", ", ".join(self.teams))
        self._emit(EVT_CHANGED)
        self._start_round()

    def on_round_ended(self) -> None:
        """回合结束：不自动轮换，等待玩家点击“下一回合”"""
        self._emit(EVT_ROUND_ENDED, {
            "team_index": self.current_team_index,
            "round_score": self.round.round_score,
        })
        self._emit(EVT_CHANGED)

    def advance_team(self) -> None:
        """轮到下一队；若所有词都已被跳过则结束游戏"""
        if self.phase is not GamePhase.PLAYING:
            raise InvalidStateError(f"cannot advance team in phase {self.phase.value}")
        self.round.acknowledge_round()
        self.current_team_index = (self.current_team_index + 1) % self.team_count
        if self.pool.is_exhausted():
            self._finish()
            return
        self._start_round()

    def tick(self, generation: Optional[int] = None) -> bool:
        if self.phase is not GamePhase.PLAYING:
            return False
        return self.timer.tick(generation)

    def guess(self) -> bool:
        return self.round.guess()

    def skip(self) -> bool:
        return self.round.skip()

    def reset(self) -> None:
        """整局重置：回到设置阶段，清空跳过记录与分数，保留队名和词表用于下一局"""
        words = self.words
        self.round.cancel()
        self.pool.clear()
        self.ledger.reset()
        self._prefill_words = words
        self._final_scores = None
        self.phase = GamePhase.SETUP
        self.current_team_index = 0
        logger.info("游戏已重置")
        self._emit(EVT_CHANGED)

    def _start_round(self) -> None:
        if self.round.start_round(self.current_team_index):
            self._emit(EVT_ROUND_STARTED, {
                "team_index": self.current_team_index,
                "generation": self.timer.generation,
            })

    def _finish(self) -> None:
        if self.phase is GamePhase.GAME_OVER:
            return
        self.timer.stop()
        self.phase = GamePhase.GAME_OVER
        self._final_scores = self.ledger.snapshot()
        logger.info("游戏结束: %s", self._final_scores)
        self._emit(EVT_GAME_OVER, {"scores": self.final_scores, "teams": list(self.teams)})
        self._emit(EVT_CHANGED)
