"""
回合计时器

单一倒计时时钟，由宿主每秒调用一次 tick() 推进：
- tick: 每秒触发，附带剩余秒数
- low_time: 剩余 <= 3 秒且仍在计时时每个 tick 触发一次（驱动提示音）
- expired: 归零时触发且只触发一次

每次 start()/stop() 都会递增 generation。宿主调度 tick 时携带当时的
generation，回合切换后残留的旧 tick 会被直接丢弃。
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from alias_game.shared.constants import LOW_TIME_THRESHOLD, ROUND_TIME

logger = logging.getLogger(__name__)


class RoundTimer:
    """可取消的回合倒计时"""

    def __init__(self, duration: int = ROUND_TIME, low_time_threshold: int = LOW_TIME_THRESHOLD):
        self.duration = int(duration)
        self.low_time_threshold = int(low_time_threshold)
        self.remaining = self.duration
        self.active = False
        self.generation = 0
        # 事件回调注册表：event -> callback(remaining)
        self._handlers: Dict[str, Callable[[int], Any]] = {}

    def on(self, event: str, handler: Callable[[int], Any]) -> None:
        self._handlers[event] = handler

    def _emit(self, event: str) -> None:
        cb = self._handlers.get(event)
        if cb:
            cb(self.remaining)

    def start(self) -> int:
        """重置为满时长并开始计时，返回本回合的 generation"""
        self.generation += 1
        self.remaining = self.duration
        self.active = True
        return self.generation

    def stop(self) -> None:
        """强制停止；同时作废所有已调度的 tick"""
        if self.active:
            self.generation += 1
        self.active = False

    def fraction(self) -> float:
        if self.duration <= 0:
            return 0.0
        return max(0.0, min(1.0, self.remaining / self.duration))

    def tick(self, generation: Optional[int] = None) -> bool:
        """推进一秒。

        Args:
            generation: 调度时记录的 generation；与当前不一致说明是过期 tick

        Returns:
            True 表示计时状态发生了变化。
        """
        if generation is not None and generation != self.generation:
            logger.debug("丢弃过期 tick: generation=%s current=%s", generation, self.generation)
            return False
        if not self.active or self.remaining <= 0:
            return False

        self.remaining -= 1
        if self.remaining <= 0:
            self.remaining = 0
            self.active = False
            self._emit("tick")
            self._emit("expired")
            return True

        self._emit("tick")
        if self.remaining <= self.low_time_threshold:
            self._emit("low_time")
        return True
