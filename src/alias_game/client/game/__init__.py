"""
客户端游戏逻辑模块

负责把界面动作接到 GameSession 上，并处理存档与计时调度：
- 启动时尝试读取存档，预填队名、词表和分数
- 每次可见状态变化后保存 {teams, words, scores}
- 回合开始时请求界面层调度每秒一次的 tick，回合结束时取消
- 把 ValidationError 转成提示文字，InvalidStateError 只记录日志

该模块尽量无 UI 依赖，便于被界面层调用。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

from alias_game.game import (
    GamePhase,
    GameSession,
    InvalidStateError,
    SessionStore,
    ValidationError,
    read_word_file,
)
from alias_game.shared.constants import (
    EVT_CHANGED,
    EVT_GAME_OVER,
    EVT_LOW_TIME,
    EVT_ROUND_ENDED,
    EVT_ROUND_STARTED,
    EVT_TICK,
)

logger = logging.getLogger(__name__)


class ClientGame:
    """本地热座游戏：会话 + 存档 + 界面事件"""

    def __init__(self, session: Optional[GameSession] = None, store: Optional[SessionStore] = None):
        self.session = session or GameSession()
        self.store = store
        # 设置界面中尚未开始游戏的词表（来自上传的文件或存档）
        self.pending_words: List[str] = []
        self.word_source: Optional[str] = None
        # 事件钩子供 UI 层订阅：类型 -> 回调
        self._ui_handlers: Dict[str, Callable[[Dict[str, Any]], None]] = {}

        self._bind_session_handlers()

    def _bind_session_handlers(self) -> None:
        s = self.session
        s.on(EVT_CHANGED, self._on_changed)
        s.on(EVT_ROUND_STARTED, lambda p: self._emit_ui("schedule_tick", p))
        s.on(EVT_TICK, lambda p: self._emit_ui("tick", p))
        s.on(EVT_LOW_TIME, lambda p: self._emit_ui("low_time", p))
        s.on(EVT_ROUND_ENDED, self._on_round_ended)
        s.on(EVT_GAME_OVER, self._on_game_over)

    # 事件派发到 UI 层
    def on_ui(self, event: str, handler: Callable[[Dict[str, Any]], None]) -> None:
        self._ui_handlers[event] = handler

    def _emit_ui(self, event: str, payload: Dict[str, Any]) -> None:
        cb = self._ui_handlers.get(event)
        if cb:
            try:
                cb(payload)
            except Exception:
                logger.exception("UI 回调 %s 处理失败", event)

    def _on_changed(self, _payload: Dict[str, Any]) -> None:
        self._save()
        self._emit_ui("state", self.session.snapshot())

    def _on_round_ended(self, payload: Dict[str, Any]) -> None:
        self._emit_ui("cancel_tick", payload)
        self._emit_ui("round_ended", payload)

    def _on_game_over(self, payload: Dict[str, Any]) -> None:
        self._emit_ui("cancel_tick", payload)
        self._emit_ui("game_over", payload)

    def _save(self) -> None:
        # 游戏开始前不覆盖已有存档
        if self.store is None or self.session.phase is GamePhase.SETUP:
            return
        self.store.save(self.session.state())

    # 存档
    def resume(self) -> bool:
        """读取存档并预填设置界面；没有可用存档时返回 False"""
        if self.store is None:
            return False
        state = self.store.load()
        if not state:
            return False
        try:
            self.session.restore(state)
        except (ValidationError, ValueError) as exc:
            logger.warning("存档无法恢复: %s", exc)
            return False
        self.pending_words = list(state.get("words") or [])
        self.word_source = "存档" if self.pending_words else None
        return True

    # 设置
    def load_words(self, path: Union[str, Path]) -> Optional[str]:
        """从文件读取词表；成功返回 None，失败返回提示文字"""
        try:
            words = read_word_file(path)
        except OSError as exc:
            logger.warning("读取词表失败: %s", exc)
            return f"无法读取词表: {path}"
        except UnicodeDecodeError as exc:
            logger.warning("词表不是 UTF-8 编码: %s (%s)", path, exc)
            return f"无法读取词表: {path}"
        if not words:
            return "词表为空"
        self.pending_words = words
        self.word_source = Path(path).name
        logger.info("已读取词表 %s: %d 个词", path, len(words))
        self._emit_ui("state", self.session.snapshot())
        return None

    def start_game(self, team_names: Sequence[str]) -> Optional[str]:
        """开始游戏；成功返回 None，否则返回提示文字"""
        try:
            self.session.configure(team_names, self.pending_words)
        except ValidationError as exc:
            logger.info("无法开始游戏: %s", exc)
            return "请先上传词表并填写所有队伍名称"
        except InvalidStateError as exc:
            logger.warning("忽略无效操作: %s", exc)
            return None
        return None

    # 行为动作
    def guess(self) -> None:
        self.session.guess()

    def skip(self) -> None:
        self.session.skip()

    def next_round(self) -> None:
        try:
            self.session.advance_team()
        except InvalidStateError as exc:
            logger.warning("忽略无效操作: %s", exc)

    def tick(self, generation: Optional[int] = None) -> bool:
        return self.session.tick(generation)

    def new_game(self) -> None:
        """整局重置并回到设置界面，保留队名与词表"""
        self._emit_ui("cancel_tick", {})
        self.session.reset()
        self.pending_words = self.session.words
        if self.store is not None:
            self.store.save(self.session.state())


__all__ = [
    "ClientGame",
]
