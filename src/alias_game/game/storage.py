"""
存档

- JsonFileStore: 以单个 JSON 文件为后端的简单键值存储
- SessionStore: 会话存档适配器，固定键名 aliasGameState，只保存
  {teams, words, scores}；读写失败只记录警告，游戏继续在内存中进行
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from alias_game.shared.constants import SESSION_KEY, TEAM_COUNT

from .errors import PersistenceError

logger = logging.getLogger(__name__)


class JsonFileStore:
    """键值存储：整个文件是一个 JSON 对象"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"cannot read {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise PersistenceError(f"{self.path} does not contain a JSON object")
        return data

    def _write_all(self, data: Dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
        except (OSError, TypeError, ValueError) as exc:
            raise PersistenceError(f"cannot write {self.path}: {exc}") from exc

    def get(self, key: str) -> Optional[Any]:
        return self._read_all().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def delete(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)


def _valid_state(state: Any, team_count: int) -> bool:
    if not isinstance(state, dict):
        return False
    teams, words, scores = state.get("teams"), state.get("words"), state.get("scores")
    if not isinstance(teams, list) or len(teams) != team_count:
        return False
    if not all(isinstance(t, str) for t in teams):
        return False
    if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
        return False
    if not isinstance(scores, list) or len(scores) != team_count:
        return False
    return all(isinstance(s, int) and not isinstance(s, bool) and s >= 0 for s in scores)


class SessionStore:
    """会话存档适配器"""

    def __init__(self, store: JsonFileStore, key: str = SESSION_KEY, team_count: int = TEAM_COUNT):
        self.store = store
        self.key = key
        self.team_count = team_count

    def save(self, state: Dict[str, Any]) -> bool:
        """保存 {teams, words, scores}；失败返回 False，不抛出异常"""
        payload = {
            "teams": list(state.get("teams", [])),
            "words": list(state.get("words", [])),
            "scores": list(state.get("scores", [])),
        }
        try:
            self.store.set(self.key, payload)
        except PersistenceError as exc:
            logger.warning("保存游戏失败: %s", exc)
            return False
        return True

    def load(self) -> Optional[Dict[str, Any]]:
        """读取存档；不存在、损坏或格式不符时返回 None"""
        try:
            state = self.store.get(self.key)
        except PersistenceError as exc:
            logger.warning("加载存档失败: %s", exc)
            return None
        if state is None:
            return None
        if not _valid_state(state, self.team_count):
            logger.warning("存档格式无效，已忽略")
            return None
        return state

    def clear(self) -> None:
        try:
            self.store.delete(self.key)
        except PersistenceError as exc:
            logger.warning("清除存档失败: %s", exc)
