"""
词库

持有本局上传的全部词语以及只增不减的“已跳过”集合：
- draw() 从未跳过的词中均匀随机抽取一个，返回大写形式用于展示
- 猜对的词不会离开词库，只有跳过才会；词库耗尽完全由跳过驱动
"""

from __future__ import annotations

import logging
import random
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple, Union

from .errors import EXHAUSTED, InvalidInputError, _Exhausted

logger = logging.getLogger(__name__)


class WordPool:
    """会话词库：words 不可变，skipped 单调增长"""

    def __init__(self, words: Optional[Iterable[str]] = None, rng: Optional[random.Random] = None):
        self._words: Tuple[str, ...] = ()
        self._skipped: set = set()
        # 展示形式（大写） -> 原始词条，用于把界面上的词映射回词库
        self._by_display: Dict[str, List[str]] = {}
        self._rng = rng or random.Random()
        if words is not None:
            self.load(words)

    @property
    def words(self) -> Tuple[str, ...]:
        return self._words

    @property
    def skipped(self) -> FrozenSet[str]:
        return frozenset(self._skipped)

    @property
    def loaded(self) -> bool:
        return bool(self._words)

    def load(self, words: Iterable[str]) -> None:
        """替换词库内容并清空跳过集合。

        空白行会被过滤；过滤后为空则抛出 InvalidInputError，原词库保持不变。
        """
        kept = [w for w in words if isinstance(w, str) and w.strip()]
        if not kept:
            raise InvalidInputError("word list is empty")
        self._words = tuple(kept)
        self._skipped = set()
        self._by_display = {}
        for w in self._words:
            self._by_display.setdefault(w.upper(), []).append(w)
        logger.info("词库已载入: %d 个词", len(self._words))

    def clear(self) -> None:
        self._words = ()
        self._skipped = set()
        self._by_display = {}

    def available(self) -> List[str]:
        """未被跳过的词（去重，保持上传顺序）"""
        return list(dict.fromkeys(w for w in self._words if w not in self._skipped))

    def is_exhausted(self) -> bool:
        return not any(w not in self._skipped for w in self._words)

    def draw(self) -> Union[str, _Exhausted]:
        """随机抽一个可用词（大写）；没有可用词时返回 EXHAUSTED。不修改状态。"""
        pool = self.available()
        if not pool:
            return EXHAUSTED
        return self._rng.choice(pool).upper()

    def mark_skipped(self, word: Optional[str]) -> bool:
        """把词加入跳过集合，重复跳过无副作用。

        既接受原始词条也接受 draw() 返回的大写形式；不在词库中的词被忽略，
        以保证 skipped 始终是 words 的子集。返回是否有新词被加入。
        """
        if not word:
            return False
        if word in self._by_display:
            # 展示形式：所有显示为同一个词的词条一起跳过
            targets = self._by_display[word]
        elif word in self._by_display.get(word.upper(), ()):
            targets = [word]
        else:
            targets = []
        if not targets:
            logger.debug("忽略未知词的跳过请求: %r", word)
            return False
        before = len(self._skipped)
        self._skipped.update(targets)
        return len(self._skipped) > before
