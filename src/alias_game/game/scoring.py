"""
计分板

每队一个只增不减的计数器，只在回合控制器处理“猜对”时加分。
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from alias_game.shared.constants import TEAM_COUNT


class ScoreLedger:
    """队伍序号 -> 非负整数得分"""

    def __init__(self, team_count: int = TEAM_COUNT, scores: Optional[Sequence[int]] = None):
        self.team_count = team_count
        self._scores: List[int] = [0] * team_count
        if scores is not None:
            self.restore(scores)

    def _check_index(self, team_index: int) -> None:
        if not 0 <= team_index < self.team_count:
            raise IndexError(f"team index out of range: {team_index}")

    def increment(self, team_index: int) -> int:
        """给指定队伍加一分，返回新分数"""
        self._check_index(team_index)
        self._scores[team_index] += 1
        return self._scores[team_index]

    def score(self, team_index: int) -> int:
        self._check_index(team_index)
        return self._scores[team_index]

    def snapshot(self) -> Dict[int, int]:
        """只读视图（副本），用于展示与终局结算"""
        return dict(enumerate(self._scores))

    def as_list(self) -> List[int]:
        return list(self._scores)

    def restore(self, scores: Sequence[int]) -> None:
        """从存档恢复分数；长度或取值不合法时抛出 ValueError"""
        values = list(scores)
        if len(values) != self.team_count:
            raise ValueError(f"expected {self.team_count} scores, got {len(values)}")
        if any(isinstance(v, bool) or not isinstance(v, int) or v < 0 for v in values):
            raise ValueError(f"scores must be non-negative integers: {values!r}")
        self._scores = values

    def reset(self) -> None:
        self._scores = [0] * self.team_count
