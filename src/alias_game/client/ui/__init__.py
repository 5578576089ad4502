"""
用户界面模块

提供基础 UI 组件以支撑猜词游戏的客户端表现层：
- 计时进度条：宽度与颜色随剩余时间变化（绿 -> 红）
- HUD 渲染器 HudRenderer：当前队伍、词语/回合小结、记分板
- 文案工具：回合小结与终局比分

该模块与 Pygame 紧耦合用于渲染，但不负责游戏逻辑；
游戏交互由 `alias_game.client.game.ClientGame` 提供，通过回调进行联动。
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import pygame

from alias_game.shared.constants import BAR_TRACK, FONT_NAME, ROUND_TIME


def time_bar_color(time_left: int, total: int = ROUND_TIME) -> Tuple[int, int, int]:
    """进度条颜色：green = floor(255 * t / total)，red = 255 - green"""
    green = (255 * int(time_left)) // int(total) if total > 0 else 0
    green = max(0, min(255, green))
    return (255 - green, green, 0)


def time_bar_fraction(time_left: int, total: int = ROUND_TIME) -> float:
    if total <= 0:
        return 0.0
    return max(0.0, min(1.0, time_left / total))


def round_summary_text(team_name: str, round_score: int) -> str:
    return f"{team_name.upper()}: {round_score} 分"


def final_summary_lines(teams: Sequence[str], scores: Mapping[int, int]) -> List[str]:
    return [f"{name}: {scores.get(i, 0)}" for i, name in enumerate(teams)]


def load_font(size: int, name: Optional[str] = FONT_NAME) -> pygame.font.Font:
    try:
        return pygame.font.SysFont(name, size)
    except Exception:
        return pygame.font.SysFont(None, size)


class HudRenderer:
    """HUD 渲染器：队伍标题、词语、计时条与记分板"""

    def __init__(
        self,
        title_font: Optional[pygame.font.Font] = None,
        word_font: Optional[pygame.font.Font] = None,
        item_font: Optional[pygame.font.Font] = None,
    ):
        self._title_font = title_font or load_font(28)
        self._word_font = word_font or load_font(56)
        self._item_font = item_font or load_font(20)

    def render_header(self, surface: pygame.Surface, state: Dict[str, Any], rect: pygame.Rect) -> None:
        # 当前队伍名（大写）
        teams = state.get("teams") or []
        idx = int(state.get("current_team_index", 0) or 0)
        name = teams[idx] if idx < len(teams) else ""
        surf = self._title_font.render(name.upper(), True, (20, 20, 20))
        surface.blit(surf, surf.get_rect(midtop=(rect.centerx, rect.top)))

        # 回合结束后显示小结，否则显示当前词
        if state.get("round_ended"):
            text = round_summary_text(name, int(state.get("round_score", 0) or 0))
        else:
            text = state.get("current_word") or ""
        word = self._word_font.render(text, True, (10, 10, 10))
        surface.blit(word, word.get_rect(center=(rect.centerx, rect.top + rect.height // 2 + 10)))

    def render_time_bar(self, surface: pygame.Surface, state: Dict[str, Any], rect: pygame.Rect) -> None:
        total = int(state.get("round_time", ROUND_TIME) or ROUND_TIME)
        time_left = int(state.get("time_left", 0) or 0)
        pygame.draw.rect(surface, BAR_TRACK, rect, border_radius=rect.height // 2)
        fill_w = int(rect.width * time_bar_fraction(time_left, total))
        if fill_w > 0:
            fill = pygame.Rect(rect.left, rect.top, fill_w, rect.height)
            pygame.draw.rect(surface, time_bar_color(time_left, total), fill, border_radius=rect.height // 2)

    def render_scores(self, surface: pygame.Surface, state: Dict[str, Any], rect: pygame.Rect) -> None:
        # 记分板，当前队伍加粗高亮
        teams = state.get("teams") or []
        scores: Dict[int, int] = state.get("scores") or {}
        current = int(state.get("current_team_index", 0) or 0)
        y = rect.top + 6
        for i, line in enumerate(final_summary_lines(teams, scores)):
            color = (30, 110, 200) if i == current else (40, 40, 40)
            surf = self._item_font.render(line, True, color)
            surface.blit(surf, (rect.left + 6, y))
            y += self._item_font.get_linesize() + 3


__all__ = [
    "time_bar_color",
    "time_bar_fraction",
    "round_summary_text",
    "final_summary_lines",
    "load_font",
    "HudRenderer",
]
