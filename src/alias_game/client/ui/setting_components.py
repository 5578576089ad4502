from typing import Callable, Optional, Tuple

from alias_game.client.ui.button import Button
from alias_game.shared.constants import FONT_NAME


def make_button(x: int, y: int, width: int, height: int, text: str, bg_color: Tuple[int, int, int], fg_color: Tuple[int, int, int] = (255, 255, 255), font_size: int = 22, font_name: str = FONT_NAME, hover_bg_color: Optional[Tuple[int, int, int]] = None, on_click: Optional[Callable[[], None]] = None) -> Button:
    """Create a standard styled Button for the game screens."""
    if hover_bg_color is None:
        hover_bg_color = tuple(max(0, c - 25) for c in bg_color)
    return Button(x=x, y=y, width=width, height=height, text=text, bg_color=bg_color, fg_color=fg_color, hover_bg_color=hover_bg_color, font_size=font_size, font_name=font_name, on_click=on_click)
