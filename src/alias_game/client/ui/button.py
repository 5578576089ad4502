import os
import pygame
from typing import Callable, Optional


class Button:
    """
    A clickable button for the game screens (guess, skip, next round, ...).

    Supports separate background (`bg_color`) and foreground/text (`fg_color`),
    an optional hover color and a `visible` flag so a screen can keep one
    instance around and only show it in the right phase.
    """

    def __init__(
        self,
        x,
        y,
        width,
        height,
        text,
        bg_color=(0, 0, 0),
        fg_color=(255, 255, 255),
        hover_bg_color: Optional[tuple] = None,
        font_size=24,
        font_name=None,
        on_click: Optional[Callable[[], None]] = None,
    ):
        """
        Initialize the button with position, size, text, colors and font.
        - `font_name`: optional; either a system font name or path to .ttf file
        """
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.bg_color = bg_color
        self.hover_bg_color = hover_bg_color
        self.fg_color = fg_color
        self.font_size = font_size
        self.visible = True
        # 按钮状态
        self.pressed: bool = False
        self.hovered: bool = False

        # 点击回调（可选）
        self.on_click: Optional[Callable[[], None]] = on_click

        if font_name and os.path.exists(font_name):
            self.font = pygame.font.Font(font_name, font_size)
        else:
            try:
                self.font = pygame.font.SysFont(font_name, font_size)
            except Exception:
                self.font = pygame.font.Font(None, font_size)

        self._render_text()

    def _render_text(self) -> None:
        self.text_surface = self.font.render(self.text, True, self.fg_color)
        self.text_rect = self.text_surface.get_rect(center=self.rect.center)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Handle pygame mouse events; hidden buttons ignore everything.

        - MOUSEMOTION: update hovered state
        - MOUSEBUTTONDOWN (left): set pressed True when hovered
        - MOUSEBUTTONUP (left): if was pressed and still hovered, trigger click
        """
        if not self.visible:
            self.pressed = self.hovered = False
            return
        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.pressed = True
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if self.pressed:
                self.pressed = False
                if self.rect.collidepoint(event.pos) and self.on_click:
                    self.on_click()

    def draw(self, screen):
        """Draw the button with a drop shadow; pressed buttons look sunken."""
        if not self.visible:
            return
        current_bg = self.bg_color
        if self.hovered and self.hover_bg_color:
            current_bg = self.hover_bg_color

        shadow_offset = 2 if self.pressed else 4
        shadow_rect = self.rect.move(shadow_offset, shadow_offset)
        pygame.draw.rect(screen, (150, 150, 150), shadow_rect, border_radius=8)
        if self.pressed:
            current_bg = tuple(max(0, c - 20) for c in current_bg)
        pygame.draw.rect(screen, current_bg, self.rect, border_radius=8)
        pygame.draw.rect(screen, (100, 100, 100), self.rect, 2, border_radius=8)  # 边框

        if self.pressed:
            screen.blit(self.text_surface, self.text_rect.move(2, 2))
        else:
            screen.blit(self.text_surface, self.text_rect)
