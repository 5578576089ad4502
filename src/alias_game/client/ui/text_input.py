import logging
import pygame
from typing import Callable, Optional, Tuple

logger = logging.getLogger(__name__)


class TextInput:
    """
    单行文本输入框：用于队伍名称与词表文件路径。

    功能特性：
    - 点击激活；Enter 提交内容；Esc 取消激活；Backspace 删除字符
    - 内容在提交后保留（队名需要一直显示）
    - 占位符提示（输入框为空时显示）
    - 支持中文等输入法（TEXTINPUT 事件）
    """

    def __init__(
        self,
        rect: pygame.Rect,
        font_name: Optional[str] = None,
        font_size: int = 22,
        text_color: Tuple[int, int, int] = (0, 0, 0),
        bg_color: Tuple[int, int, int] = (240, 240, 240),
        placeholder: str = "",
        text: str = "",
        max_length: int = 64,
    ) -> None:
        """初始化文本输入框

        Args:
            rect: 输入框的矩形区域
            font_name: 字体名称（如 "Microsoft YaHei"），默认系统字体
            placeholder: 占位符文本（输入框为空时显示）
            text: 初始内容（例如从存档恢复的队名）
            max_length: 最大字符数
        """
        self.rect = rect
        self.text = text[:max_length]
        self.placeholder = placeholder
        self.text_color = text_color
        self.bg_color = bg_color
        self.max_length = max_length
        self.active = False  # 是否激活（获得焦点）

        try:
            self.font = pygame.font.SysFont(font_name, font_size)
        except Exception:
            self.font = pygame.font.SysFont(None, font_size)

        # 提交回调函数：在用户按 Enter 时触发，参数为当前文本
        self.on_submit: Optional[Callable[[str], None]] = None

    def _set_active(self, active: bool) -> None:
        if active == self.active:
            return
        self.active = active
        try:
            if active:
                pygame.key.start_text_input()
                pygame.key.set_text_input_rect(self.rect)
            else:
                pygame.key.stop_text_input()
        except pygame.error as exc:
            logger.debug("切换文本输入失败: %s", exc)

    def handle_event(self, event: pygame.event.Event) -> None:
        """处理键盘和鼠标事件"""
        if event.type == pygame.MOUSEBUTTONDOWN:
            self._set_active(self.rect.collidepoint(event.pos))
        elif event.type == pygame.KEYDOWN and self.active:
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                if self.on_submit:
                    self.on_submit(self.text.strip())
            elif event.key == pygame.K_ESCAPE:
                self._set_active(False)
            elif event.key == pygame.K_BACKSPACE:
                self.text = self.text[:-1]
            # 字符输入通过 TEXTINPUT 事件处理，避免重复输入
        elif event.type == pygame.TEXTINPUT and self.active:
            remaining = self.max_length - len(self.text)
            if remaining > 0 and event.text:
                self.text += event.text[:remaining]

    def draw(self, screen: pygame.Surface) -> None:
        """每帧渲染输入框到屏幕"""
        shadow = self.rect.move(3, 3)
        pygame.draw.rect(screen, (200, 200, 200), shadow, border_radius=6)
        pygame.draw.rect(screen, self.bg_color, self.rect, border_radius=6)
        # 边框（激活时蓝色高亮）
        border_color = (80, 120, 200) if self.active else (180, 180, 180)
        pygame.draw.rect(screen, border_color, self.rect, 2, border_radius=6)

        txt = self.text if (self.text or self.active) else self.placeholder
        color = self.text_color if self.text or self.active else (130, 130, 130)
        surf = self.font.render(txt, True, color)
        screen.blit(surf, (self.rect.x + 8, self.rect.y + (self.rect.height - surf.get_height()) // 2))
