"""
提示音

回合最后几秒（low_time 事件）播放提示音。没有音频设备或找不到音效文件时静音运行。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import pygame

logger = logging.getLogger(__name__)


class CueSound:
    """低剩余时间提示音"""

    def __init__(self, path: Optional[Union[str, Path]] = None, volume: float = 0.8):
        self._sound: Optional[pygame.mixer.Sound] = None
        if path is None:
            return
        p = Path(path)
        if not p.exists():
            logger.info("未找到提示音文件 %s，静音运行", p)
            return
        if not pygame.mixer.get_init():
            logger.info("音频设备不可用，静音运行")
            return
        try:
            self._sound = pygame.mixer.Sound(str(p))
            self.set_volume(volume)
        except pygame.error as exc:
            logger.warning("加载提示音失败: %s", exc)

    @property
    def available(self) -> bool:
        return self._sound is not None

    def set_volume(self, volume: float) -> None:
        if self._sound:
            self._sound.set_volume(max(0.0, min(1.0, volume)))

    def play(self) -> None:
        if self._sound:
            self._sound.play()
