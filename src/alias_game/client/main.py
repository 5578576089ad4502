"""
客户端主程序入口

启动本地热座猜词游戏：设置界面 -> 游戏界面 -> 结算界面。
计时由 pygame 定时事件驱动，每个 tick 事件携带回合 generation，
回合结束后残留的 tick 会被引擎丢弃。
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import pygame

from alias_game.client.audio import CueSound
from alias_game.client.game import ClientGame
from alias_game.client.ui import HudRenderer, final_summary_lines, load_font
from alias_game.client.ui.setting_components import make_button
from alias_game.client.ui.text_input import TextInput
from alias_game.game import GamePhase, JsonFileStore, RoundPhase, SessionStore
from alias_game.shared.constants import (
    DEFAULT_SAVE_FILE,
    DEFAULT_SETTINGS_FILE,
    FONT_NAME,
    FPS,
    GUESS_GREEN,
    GUESS_GREEN_HOVER,
    TEAM_COUNT,
    TICK_INTERVAL_MS,
    WHITE,
    WINDOW_HEIGHT,
    WINDOW_TITLE,
    WINDOW_WIDTH,
)

logger = logging.getLogger(__name__)

# 数据目录与资源路径（可通过环境变量覆盖）
DATA_DIR = Path(os.environ.get("ALIAS_DATA_DIR", Path.home() / ".alias_game"))
SAVE_PATH = Path(os.environ.get("ALIAS_SAVE_PATH", DATA_DIR / DEFAULT_SAVE_FILE))
SETTINGS_PATH = Path(os.environ.get("ALIAS_SETTINGS_PATH", DATA_DIR / DEFAULT_SETTINGS_FILE))
CUE_SOUND_PATH = Path(os.environ.get("ALIAS_CUE_SOUND", Path(__file__).parent / "data" / "low_time.wav"))

TICK_EVENT = pygame.USEREVENT + 1

# App state
APP_STATE: Dict[str, Any] = {
    "screen": "setup",  # setup | play | result
    "ui": None,
    "settings": {
        "volume": 80,
        "fullscreen": False,
    },
    "client": None,
    "cue": None,
    "notifications": [],  # List[Dict[str, Any]] with text, color, end_time
}


def load_settings() -> None:
    """从 JSON 文件加载设置（如果存在）。"""
    try:
        if SETTINGS_PATH.exists():
            with open(SETTINGS_PATH, "r", encoding="utf-8") as f:
                data = json.load(f)
            if isinstance(data, dict):
                for k in ("volume", "fullscreen"):
                    if k in data:
                        APP_STATE["settings"][k] = data[k]
    except (OSError, ValueError) as exc:
        logger.warning("加载设置失败: %s", exc)


def save_settings() -> None:
    """将当前设置保存到 JSON 文件。"""
    try:
        SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
        with open(SETTINGS_PATH, "w", encoding="utf-8") as f:
            json.dump(APP_STATE["settings"], f, ensure_ascii=False, indent=2)
    except OSError as exc:
        logger.warning("保存设置失败: %s", exc)


def add_notification(text: str, color=(200, 60, 60), duration=2.5) -> None:
    """添加一个临时的屏幕通知。"""
    APP_STATE["notifications"].append({
        "text": text,
        "color": color,
        "end_time": pygame.time.get_ticks() + duration * 1000
    })


def draw_notifications(screen: pygame.Surface, font: pygame.font.Font) -> None:
    now = pygame.time.get_ticks()
    APP_STATE["notifications"] = [n for n in APP_STATE["notifications"] if n["end_time"] > now]
    y = screen.get_height() - 40
    for n in reversed(APP_STATE["notifications"]):
        surf = font.render(n["text"], True, n["color"])
        screen.blit(surf, surf.get_rect(midbottom=(screen.get_width() // 2, y)))
        y -= surf.get_height() + 6


# 计时调度
def schedule_tick(payload: Dict[str, Any]) -> None:
    """为新回合启动每秒一次的 tick 事件（携带 generation）"""
    event = pygame.event.Event(TICK_EVENT, generation=payload.get("generation"))
    pygame.time.set_timer(event, TICK_INTERVAL_MS)


def cancel_tick(_payload: Optional[Dict[str, Any]] = None) -> None:
    pygame.time.set_timer(TICK_EVENT, 0)


def screen_for(phase: GamePhase) -> str:
    if phase is GamePhase.PLAYING:
        return "play"
    if phase is GamePhase.GAME_OVER:
        return "result"
    return "setup"


def build_setup_ui(screen_size: tuple, client: ClientGame) -> Dict[str, Any]:
    """构建设置界面：词表文件、三支队伍名称、开始按钮。"""
    sw, _sh = screen_size
    field_w = min(520, sw - 80)
    left = (sw - field_w) // 2
    y = 120

    path_input = TextInput(pygame.Rect(left, y, field_w - 110, 40), font_name=FONT_NAME,
                           placeholder="词表文件路径（.txt，每行一个词），也可拖入窗口", max_length=256)

    def _on_load_words(path: Optional[str] = None) -> None:
        target = (path or path_input.text).strip()
        if not target:
            add_notification("请输入词表文件路径")
            return
        err = client.load_words(target)
        if err:
            add_notification(err)
        else:
            add_notification(f"已载入 {len(client.pending_words)} 个词", color=(50, 160, 50))

    path_input.on_submit = _on_load_words
    load_btn = make_button(left + field_w - 100, y, 100, 40, "读取", (70, 110, 190), on_click=_on_load_words)

    teams: List[TextInput] = []
    y += 70
    for i in range(TEAM_COUNT):
        prefill = client.session.teams[i] if i < len(client.session.teams) else ""
        teams.append(TextInput(pygame.Rect(left, y, field_w, 40), font_name=FONT_NAME,
                               placeholder=f"队伍 {i + 1} 名称", text=prefill, max_length=32))
        y += 52

    def _on_start() -> None:
        err = client.start_game([t.text for t in teams])
        if err:
            add_notification(err)

    start_btn = make_button(left, y + 20, field_w, 48, "开始游戏", (40, 40, 40), on_click=_on_start)

    return {
        "path": path_input,
        "teams": teams,
        "buttons": [load_btn, start_btn],
        "load_words": _on_load_words,
        "font": load_font(20),
        "title_font": load_font(40),
    }


def build_play_ui(screen_size: tuple, client: ClientGame) -> Dict[str, Any]:
    """构建游戏界面：猜对/跳过按钮、下一回合按钮与 HUD。"""
    sw, sh = screen_size
    pad = 24
    card_w = min(560, sw - pad * 2)
    left = (sw - card_w) // 2
    half = (card_w - 16) // 2

    guess_btn = make_button(left, sh - 200, half, 56, "猜对", GUESS_GREEN,
                            hover_bg_color=GUESS_GREEN_HOVER, on_click=client.guess)
    skip_btn = make_button(left + half + 16, sh - 200, half, 56, "跳过", WHITE,
                           fg_color=(30, 30, 30), hover_bg_color=(235, 235, 235), on_click=client.skip)
    next_btn = make_button(left, sh - 120, card_w, 52, "下一回合", (40, 40, 40), on_click=client.next_round)

    ui = {
        "guess": guess_btn,
        "skip": skip_btn,
        "next": next_btn,
        "buttons": [guess_btn, skip_btn, next_btn],
        "hud": HudRenderer(),
        "header_rect": pygame.Rect(left, pad, card_w, 200),
        "bar_rect": pygame.Rect(left, pad + 220, card_w, 10),
        "scores_rect": pygame.Rect(pad, pad, 220, 120),
    }
    sync_play_buttons(ui, client.session.snapshot())
    return ui


def sync_play_buttons(ui: Dict[str, Any], state: Dict[str, Any]) -> None:
    # 回合进行中显示猜对/跳过，回合结束后显示“下一回合”
    ui["guess"].visible = ui["skip"].visible = bool(state["active"])
    ui["next"].visible = bool(state["round_ended"])


def build_result_ui(screen_size: tuple, client: ClientGame) -> Dict[str, Any]:
    """构建结算界面：最终比分与“新游戏”按钮。"""
    sw, sh = screen_size

    def _on_new_game() -> None:
        client.new_game()

    new_btn = make_button(sw // 2 - 140, sh - 140, 280, 52, "新游戏", (40, 40, 40), on_click=_on_new_game)
    return {
        "buttons": [new_btn],
        "font": load_font(30),
        "title_font": load_font(44),
    }


def build_ui(screen: pygame.Surface, client: ClientGame) -> Dict[str, Any]:
    builders = {"setup": build_setup_ui, "play": build_play_ui, "result": build_result_ui}
    return builders[APP_STATE["screen"]](screen.get_size(), client)


def draw_setup(screen: pygame.Surface, ui: Dict[str, Any], client: ClientGame) -> None:
    title = ui["title_font"].render("Alias", True, (20, 20, 20))
    screen.blit(title, title.get_rect(midtop=(screen.get_width() // 2, 40)))
    ui["path"].draw(screen)
    for t in ui["teams"]:
        t.draw(screen)
    if client.pending_words:
        status = f"词表: {client.word_source or '-'}（{len(client.pending_words)} 个词）"
    else:
        status = "尚未载入词表"
    surf = ui["font"].render(status, True, (90, 90, 90))
    screen.blit(surf, (ui["path"].rect.left, ui["path"].rect.bottom + 8))


def draw_play(screen: pygame.Surface, ui: Dict[str, Any], client: ClientGame) -> None:
    state = client.session.snapshot()
    sync_play_buttons(ui, state)
    hud: HudRenderer = ui["hud"]
    hud.render_header(screen, state, ui["header_rect"])
    hud.render_time_bar(screen, state, ui["bar_rect"])
    hud.render_scores(screen, state, ui["scores_rect"])


def draw_result(screen: pygame.Surface, ui: Dict[str, Any], client: ClientGame) -> None:
    session = client.session
    title = ui["title_font"].render("游戏结束！最终比分", True, (20, 20, 20))
    screen.blit(title, title.get_rect(midtop=(screen.get_width() // 2, 60)))
    y = 160
    for line in final_summary_lines(session.teams, session.final_scores or {}):
        surf = ui["font"].render(line, True, (40, 40, 40))
        screen.blit(surf, surf.get_rect(midtop=(screen.get_width() // 2, y)))
        y += surf.get_height() + 12


def main() -> None:
    """Start the Pygame client and run the main loop."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("%s", "=" * 50)
    logger.info("Alias 猜词游戏启动中...")
    logger.info("%s", "=" * 50)

    pygame.init()
    try:
        pygame.mixer.init()
    except pygame.error as e:
        logger.warning("初始化音频设备失败: %s", e)

    load_settings()
    cue = CueSound(CUE_SOUND_PATH, volume=float(APP_STATE["settings"].get("volume", 80)) / 100.0)
    APP_STATE["cue"] = cue

    # 先尝试恢复存档，无论成功与否都从设置界面开始
    client = ClientGame(store=SessionStore(JsonFileStore(SAVE_PATH)))
    if client.resume():
        logger.info("已恢复上次的队伍、词表与分数")
    APP_STATE["client"] = client

    client.on_ui("schedule_tick", schedule_tick)
    client.on_ui("cancel_tick", cancel_tick)
    client.on_ui("low_time", lambda _p: cue.play())

    if APP_STATE["settings"].get("fullscreen"):
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption(WINDOW_TITLE)
    clock = pygame.time.Clock()
    notify_font = load_font(20)

    APP_STATE["screen"] = screen_for(client.session.phase)
    APP_STATE["ui"] = build_ui(screen, client)

    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break
                if event.type == TICK_EVENT:
                    client.tick(getattr(event, "generation", None))
                    continue

                ui = APP_STATE["ui"]
                if APP_STATE["screen"] == "setup":
                    if event.type == pygame.DROPFILE:
                        ui["load_words"](event.file)
                        continue
                    ui["path"].handle_event(event)
                    for t in ui["teams"]:
                        t.handle_event(event)
                elif APP_STATE["screen"] == "play" and event.type == pygame.KEYDOWN:
                    # 快捷键：空格猜对，S 跳过，回车下一回合
                    if event.key == pygame.K_SPACE:
                        client.guess()
                    elif event.key == pygame.K_s:
                        client.skip()
                    elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                        if client.session.round.phase is RoundPhase.ENDED:
                            client.next_round()
                for btn in ui["buttons"]:
                    btn.handle_event(event)

            if not running:
                break

            # 会话阶段变化时切换界面
            wanted = screen_for(client.session.phase)
            if wanted != APP_STATE["screen"]:
                APP_STATE["screen"] = wanted
                APP_STATE["ui"] = build_ui(screen, client)

            ui = APP_STATE["ui"]
            screen.fill((250, 250, 250))
            if APP_STATE["screen"] == "setup":
                draw_setup(screen, ui, client)
            elif APP_STATE["screen"] == "play":
                draw_play(screen, ui, client)
            else:
                draw_result(screen, ui, client)
            for btn in ui["buttons"]:
                btn.draw(screen)
            draw_notifications(screen, notify_font)

            pygame.display.flip()
            clock.tick(FPS)
    except KeyboardInterrupt:
        logger.info("收到中断信号，正在退出...")
    finally:
        cancel_tick()
        save_settings()
        pygame.quit()
        logger.info("游戏已退出")


if __name__ == "__main__":
    main()
