"""
常量定义

定义游戏中使用的各种常量。
"""

# 游戏配置
TEAM_COUNT = 3
ROUND_TIME = 60  # 秒
LOW_TIME_THRESHOLD = 3  # 最后几秒播放提示音
TICK_INTERVAL_MS = 1000

# 存档配置
SESSION_KEY = "aliasGameState"
DEFAULT_SAVE_FILE = "alias_save.json"
DEFAULT_SETTINGS_FILE = "settings.json"

# 窗口配置
WINDOW_WIDTH = 960
WINDOW_HEIGHT = 640
WINDOW_TITLE = "Alias - 猜词派对"
FPS = 60
FONT_NAME = "Microsoft YaHei"

# 颜色定义 (RGB)
WHITE = (255, 255, 255)
BAR_TRACK = (224, 224, 224)  # 进度条底色 #e0e0e0
GUESS_GREEN = (34, 197, 94)
GUESS_GREEN_HOVER = (22, 163, 74)

# 事件类型
EVT_CHANGED = "changed"
EVT_ROUND_STARTED = "round_started"
EVT_TICK = "tick"
EVT_LOW_TIME = "low_time"
EVT_ROUND_ENDED = "round_ended"
EVT_GAME_OVER = "game_over"
