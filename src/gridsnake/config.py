from dataclasses import dataclass
from typing import Optional

# ----- Board geometry (pixels) -----
CELL_SIZE = 25
MAX_BOARD_PX = 500
CONTAINER_PADDING = 30

# ----- Window -----
WINDOW_WIDTH = 560
HUD_HEIGHT = 56

# ----- Colors -----
BOARD_BG   = (255, 255, 255)
WINDOW_BG  = (224, 242, 241)
SNAKE_BODY = (144, 238, 144)
SNAKE_HEAD = (0, 105, 92)
SNAKE_EDGE = (0, 0, 0)
FOOD       = (255, 0, 0)
TEXT       = (0, 0, 0)
SCORE_TEXT = (0, 77, 64)
NEW_BEST   = (255, 0, 0)
BUTTON     = (0, 105, 92)
BUTTON_TXT = (255, 255, 255)

# ----- Start position (cells), head first -----
START_SNAKE = [(2, 2), (1, 2), (0, 2)]

# ----- Persistence -----
HIGH_SCORE_KEY = "snakeHighScore"
HIGH_SCORE_FILE = "highscore.json"

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    tick_ms: int = 150
    window_width: int = WINDOW_WIDTH
    high_score_file: str = HIGH_SCORE_FILE

CFG = Config()
