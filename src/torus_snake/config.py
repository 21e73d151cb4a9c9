from dataclasses import dataclass
from typing import Optional

# ----- Window & grid -----
GRID_W, GRID_H = 40, 24
MIN_GRID_W, MIN_GRID_H = 4, 4
CELL_SIZE = 20
HUD_HEIGHT = 28
WIDTH, HEIGHT = GRID_W * CELL_SIZE, GRID_H * CELL_SIZE + HUD_HEIGHT

# ----- Colors -----
BG    = (20, 20, 24)
GREY  = (110, 110, 120)
GREEN = (80, 200, 80)
LIME  = (160, 255, 120)
RED   = (200, 70, 70)
TEXT  = (220, 220, 230)

# ----- Level generation -----
NO_BORDER_CHANCE = 0.2
SIDE_BORDER_CHANCE = 0.5        # left + right columns
TOP_BOTTOM_BORDER_CHANCE = 0.5  # top + bottom rows

# ----- Tunables (what you'd tweak while playing) -----
@dataclass
class Config:
    seed: Optional[int] = None   # None -> fresh randomness every run
    step_interval_ms: int = 150
    step_delta_ms: int = 50      # how much +/- changes the interval
    min_step_ms: int = 50
    poll_ms: int = 10            # input polling / frame cadence
    debug: bool = False          # print a line whenever a level ends

CFG = Config()
