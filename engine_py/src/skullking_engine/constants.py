"""Game constants and palette"""

from typing import List

MIN_PLAYERS = 2
MAX_ROUNDS = 10
MIN_TRICKS = 0
MAX_TRICKS = 10

# Phases
PHASE_SETUP = 'setup'
PHASE_IN_PROGRESS = 'in_progress'
PHASE_ENDED = 'ended'

PALETTE: List[str] = [
    '#0A0A0A',  # Black
    '#FF4D4D',  # Red Coral
    '#50C878',  # Green Bright
    '#404040',  # Gray 70
    '#D9D936',  # Neon Yellow Dark
    '#6b6b6b',  # Gray 50
]

DARK_PALETTE: List[str] = [
    '#000000',
    '#cc3d3d',
    '#40a060',
    '#2d2d2d',
    '#b8b82e',
    '#525252',
]

# Graph scaling floor/ceiling so small scores still get a readable band
GRAPH_MIN_CEILING = 50
GRAPH_MAX_FLOOR = -50
GRAPH_DEFAULT_RANGE = 100
GRAPH_DIVISIONS = 4

EMPTY_HISTORY_MESSAGE = 'NO ROUNDS COMPLETED YET'
EMPTY_GRAPH_MESSAGE = 'SCORE DATA WILL APPEAR AFTER ROUND 1'


def palette_color(color_index: int) -> str:
    return PALETTE[color_index % len(PALETTE)]


def palette_dark_color(color_index: int) -> str:
    return DARK_PALETTE[color_index % len(DARK_PALETTE)]
