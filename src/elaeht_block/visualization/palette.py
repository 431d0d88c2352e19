from __future__ import annotations

from typing import Tuple

RGB = Tuple[int, int, int]

EMPTY_CELL: RGB = (30, 41, 59)

PALETTE = {
    0: EMPTY_CELL,
    1: (250, 204, 21),   # yellow
    2: (34, 211, 238),   # cyan
    3: (168, 85, 247),   # purple
    4: (239, 68, 68),    # red
    5: (52, 211, 153),   # emerald
    6: (219, 39, 119),   # pink
    7: (79, 70, 229),    # indigo
    8: (96, 165, 250),   # blue
    9: (234, 88, 12),    # orange
    10: (34, 197, 94),   # green
}


def color_for_value(v: int) -> RGB:
    return PALETTE.get(abs(int(v)), (200, 200, 200))
