from __future__ import annotations

from typing import Iterable, Optional, Tuple

import numpy as np
import pygame

from elaeht_block.game import Piece, Preview
from .palette import color_for_value


class Renderer:
    def __init__(self, board_size: int = 8, cell_size: int = 44, margin: int = 24, dock_slots: int = 3) -> None:
        self.board_size = board_size
        self.cell_size = cell_size
        self.margin = margin
        self.dock_slots = max(1, dock_slots)
        self.slot_width = board_size * cell_size // self.dock_slots
        # Dock cells shrink so a 5-wide piece fits in one slot.
        self.dock_cell = min(cell_size // 2, self.slot_width // 5)
        self.header = 60

    @property
    def board_origin(self) -> Tuple[int, int]:
        return self.margin, self.margin + self.header

    @property
    def window_size(self) -> Tuple[int, int]:
        board_px = self.board_size * self.cell_size
        return board_px + self.margin * 2, board_px + self.margin * 3 + self.header + self.dock_cell * 5

    def cell_at(self, pos: Tuple[int, int]) -> Optional[Tuple[int, int]]:
        ox, oy = self.board_origin
        col = (pos[0] - ox) // self.cell_size
        row = (pos[1] - oy) // self.cell_size
        if 0 <= row < self.board_size and 0 <= col < self.board_size:
            return int(row), int(col)
        return None

    def dock_slot_rect(self, slot: int) -> pygame.Rect:
        board_px = self.board_size * self.cell_size
        x = self.margin + slot * self.slot_width
        y = self.margin * 2 + self.header + board_px
        return pygame.Rect(x, y, self.slot_width, self.dock_cell * 5)

    def _draw_cell(self, screen: pygame.Surface, x: int, y: int, size: int, color, width: int = 0) -> None:
        pygame.draw.rect(screen, color, pygame.Rect(x, y, size - 2, size - 2), width, border_radius=4)

    def draw_board(self, screen: pygame.Surface, grid: np.ndarray, clearing: Iterable[Tuple[int, int]] = ()) -> None:
        ox, oy = self.board_origin
        flashing = set(clearing)
        for r in range(grid.shape[0]):
            for c in range(grid.shape[1]):
                color = (255, 255, 255) if (r, c) in flashing else color_for_value(int(grid[r, c]))
                self._draw_cell(screen, ox + c * self.cell_size, oy + r * self.cell_size, self.cell_size, color)

    def draw_preview(self, screen: pygame.Surface, piece: Piece, preview: Preview) -> None:
        ox, oy = self.board_origin
        color = color_for_value(int(piece.color)) if preview.legal else (220, 80, 80)
        for dr, dc in zip(*np.nonzero(piece.shape)):
            x = ox + (preview.col + int(dc)) * self.cell_size
            y = oy + (preview.row + int(dr)) * self.cell_size
            self._draw_cell(screen, x, y, self.cell_size, color, width=3)

    def draw_piece(self, screen: pygame.Surface, piece: Piece, x: int, y: int, cell: int) -> None:
        color = color_for_value(int(piece.color))
        for dr, dc in zip(*np.nonzero(piece.shape)):
            self._draw_cell(screen, x + int(dc) * cell, y + int(dr) * cell, cell, color)

    def draw_dock(self, screen: pygame.Surface, pieces: Iterable[Piece], dragging: Optional[int]) -> None:
        for slot, piece in enumerate(pieces):
            if piece.id == dragging:
                continue
            rect = self.dock_slot_rect(slot)
            x = rect.centerx - piece.cols * self.dock_cell // 2
            y = rect.centery - piece.rows * self.dock_cell // 2
            self.draw_piece(screen, piece, x, y, self.dock_cell)

    def draw_text(self, screen: pygame.Surface, font: pygame.font.Font, text: str, center: Tuple[int, int],
                  color=(255, 255, 255)) -> None:
        img = font.render(text, True, color)
        screen.blit(img, img.get_rect(center=center))

    def draw_popup(self, screen: pygame.Surface, big_font: pygame.font.Font, font: pygame.font.Font,
                   score_delta: int, combo: bool) -> None:
        ox, oy = self.board_origin
        cx = ox + self.board_size * self.cell_size // 2
        cy = oy + self.board_size * self.cell_size // 4
        self.draw_text(screen, big_font, f"+{score_delta}", (cx, cy), (250, 204, 21))
        if combo:
            self.draw_text(screen, font, "COMBO!", (cx, cy + 40), (251, 146, 60))
