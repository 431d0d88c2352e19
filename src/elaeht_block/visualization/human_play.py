from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

import pygame

from elaeht_block.game import GameConfig, GameEngine, GameStatus, InvalidMove, MoveResult, Piece
from .highscore import DEFAULT_PATH, HighScoreStore
from .renderer import Renderer
from .sounds import SoundBoard


logger = logging.getLogger(__name__)

CLEAR_FLASH_MS = 250
POPUP_MS = 900


def _pick_piece(engine: GameEngine, renderer: Renderer, pos: Tuple[int, int]) -> Optional[Piece]:
    for slot, piece in enumerate(engine.pieces):
        if renderer.dock_slot_rect(slot).collidepoint(pos):
            return piece
    return None


def run(config: Optional[GameConfig] = None, highscore_path: Union[str, Path] = DEFAULT_PATH,
        muted: bool = False) -> None:
    pygame.init()
    try:
        engine = GameEngine(config)
        store = HighScoreStore(highscore_path)
        high_score = store.load()
        renderer = Renderer(board_size=engine.board.size, dock_slots=engine.config.pieces_per_set)
        sounds = SoundBoard(muted=muted)

        screen = pygame.display.set_mode(renderer.window_size)
        pygame.display.set_caption("Elaeht Block")
        big_font = pygame.font.SysFont(None, 56)
        font = pygame.font.SysFont(None, 26)
        clock = pygame.time.Clock()

        dragging: Optional[Piece] = None
        clearing: Tuple[Tuple[int, int], ...] = ()
        clearing_until = 0
        popup: Optional[MoveResult] = None
        popup_until = 0

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if engine.status is GameStatus.NOT_STARTED:
                        if event.key == pygame.K_ESCAPE:
                            running = False
                        else:
                            engine.start()
                    elif event.key == pygame.K_m:
                        logger.info("sound %s", "muted" if sounds.toggle_mute() else "on")
                    elif event.key == pygame.K_ESCAPE:
                        engine.quit()
                        dragging = None
                        popup = None
                    elif event.key == pygame.K_r:
                        engine.reset()
                        dragging = None
                        popup = None
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if engine.status is GameStatus.IN_PROGRESS:
                        dragging = _pick_piece(engine, renderer, event.pos)
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and dragging is not None:
                    cell = renderer.cell_at(event.pos)
                    preview = engine.preview(dragging.id, *cell) if cell is not None else None
                    if preview is not None and preview.legal:
                        try:
                            result = engine.place(dragging.id, preview.row, preview.col)
                        except InvalidMove as exc:
                            logger.debug("drop discarded: %s", exc)
                        else:
                            sounds.play("place")
                            if result.lines_cleared:
                                sounds.play("clear")
                                clearing = result.cleared_cells
                                clearing_until = pygame.time.get_ticks() + CLEAR_FLASH_MS
                                popup = result
                                popup_until = pygame.time.get_ticks() + POPUP_MS
                            if result.game_over:
                                sounds.play("game_over")
                            if store.update(engine.score):
                                high_score = engine.score
                    dragging = None

            screen.fill((15, 23, 42))
            width = screen.get_width()

            if engine.status is GameStatus.NOT_STARTED:
                renderer.draw_text(screen, big_font, "Elaeht Block", (width // 2, screen.get_height() // 3))
                renderer.draw_text(screen, font, "Press any key to play", (width // 2, screen.get_height() // 2))
                renderer.draw_text(screen, font, f"Record: {high_score}", (width // 2, screen.get_height() // 2 + 40),
                                   (147, 197, 253))
            else:
                now = pygame.time.get_ticks()
                if clearing and now >= clearing_until:
                    clearing = ()
                if popup is not None and now >= popup_until:
                    popup = None
                renderer.draw_text(screen, big_font, f"{engine.score}", (width // 2, renderer.margin + 20))
                renderer.draw_text(screen, font, f"Record {high_score}", (renderer.margin + 50, renderer.margin),
                                   (147, 197, 253))
                renderer.draw_board(screen, engine.board.grid, clearing)
                renderer.draw_dock(screen, engine.pieces, dragging.id if dragging is not None else None)

                if dragging is not None:
                    mouse = pygame.mouse.get_pos()
                    cell = renderer.cell_at(mouse)
                    if cell is not None:
                        preview = engine.preview(dragging.id, *cell)
                        if preview is not None:
                            renderer.draw_preview(screen, dragging, preview)
                    cs = renderer.cell_size
                    renderer.draw_piece(screen, dragging, mouse[0] - dragging.cols * cs // 2,
                                        mouse[1] - dragging.rows * cs // 2, cs)

                if popup is not None:
                    renderer.draw_popup(screen, big_font, font, popup.score_delta, popup.combo)

                if engine.game_over:
                    renderer.draw_text(screen, big_font, "Game Over", (width // 2, screen.get_height() // 2 - 30),
                                       (255, 100, 100))
                    renderer.draw_text(screen, font, f"Score {engine.score} - R to restart, Esc for menu",
                                       (width // 2, screen.get_height() // 2 + 20))

            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
