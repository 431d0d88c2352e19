from __future__ import annotations

import random

import pytest

from elaeht_block.game import GameConfig, GameEngine, PieceCatalog, PieceColor, PieceTemplate, make_shape


def fixed_catalog(*rows_list, color: PieceColor = PieceColor.CYAN) -> PieceCatalog:
    """Catalog that only ever deals the given shapes, unrotated."""
    templates = [PieceTemplate(make_shape(rows), color) for rows in rows_list]
    return PieceCatalog(templates, rng=random.Random(0), allow_rotation=False)


@pytest.fixture
def make_engine():
    def _make(*rows_list, pieces_per_set: int = 3) -> GameEngine:
        engine = GameEngine(
            GameConfig(pieces_per_set=pieces_per_set),
            catalog=fixed_catalog(*rows_list),
        )
        engine.start()
        return engine

    return _make
