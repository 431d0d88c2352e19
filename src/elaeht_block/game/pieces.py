from __future__ import annotations

import itertools
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List, Optional, Sequence

import numpy as np


class PieceColor(IntEnum):
    YELLOW = 1
    CYAN = 2
    PURPLE = 3
    RED = 4
    EMERALD = 5
    PINK = 6
    INDIGO = 7
    BLUE = 8
    ORANGE = 9
    GREEN = 10


Shape = np.ndarray


def make_shape(rows: Sequence[Sequence[int]]) -> Shape:
    """Build a read-only boolean occupancy matrix from nested 0/1 rows."""
    shape = np.array(rows, dtype=np.bool_)
    if shape.ndim != 2 or shape.shape[0] < 1 or shape.shape[1] < 1:
        raise ValueError(f"shape must be a non-empty rectangle, got {rows!r}")
    shape.flags.writeable = False
    return shape


def _frozen(shape: Shape) -> Shape:
    out = np.ascontiguousarray(shape, dtype=np.bool_).copy()
    out.flags.writeable = False
    return out


def rotate_cw(shape: Shape, k: int = 1) -> Shape:
    # Each quarter turn is transpose followed by reversing every row.
    k = k % 4
    out = shape
    for _ in range(k):
        out = out.T[:, ::-1]
    return _frozen(out)


def mirror(shape: Shape) -> Shape:
    return _frozen(shape[:, ::-1])


@dataclass(frozen=True, eq=False)
class PieceTemplate:
    shape: Shape
    color: PieceColor


PIECE_CATALOG: tuple[PieceTemplate, ...] = (
    PieceTemplate(make_shape([[1, 1], [1, 1]]), PieceColor.YELLOW),
    PieceTemplate(make_shape([[1, 1]]), PieceColor.YELLOW),
    PieceTemplate(make_shape([[1, 1, 1, 1]]), PieceColor.CYAN),
    PieceTemplate(make_shape([[1, 1, 1]]), PieceColor.CYAN),
    PieceTemplate(make_shape([[1, 1, 1], [0, 1, 0]]), PieceColor.PURPLE),
    PieceTemplate(make_shape([[1, 1, 0], [0, 1, 1]]), PieceColor.RED),
    PieceTemplate(make_shape([[0, 1, 1], [1, 1, 0]]), PieceColor.GREEN),
    PieceTemplate(make_shape([[1]]), PieceColor.EMERALD),
    PieceTemplate(make_shape([[1, 1, 1], [1, 1, 1], [1, 1, 1]]), PieceColor.PINK),
    PieceTemplate(make_shape([[1, 0], [1, 0], [1, 1]]), PieceColor.INDIGO),
    PieceTemplate(make_shape([[1, 0], [0, 1]]), PieceColor.INDIGO),
    PieceTemplate(make_shape([[1, 1], [1, 1], [1, 1]]), PieceColor.INDIGO),
    PieceTemplate(make_shape([[1, 0], [1, 1]]), PieceColor.INDIGO),
    PieceTemplate(make_shape([[1, 1, 1, 1, 1]]), PieceColor.BLUE),
    PieceTemplate(make_shape([[1, 1, 1], [1, 0, 0]]), PieceColor.ORANGE),
)

# Largest extent of any catalog shape in either axis, under any rotation.
MAX_PIECE_EXTENT = max(max(t.shape.shape) for t in PIECE_CATALOG)

_piece_ids: Iterator[int] = itertools.count(1)


def next_piece_id() -> int:
    return next(_piece_ids)


@dataclass(frozen=True, eq=False)
class Piece:
    """A placeable piece instance held in the active set."""

    id: int
    shape: Shape
    color: PieceColor

    @property
    def rows(self) -> int:
        return int(self.shape.shape[0])

    @property
    def cols(self) -> int:
        return int(self.shape.shape[1])


class PieceCatalog:
    """Random piece factory over a fixed set of templates.

    Every piece draws one template uniformly, then optionally a horizontal
    mirror and 0-3 clockwise quarter turns (mirror first). The random source
    is injectable so games can be replayed from a seed.
    """

    def __init__(
        self,
        templates: Sequence[PieceTemplate] = PIECE_CATALOG,
        rng: Optional[random.Random] = None,
        allow_rotation: bool = True,
        allow_mirror: bool = False,
    ) -> None:
        if not templates:
            raise ValueError("catalog needs at least one template")
        self.templates = tuple(templates)
        self.rng = rng or random.Random()
        self.allow_rotation = allow_rotation
        self.allow_mirror = allow_mirror

    def generate(self) -> Piece:
        template = self.rng.choice(self.templates)
        shape = template.shape
        if self.allow_mirror and self.rng.random() < 0.5:
            shape = mirror(shape)
        if self.allow_rotation:
            shape = rotate_cw(shape, self.rng.randrange(4))
        return Piece(id=next_piece_id(), shape=shape, color=template.color)

    def generate_batch(self, n: int) -> List[Piece]:
        return [self.generate() for _ in range(n)]
