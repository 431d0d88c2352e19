from __future__ import annotations

import random

import numpy as np
import pytest

from elaeht_block.game import (
    PIECE_CATALOG,
    PieceCatalog,
    PieceColor,
    PieceTemplate,
    make_shape,
    mirror,
    rotate_cw,
)


def test_four_rotations_return_original_shape() -> None:
    for template in PIECE_CATALOG:
        assert np.array_equal(rotate_cw(template.shape, 4), template.shape)
        shape = template.shape
        for _ in range(4):
            shape = rotate_cw(shape)
        assert np.array_equal(shape, template.shape)


def test_rotate_is_transpose_then_reverse_rows() -> None:
    l_shape = make_shape([[1, 0], [1, 0], [1, 1]])
    rotated = rotate_cw(l_shape)
    assert rotated.shape == (2, 3)
    assert rotated.astype(int).tolist() == [[1, 1, 1], [1, 0, 0]]


def test_transforms_do_not_mutate_templates() -> None:
    z = make_shape([[1, 1, 0], [0, 1, 1]])
    before = z.copy()
    mirrored = mirror(z)
    rotate_cw(z, 3)
    assert np.array_equal(z, before)
    assert mirrored.astype(int).tolist() == [[0, 1, 1], [1, 1, 0]]
    with pytest.raises(ValueError):
        z[0, 0] = False


def test_make_shape_rejects_empty() -> None:
    with pytest.raises(ValueError):
        make_shape([])


def test_catalog_covers_required_shapes() -> None:
    shapes = {tuple(map(tuple, t.shape.astype(int).tolist())) for t in PIECE_CATALOG}
    assert ((1,),) in shapes
    assert ((1, 1),) in shapes
    assert ((1, 1, 1, 1, 1),) in shapes
    assert ((1, 1, 1), (1, 1, 1), (1, 1, 1)) in shapes
    assert ((1, 1, 1), (0, 1, 0)) in shapes


def test_batch_has_requested_size_and_fresh_ids() -> None:
    catalog = PieceCatalog(rng=random.Random(3))
    first = catalog.generate_batch(3)
    second = catalog.generate_batch(3)
    assert len(first) == 3 and len(second) == 3
    ids = [p.id for p in first + second]
    assert len(set(ids)) == 6


def test_seeded_catalogs_deal_the_same_shapes() -> None:
    a = PieceCatalog(rng=random.Random(42), allow_mirror=True).generate_batch(10)
    b = PieceCatalog(rng=random.Random(42), allow_mirror=True).generate_batch(10)
    for pa, pb in zip(a, b):
        assert np.array_equal(pa.shape, pb.shape)
        assert pa.color == pb.color
        assert pa.id != pb.id


def test_rotation_changes_orientation_of_dealt_pieces() -> None:
    line = make_shape([[1, 1, 1, 1, 1]])
    catalog = PieceCatalog([PieceTemplate(line, PieceColor.BLUE)], rng=random.Random(1))
    dims = {p.shape.shape for p in catalog.generate_batch(40)}
    assert dims == {(1, 5), (5, 1)}


class ScriptedRandom:
    """Random source that always mirrors and turns a fixed number of quarters."""

    def __init__(self, quarters: int) -> None:
        self.quarters = quarters

    def choice(self, seq):
        return seq[0]

    def random(self) -> float:
        return 0.0

    def randrange(self, n: int) -> int:
        return self.quarters


def test_mirror_is_applied_before_rotation() -> None:
    l_shape = make_shape([[1, 0], [1, 0], [1, 1]])
    catalog = PieceCatalog(
        [PieceTemplate(l_shape, PieceColor.INDIGO)], rng=ScriptedRandom(1), allow_mirror=True
    )
    piece = catalog.generate()
    assert np.array_equal(piece.shape, rotate_cw(mirror(l_shape), 1))
    assert piece.shape.astype(int).tolist() == [[1, 0, 0], [1, 1, 1]]
    assert not np.array_equal(piece.shape, mirror(rotate_cw(l_shape, 1)))


def test_mirroring_deals_all_eight_l_orientations() -> None:
    l_shape = make_shape([[1, 0], [1, 0], [1, 1]])
    catalog = PieceCatalog(
        [PieceTemplate(l_shape, PieceColor.INDIGO)], rng=random.Random(11), allow_mirror=True
    )
    seen = {p.shape.tobytes() + bytes(p.shape.shape) for p in catalog.generate_batch(200)}
    assert len(seen) == 8
