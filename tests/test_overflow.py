"""Tests for overflow redistribution."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from models.compartment import COMPARTMENT_ORDER
from engine.base_allocator import allocate_base, split_pieces
from engine.overflow import redistribute_overflow
from engine.weights import compute_weights

CP1, CP2, CP3, CP4, CP5 = COMPARTMENT_ORDER


class TestSingleMove:
    def test_one_unit_over_moves_one_piece_to_cp5(self):
        # CP4 base weight 300 kg against a 290 kg limit: one 10 kg piece too many
        result = allocate_base(1000, 100, 0, capacities={CP4: 290})

        assert result.piece_alloc[CP4] == 29
        assert result.piece_alloc[CP5] == 1
        assert result.weights[CP4] == 290
        assert not result.exceeds[CP4]
        assert len(result.overflow_moves) == 1
        move = result.overflow_moves[0]
        assert (move.source, move.destination, move.pieces) == (CP4, CP5, 1)
        assert move.weight_kg == 10


class TestDefaultCapacities:
    def test_heavy_shipment_spills_to_cp5_then_cp1(self):
        # 120 kg per piece: CP2 3600, CP3 4800, CP4 3600 all over limit
        result = allocate_base(12000, 100, 0)
        alloc = result.piece_alloc

        assert alloc[CP1] == 18
        assert alloc[CP2] == 28
        assert alloc[CP3] == 29
        assert alloc[CP4] == 19
        assert alloc[CP5] == 6
        assert sum(alloc.values()) == 100

        moves = [(m.source, m.destination, m.pieces) for m in result.overflow_moves]
        assert moves == [
            (CP2, CP5, 2),
            (CP3, CP5, 4),
            (CP3, CP1, 7),
            (CP4, CP1, 11),
        ]

    def test_residual_overflow_only_when_destinations_full(self):
        result = allocate_base(12000, 100, 0)

        assert result.exceeds[CP4]
        assert result.weights[CP4] == 2280
        # Neither destination can take another 120 kg piece
        assert 800 - result.weights[CP5] < result.per_piece_kg
        assert 2202 - result.weights[CP1] < result.per_piece_kg
        assert not result.exceeds[CP1]
        assert not result.exceeds[CP2]
        assert not result.exceeds[CP3]
        assert not result.exceeds[CP5]


class TestPriority:
    def test_earlier_source_claims_cp5_first(self):
        caps = {CP2: 280, CP3: 390, CP5: 20}
        result = allocate_base(1000, 100, 0, capacities=caps)

        assert result.piece_alloc[CP2] == 28
        assert result.piece_alloc[CP5] == 2
        assert result.piece_alloc[CP3] == 39
        assert result.piece_alloc[CP1] == 1
        moves = [(m.source, m.destination, m.pieces) for m in result.overflow_moves]
        assert moves == [(CP2, CP5, 2), (CP3, CP1, 1)]


class TestTermination:
    def test_no_destination_room_leaves_overflow(self):
        caps = {CP1: 0, CP5: 0, CP2: 100}
        result = allocate_base(1000, 100, 0, capacities=caps)

        assert result.overflow_moves == []
        assert result.piece_alloc[CP2] == 30
        assert result.exceeds[CP2]

    def test_avi_fills_cp5(self):
        # AVI alone exceeds CP5, so everything spills to CP1
        result = allocate_base(1900, 100, 900, capacities={CP4: 290})

        assert result.piece_alloc[CP5] == 0
        assert result.piece_alloc[CP1] == 1
        assert result.exceeds[CP5]

    def test_zero_per_piece_is_noop(self):
        alloc, _ = split_pieces(10)
        weights = compute_weights(alloc, 0.0, 0.0)
        new_alloc, new_weights, moves = redistribute_overflow(alloc, weights, 0.0, 0.0, {CP2: 0})

        assert new_alloc == alloc
        assert moves == []


class TestInvariants:
    def test_piece_count_preserved(self):
        for total in [0, 500, 5000, 12000, 20000, 50000]:
            for pcs in [0, 1, 3, 17, 100, 250]:
                result = allocate_base(total, pcs, 0)
                assert sum(result.piece_alloc.values()) == pcs
                assert all(p >= 0 for p in result.piece_alloc.values())

    def test_input_not_mutated(self):
        alloc, _ = split_pieces(100)
        snapshot = dict(alloc)
        weights = compute_weights(alloc, 120.0, 0.0)
        redistribute_overflow(alloc, weights, 120.0, 0.0)
        assert alloc == snapshot

    def test_sources_within_limit_when_room_exists(self):
        caps = {CP1: 100000, CP5: 100000}
        result = allocate_base(20000, 100, 0, capacities=caps)
        for cp in (CP2, CP3, CP4):
            assert not result.exceeds[cp]


if __name__ == "__main__":
    import pytest
    pytest.main([__file__, "-v"])
