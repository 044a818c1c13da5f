"""Tests for coverage Value Objects (construction-time validation)."""

from __future__ import annotations

import numpy as np
import pytest

from domain.coverage.value_objects import (
    ActiveWindow,
    Block,
    CoverageSnapshot,
    Run,
    WindowParameters,
)


def make_snapshot(mapping: dict[int, int], cap: int = 3, window_size: int = 10):
    return CoverageSnapshot(
        cap=cap,
        window_size=window_size,
        runs=tuple(Run(start=k, count=v) for k, v in mapping.items()),
    )


class TestWindowParameters:
    def test_valid(self):
        params = WindowParameters(cap=3, window_size=10)
        assert params.cap == 3
        assert params.window_size == 10

    def test_from_mapping(self):
        params = WindowParameters.model_validate({"cap": 2, "window_size": 4})
        assert params == WindowParameters(cap=2, window_size=4)

    @pytest.mark.parametrize("cap", [0, -3])
    def test_cap_must_be_positive(self, cap):
        with pytest.raises(ValueError):
            WindowParameters(cap=cap, window_size=10)

    def test_float_rejected(self):
        with pytest.raises(ValueError):
            WindowParameters(cap=3.0, window_size=10)  # type: ignore[arg-type]

    def test_frozen(self):
        params = WindowParameters(cap=3, window_size=10)
        with pytest.raises(Exception):  # ValidationError or TypeError
            params.cap = 4  # type: ignore[misc]


class TestActiveWindow:
    def test_inverted_span_rejected(self):
        with pytest.raises(ValueError, match="Invalid window"):
            ActiveWindow(lo=5, hi=4)

    def test_single_position_window(self):
        window = ActiveWindow(lo=7, hi=7)
        assert len(window) == 1
        assert 7 in window
        assert window.as_tuple() == (7, 7)

    def test_non_int_not_contained(self):
        assert "3" not in ActiveWindow(lo=0, hi=9)


class TestCoverageSnapshot:
    def test_runs_must_be_ordered(self):
        with pytest.raises(ValueError, match="Runs must be strictly ordered"):
            make_snapshot({5: 1, 2: 0})

    def test_duplicate_starts_rejected(self):
        with pytest.raises(ValueError, match="Runs must be strictly ordered"):
            CoverageSnapshot(
                cap=3,
                window_size=10,
                runs=(Run(start=1, count=1), Run(start=1, count=0)),
            )

    def test_active_window(self):
        snapshot = make_snapshot({4: 1, 6: 0}, window_size=5)
        assert snapshot.active_window == ActiveWindow(lo=4, hi=8)

    def test_as_dict(self):
        assert make_snapshot({0: 2, 3: 1, 6: 0}).as_dict() == {0: 2, 3: 1, 6: 0}

    def test_counts_dense_expansion(self):
        snapshot = make_snapshot({2: 1, 5: 2, 8: 0})

        counts = snapshot.counts(0, 10)

        assert counts.dtype == np.int64
        np.testing.assert_array_equal(counts, [3, 3, 1, 1, 1, 2, 2, 2, 0, 0])

    def test_counts_past_last_run(self):
        counts = make_snapshot({0: 1, 2: 0}).counts(1, 5)
        np.testing.assert_array_equal(counts, [1, 0, 0, 0])

    def test_counts_empty_range(self):
        assert make_snapshot({0: 0}).counts(4, 4).shape == (0,)

    def test_counts_inverted_range(self):
        with pytest.raises(ValueError, match="Invalid range"):
            make_snapshot({0: 0}).counts(5, 3)

    def test_value_equality(self):
        assert make_snapshot({0: 1, 3: 0}) == make_snapshot({0: 1, 3: 0})
        assert make_snapshot({0: 1, 3: 0}) != make_snapshot({0: 1, 4: 0})


class TestBlock:
    def test_content_is_opaque(self):
        assert Block(content=b"\x00\x01").content == b"\x00\x01"
        assert Block().content is None
