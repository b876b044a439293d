import numpy as np
import pytest

from empstats.containers import ArraySearchBounds, Extrema, Extremum, FunctionTable


class TestFunctionTable:
    """Immutable sampled function"""

    def test_copies_input(self):
        x = np.array([0.0, 1.0, 2.0])
        y = np.array([1.0, 2.0, 3.0])
        table = FunctionTable(x, y)
        x[0] = 99.0
        y[:] = 0.0
        assert table.x[0] == 0.0
        assert table.y.tolist() == [1.0, 2.0, 3.0]

    def test_read_only(self):
        table = FunctionTable([0.0, 1.0], [1.0, 2.0])
        with pytest.raises(ValueError):
            table.x[0] = 5.0
        with pytest.raises(AttributeError):
            table.y = np.zeros(2)  # type: ignore[misc]

    def test_length_mismatch(self):
        with pytest.raises(ValueError, match="same length"):
            FunctionTable([0.0, 1.0], [1.0])

    def test_len_iter_eq(self):
        table = FunctionTable([0.0, 1.0], [2.0, 3.0])
        assert len(table) == 2
        assert list(table) == [(0.0, 2.0), (1.0, 3.0)]
        assert table == FunctionTable((0.0, 1.0), (2.0, 3.0))
        assert table != FunctionTable([0.0, 1.0], [2.0, 4.0])

    def test_empty(self):
        table = FunctionTable()
        assert len(table) == 0
        assert table.interpolate(1.0) == 0.0

    def test_interpolate(self):
        table = FunctionTable([0.0, 1.0, 2.0], [0.0, 10.0, 0.0])
        assert table.interpolate(0.5) == pytest.approx(5.0)
        assert table.interpolate(1.5) == pytest.approx(5.0)
        assert table.interpolate(-1.0) == 0.0
        assert table.interpolate(3.0) == 0.0


class TestExtrema:
    """Extrema collection"""

    def test_add_and_get(self):
        e = Extrema()
        e.add_local_minimum(2, -1.0)
        e.add_local_maximum(5, 4.0)
        e.add_local_maximum(9, 3.0)
        assert e.nr_of_local_minima == 1
        assert e.nr_of_local_maxima == 2
        assert e.get_local_minimum(0) == Extremum(2, -1.0)
        assert e.get_local_maximum(1).index == 9

    def test_reset(self):
        e = Extrema()
        e.add_local_minimum(1, 0.0)
        e.reset()
        assert e.nr_of_local_minima == 0
        assert e.nr_of_local_maxima == 0


class TestArraySearchBounds:
    def test_degenerate(self):
        assert ArraySearchBounds(3, 3).is_degenerate
        assert not ArraySearchBounds(3, 4).is_degenerate

    def test_frozen(self):
        b = ArraySearchBounds(0, 1)
        with pytest.raises(AttributeError):
            b.lower = 2  # type: ignore[misc]
