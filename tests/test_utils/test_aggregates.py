"""
Tests for aggregation functions
"""

import pytest

from linqstream.errors import DivisionByZeroError, EmptySequenceError
from linqstream.utils.aggregates import (
    AvgAggregator,
    CountAggregator,
    FoldAggregator,
    MaxAggregator,
    MinAggregator,
    SumAggregator,
    create_aggregator,
)


class TestFoldAggregator:
    """Test FOLD aggregator"""

    def test_fold_with_seed(self):
        agg = FoldAggregator(lambda acc, v: acc * v, 1)

        for value in range(1, 6):
            agg.update(value)

        assert agg.result() == 120

    def test_fold_without_seed_starts_with_first_value(self):
        agg = FoldAggregator(lambda acc, v: acc + v)
        agg.update([1])
        agg.update([2])

        assert agg.result() == [1, 2]

    def test_fold_seed_none_is_a_seed(self):
        """Test that None is a real seed, not a missing one"""
        agg = FoldAggregator(lambda acc, v: (acc, v), None)
        agg.update(1)

        assert agg.result() == (None, 1)

    def test_fold_empty_without_seed(self):
        with pytest.raises(EmptySequenceError):
            FoldAggregator(lambda acc, v: acc).result()


class TestCountAggregator:
    """Test COUNT aggregator"""

    def test_count_includes_none(self):
        agg = CountAggregator()

        agg.update(5)
        agg.update(None)
        agg.update(10)

        assert agg.result() == 3

    def test_count_empty(self):
        assert CountAggregator().result() == 0


class TestSumAggregator:
    """Test SUM aggregator"""

    def test_sum_integers(self):
        agg = SumAggregator()
        agg.update(10)
        agg.update(20)
        agg.update(30)
        assert agg.result() == 60

    def test_sum_floats(self):
        agg = SumAggregator()
        agg.update(1.5)
        agg.update(2.5)
        assert agg.result() == 4.0

    def test_sum_empty(self):
        assert SumAggregator().result() == 0

    def test_sum_type_mismatch_propagates(self):
        agg = SumAggregator()
        with pytest.raises(TypeError):
            agg.update("abc")


class TestAvgAggregator:
    """Test AVG aggregator"""

    def test_avg(self):
        agg = AvgAggregator()
        agg.update(10)
        agg.update(20)
        agg.update(30)
        assert agg.result() == 20.0

    def test_avg_empty(self):
        with pytest.raises(DivisionByZeroError):
            AvgAggregator().result()


class TestMinMaxAggregator:
    """Test MIN and MAX aggregators"""

    def test_min(self):
        agg = MinAggregator()
        for value in [30, 10, 20]:
            agg.update(value)
        assert agg.result() == 10

    def test_max(self):
        agg = MaxAggregator()
        for value in ["b", "c", "a"]:
            agg.update(value)
        assert agg.result() == "c"

    def test_min_keeps_first_of_equals(self):
        agg = MinAggregator()
        agg.update(1.0)
        agg.update(1)
        assert type(agg.result()) is float

    def test_empty(self):
        with pytest.raises(EmptySequenceError):
            MinAggregator().result()
        with pytest.raises(EmptySequenceError):
            MaxAggregator().result()


class TestCreateAggregator:
    """Test aggregator factory"""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("COUNT", CountAggregator),
            ("sum", SumAggregator),
            ("Avg", AvgAggregator),
            ("MIN", MinAggregator),
            ("max", MaxAggregator),
        ],
    )
    def test_create(self, name, expected):
        assert isinstance(create_aggregator(name), expected)

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown aggregate function"):
            create_aggregator("MEDIAN")
