"""Unit tests for the revenue allocator (pure functions)."""

import math

import pandas as pd
import pytest

from data_prep.observations import Observation
from engine.allocator import allocate_revenue, latest_price, project_revenue
from engine.base import Entity


def _prices(*prices):
    return tuple(
        Observation(date=pd.Timestamp("2024-01-01") + pd.Timedelta(weeks=i), price=p)
        for i, p in enumerate(prices)
    )


class TestLatestPrice:
    """Tests for latest_price."""

    def test_empty(self):
        assert latest_price(()) is None

    def test_takes_last_by_position_not_by_date(self):
        obs = (
            Observation(date=pd.Timestamp("2024-12-31"), price=9.0),
            Observation(date=pd.Timestamp("2024-01-01"), price=1.0),
        )
        assert latest_price(obs) == 1.0


class TestAllocateRevenue:
    """Tests for allocate_revenue."""

    def test_worked_example(self, two_entities):
        """Price 2.50, 1000 credits/month, 1 year, 30/70 split -> 9000 / 21000."""
        results = allocate_revenue(_prices(1.0, 2.5), two_entities, 1000, 1)

        assert [r.entity_name for r in results] == ["A", "B"]
        assert results[0].revenue == pytest.approx(9000.0)
        assert results[1].revenue == pytest.approx(21000.0)

    def test_no_observations_gives_empty(self, two_entities):
        assert allocate_revenue((), two_entities, 1000, 5) == []

    def test_one_result_per_entity_in_order(self):
        entities = [Entity(name=n, percentage=p) for n, p in [("z", 10), ("a", 50), ("z", 40)]]
        results = allocate_revenue(_prices(3.0), entities, 10, 10)

        assert len(results) == 3
        assert [r.entity_name for r in results] == ["z", "a", "z"]

    def test_no_entities(self):
        assert allocate_revenue(_prices(3.0), [], 10, 1) == []

    def test_idempotent(self, observations, two_entities):
        first = allocate_revenue(observations, two_entities, 1234.5, 5)
        second = allocate_revenue(observations, two_entities, 1234.5, 5)
        assert first == second

    def test_linear_in_credits(self, observations, two_entities):
        base = allocate_revenue(observations, two_entities, 500, 1)
        doubled = allocate_revenue(observations, two_entities, 1000, 1)

        for b, d in zip(base, doubled):
            assert d.revenue == pytest.approx(2 * b.revenue)

    def test_linear_in_years(self, observations, two_entities):
        base = allocate_revenue(observations, two_entities, 500, 5)
        doubled = allocate_revenue(observations, two_entities, 500, 10)

        for b, d in zip(base, doubled):
            assert d.revenue == pytest.approx(2 * b.revenue)

    def test_negative_inputs_propagate(self):
        entities = [Entity(name="neg", percentage=-10.0)]
        results = allocate_revenue(_prices(2.0), entities, 100, 1)
        assert results[0].revenue == pytest.approx(-240.0)

    def test_nan_price_propagates(self, two_entities):
        results = allocate_revenue(_prices(float("nan")), two_entities, 100, 1)
        assert all(math.isnan(r.revenue) for r in results)

    def test_over_allocation_is_not_blocked(self):
        entities = [Entity(name="A", percentage=80.0), Entity(name="B", percentage=80.0)]
        results = allocate_revenue(_prices(1.0), entities, 100, 1)
        assert sum(r.revenue for r in results) == pytest.approx(1920.0)


class TestProjectRevenue:
    """Tests for project_revenue."""

    def test_breakdown(self, two_entities):
        p = project_revenue(_prices(2.5), two_entities, 1000, 1)

        assert p.latest_price == 2.5
        assert p.monthly_revenue == pytest.approx(2500.0)
        assert p.annual_revenue == pytest.approx(30000.0)
        assert p.total_revenue == pytest.approx(30000.0)
        assert p.allocated_total == pytest.approx(30000.0)
        assert p.unallocated == pytest.approx(0.0)

    def test_unallocated_remainder(self):
        p = project_revenue(_prices(1.0), [Entity(name="A", percentage=25.0)], 100, 5)

        assert p.total_revenue == pytest.approx(6000.0)
        assert p.unallocated == pytest.approx(4500.0)

    def test_none_without_data(self, two_entities):
        assert project_revenue((), two_entities, 1000, 1) is None

    def test_to_dataframe(self, two_entities):
        df = project_revenue(_prices(2.5), two_entities, 1000, 1).to_dataframe()

        assert list(df.columns) == ["Entity", "Revenue"]
        assert df["Entity"].tolist() == ["A", "B"]
