"""Tests for nichefinder_intel/intelligence/kpis.py."""

from __future__ import annotations

import pytest

from nichefinder_intel.intelligence.kpis import compute_kpis
from nichefinder_intel.models.intelligence import CommandCenterKPIs


class TestComputeKpis:
    def test_empty_collection(self):
        kpis = compute_kpis([])
        assert kpis == CommandCenterKPIs()
        assert kpis.total_opportunities == 0
        assert kpis.avg_demand_score == 0.0
        assert kpis.trending_count == 0
        assert kpis.highest is None
        assert kpis.highest_name == "N/A"

    @pytest.mark.parametrize("n", [1, 3, 12])
    def test_identical_records(self, make_opportunity, n):
        opps = [
            make_opportunity(f"Same {i}", demand=80.0, trend=75.0, score=70.0)
            for i in range(n)
        ]
        kpis = compute_kpis(opps)
        assert kpis.total_opportunities == n
        assert kpis.avg_demand_score == pytest.approx(80.0)
        assert kpis.trending_count == n
        assert kpis.highest is opps[0]

    def test_mixed_collection(self, make_opportunity):
        opps = [
            make_opportunity("A", demand=90.0, trend=70.0, score=60.0),
            make_opportunity("B", demand=30.0, trend=69.9, score=88.0),
            make_opportunity("C", demand=60.0, trend=10.0, score=40.0),
        ]
        kpis = compute_kpis(opps)
        assert kpis.total_opportunities == 3
        assert kpis.avg_demand_score == pytest.approx(60.0)
        assert kpis.trending_count == 1
        assert kpis.highest_name == "B"

    def test_tie_keeps_first_seen(self, make_opportunity):
        opps = [
            make_opportunity("First", score=75.0),
            make_opportunity("Second", score=75.0),
        ]
        assert compute_kpis(opps).highest.name == "First"

    def test_highest_ranks_by_display_score_not_composite(self, make_opportunity):
        opps = [
            make_opportunity("Composite Heavy", composite=95.0, score=50.0),
            make_opportunity("Score Heavy", composite=40.0, score=80.0),
        ]
        assert compute_kpis(opps).highest.name == "Score Heavy"
