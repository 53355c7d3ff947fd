"""Tests for nichefinder_intel/intelligence/brief.py."""

from __future__ import annotations

from datetime import datetime, timezone

from nichefinder_intel.intelligence.brief import build_brief, build_command_center
from nichefinder_intel.taxonomy.signal_taxonomy import DemandLevel, SummaryMode

FIXED_NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


class TestBuildCommandCenter:
    def test_empty(self):
        view = build_command_center([])
        assert view.kpis.total_opportunities == 0
        assert view.insights == []
        assert view.top_cards == []

    def test_top_cards_limit(self, make_opportunity):
        opps = [make_opportunity(f"Opp {i}") for i in range(12)]
        view = build_command_center(opps)
        assert len(view.top_cards) == 9
        assert view.top_cards[0].name == "Opp 0"
        assert view.kpis.total_opportunities == 12

    def test_custom_top_cards(self, make_opportunity):
        opps = [make_opportunity(f"Opp {i}") for i in range(5)]
        assert len(build_command_center(opps, top_cards=2).top_cards) == 2

    def test_feed_comes_from_leading_records(self, sample_opportunity, make_opportunity):
        view = build_command_center([sample_opportunity, make_opportunity("Plain")])
        assert [i.opportunity_id for i in view.insights] == [sample_opportunity.id]


class TestBuildBrief:
    def test_catalog_brief(self, sample_opportunity, sample_descriptions):
        feed = build_command_center([sample_opportunity]).insights
        brief = build_brief(sample_opportunity, feed=feed, descriptions=sample_descriptions)

        assert brief.summary == "Bridges Zigbee devices over MQTT."
        assert brief.signals.demand is DemandLevel.HIGH
        assert brief.reasons[0] == "Strong demand signal (82.0/100)"
        assert len(brief.questions) == 6
        assert len(brief.actions) == 3
        assert [i.id for i in brief.insights] == [f"insight-{sample_opportunity.id}-hot"]
        assert brief.insight_groups["demand"] == brief.insights

    def test_signals_mode(self, sample_opportunity):
        brief = build_brief(sample_opportunity, summary_mode=SummaryMode.SIGNALS, now=FIXED_NOW)
        assert brief.summary.startswith("Zigbee to MQTT bridge. Active recently.")

    def test_without_feed_has_no_insights(self, sample_opportunity):
        brief = build_brief(sample_opportunity)
        assert brief.insights == []
        assert set(brief.insight_groups) == {"demand", "momentum", "risk", "other"}

    def test_rebuilding_is_identical(self, sample_opportunity, sample_descriptions):
        first = build_brief(sample_opportunity, descriptions=sample_descriptions)
        second = build_brief(sample_opportunity, descriptions=sample_descriptions)
        assert first == second
