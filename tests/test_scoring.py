"""
Tests for deal assessment, scenario tools and presets.
"""

import pytest
from dataclasses import replace

from investcalc.calculations.engine import evaluate
from investcalc.calculations.breakeven import BreakEven, breakeven_table
from investcalc.calculations.scoring import (
    GREEN,
    RED,
    YELLOW,
    decision_summary,
    interest_headroom,
    rent_gap,
    round_half_up,
    traffic_light,
)
from investcalc.calculations.scenarios import (
    apply_sensitivity,
    cashflow_waterfall,
    compare_rows,
)
from investcalc.calculations.presets import DEFAULT_INPUTS, PRESETS, get_preset


class TestTrafficLight:
    """Test traffic-light rating."""

    def test_red_when_all_metrics_fail(self, base_inputs):
        """Test that the default scenario fails all three checks."""
        light = traffic_light(evaluate(base_inputs))
        assert light.tone == RED
        assert light.label == "Red"
        assert light.reasons == ["Cashflow negative", "DSCR < 1.10", "Cash-on-Cash < 6%"]

    def test_yellow_when_one_metric_fails(self, base_inputs):
        """Test that a debt-free purchase with low yield is yellow."""
        light = traffic_light(evaluate(replace(base_inputs, equity=352000)))
        assert light.tone == YELLOW
        assert light.reasons == ["Cash-on-Cash < 6%"]

    def test_green_when_all_metrics_pass(self, base_inputs):
        """Test green rating with no reasons."""
        inputs = replace(base_inputs, equity=352000, cold_rent_monthly=2000)
        light = traffic_light(evaluate(inputs))
        assert light.tone == GREEN
        assert light.reasons == []

    def test_dscr_sentinel_passes_threshold(self, base_inputs):
        """Test that the no-debt DSCR sentinel never counts as a weak DSCR."""
        light = traffic_light(evaluate(replace(base_inputs, equity=352000)))
        assert "DSCR < 1.10" not in light.reasons


class TestDecisionSummary:
    """Test decision summary lines."""

    def test_green_summary(self, base_inputs):
        """Test the single line for a green rating."""
        inputs = replace(base_inputs, equity=352000, cold_rent_monthly=2000)
        light = traffic_light(evaluate(inputs))
        lines = decision_summary(light, inputs, breakeven_table(inputs))
        assert len(lines) == 1
        assert lines[0].startswith("Looks solid")

    def test_red_summary_mentions_rent_and_interest(self, base_inputs):
        """Test that rent and interest hints are given for the default scenario."""
        light = traffic_light(evaluate(base_inputs))
        lines = decision_summary(light, base_inputs, breakeven_table(base_inputs))
        assert len(lines) == 2
        assert "about 1595 per month (+495)" in lines[0]
        assert "<= 1.50%" in lines[1]
        assert "(-2.30%)" in lines[1]

    def test_fallback_line(self, base_inputs):
        """Test the fallback when no break-even hint applies."""
        light = traffic_light(evaluate(base_inputs))
        empty = BreakEven(None, None, None, None, None)
        lines = decision_summary(light, base_inputs, empty)
        assert lines == [
            "Adjust interest, rent or vacancy: at least one metric is currently critical."
        ]


class TestGaps:
    """Test break-even gap and headroom tones."""

    def test_rent_gap_tones(self):
        """Test rent gap thresholds."""
        assert rent_gap(1000, 1100).tone == GREEN
        assert rent_gap(1000, 1100).diff == -100
        assert rent_gap(1250, 1100).tone == YELLOW
        assert rent_gap(1251, 1100).tone == RED
        assert rent_gap(None, 1100) is None

    def test_rent_gap_rounds(self):
        """Test that gaps are computed on rounded values."""
        gap = rent_gap(1595.49, 1100)
        assert gap.value == 1595
        assert gap.diff == 495

    def test_rent_gap_rounds_halves_up(self):
        """Test that half units round up, so a 0.5 shortfall is a 1 unit gap."""
        gap = rent_gap(1100.5, 1100)
        assert gap.value == 1101
        assert gap.diff == 1
        assert gap.tone == YELLOW

        assert rent_gap(1249.5, 1100).diff == 150
        assert rent_gap(1250.5, 1100).tone == RED

    def test_round_half_up(self):
        """Test half-up rounding against Python's half-to-even round()."""
        assert round(0.5) == 0
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(2.49) == 2
        assert round_half_up(-0.5) == 0

    def test_interest_headroom_full_point(self):
        """Test that exactly one point of headroom is green despite float error."""
        assert 4.8 - 3.8 < 1
        gap = interest_headroom(4.8, 3.8)
        assert gap.diff == 1.0
        assert gap.tone == GREEN

    def test_interest_headroom_tones(self):
        """Test interest headroom thresholds."""
        assert interest_headroom(5.0, 3.8).tone == GREEN
        assert interest_headroom(4.2, 3.8).tone == YELLOW
        assert interest_headroom(4.2, 3.8).diff == pytest.approx(0.4)
        assert interest_headroom(1.4969, 3.8).tone == RED
        assert interest_headroom(1.4969, 3.8).value == 1.5
        assert interest_headroom(None, 3.8) is None


class TestSensitivity:
    """Test sensitivity simulation."""

    def test_apply_deltas(self, base_inputs):
        """Test interest shift and rent scaling."""
        sim = apply_sensitivity(base_inputs, interest_delta_pct=1.0, rent_delta_pct=10)
        assert sim.interest_rate_pct == pytest.approx(4.8)
        assert sim.cold_rent_monthly == pytest.approx(1210)
        # Base inputs untouched
        assert base_inputs.interest_rate_pct == 3.8

    def test_deltas_clamped(self, base_inputs):
        """Test that deltas are clamped to the slider ranges."""
        sim = apply_sensitivity(base_inputs, interest_delta_pct=5, rent_delta_pct=-100)
        assert sim.interest_rate_pct == pytest.approx(5.8)
        assert sim.cold_rent_monthly == pytest.approx(880)

    def test_no_deltas(self, base_inputs):
        """Test that zero deltas reproduce the inputs."""
        assert apply_sensitivity(base_inputs) == base_inputs


class TestWaterfall:
    """Test cashflow waterfall and comparison rows."""

    def test_waterfall_keeps_negatives(self, base_inputs):
        """Test that costs and financing are negative steps."""
        steps = cashflow_waterfall(base_inputs, evaluate(base_inputs))
        assert [s["name"] for s in steps] == [
            "effective_rent",
            "costs",
            "financing",
            "cashflow",
        ]
        values = [s["value"] for s in steps]
        assert values[0] == pytest.approx(1056)
        assert values[1] == pytest.approx(-120)
        assert values[2] == pytest.approx(-1411.67, abs=0.01)
        assert values[3] == pytest.approx(sum(values[:3]))

    def test_compare_rows(self, base_inputs):
        """Test A/B rows."""
        inputs_b = replace(base_inputs, equity=352000)
        rows = compare_rows(
            base_inputs, evaluate(base_inputs), inputs_b, evaluate(inputs_b)
        )
        assert len(rows) == 4
        financing = rows[2]
        assert financing["name"] == "financing"
        assert financing["a"] < 0
        assert financing["b"] == 0


class TestPresets:
    """Test presets."""

    def test_default_inputs(self):
        """Test default values."""
        assert DEFAULT_INPUTS.purchase_price == 320000
        assert DEFAULT_INPUTS.cold_rent_monthly == 1100

    def test_preset_ids_unique(self):
        """Test that preset ids are unique."""
        ids = [p.id for p in PRESETS]
        assert len(ids) == len(set(ids)) == 3

    def test_get_preset(self):
        """Test preset lookup."""
        preset = get_preset("mfh-semi-pro")
        assert preset.inputs.purchase_price == 950000
        assert preset.inputs.reserves_monthly == 220

    def test_get_unknown_preset(self):
        """Test unknown preset id."""
        with pytest.raises(KeyError):
            get_preset("does-not-exist")

    def test_presets_evaluate(self):
        """Test that every preset evaluates to finite metrics."""
        for preset in PRESETS:
            r = evaluate(preset.inputs)
            assert r.loan > 0
            assert r.debt_service > 0
