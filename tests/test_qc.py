"""
Unit tests for qc.py: assertion helpers and the QC report runner.

Run from the project root:
    pytest tests/test_qc.py -v
"""

from types import MappingProxyType

import pandas as pd
import pytest

from ufc_report import config, qc


class TestCheckPercentagesSum:

    def test_overall(self):
        df = pd.DataFrame({"pct": [60.0, 40.0]})
        assert qc.check_percentages_sum(df).startswith("✓")

    def test_overall_fails(self):
        with pytest.raises(AssertionError):
            qc.check_percentages_sum(pd.DataFrame({"pct": [60.0, 30.0]}))

    def test_grouped(self):
        df = pd.DataFrame({"g": ["a", "a", "b"], "pct": [50.0, 50.0, 100.0]})
        assert "2 g groups" in qc.check_percentages_sum(df, group_col="g")

    def test_grouped_names_bad_group(self):
        df = pd.DataFrame({"g": ["a", "b"], "pct": [100.0, 90.0]})
        with pytest.raises(AssertionError, match="b"):
            qc.check_percentages_sum(df, group_col="g")

    def test_empty_table_warns(self):
        assert qc.check_percentages_sum(pd.DataFrame({"pct": []})).startswith("⚠️")


class TestOtherChecks:

    def test_weight_classes_ordered(self):
        df = pd.DataFrame({"weight_class": ["Flyweight", "Flyweight", "Heavyweight"]})
        assert qc.check_weight_classes(df).startswith("✓")

    def test_weight_classes_out_of_order(self):
        df = pd.DataFrame({"weight_class": ["Heavyweight", "Flyweight"]})
        with pytest.raises(AssertionError, match="ordered"):
            qc.check_weight_classes(df)

    def test_weight_classes_unknown(self):
        with pytest.raises(AssertionError, match="Catch Weight"):
            qc.check_weight_classes(pd.DataFrame({"weight_class": ["Catch Weight"]}))

    def test_round_range(self):
        assert qc.check_round_range(pd.DataFrame({"round_number": [1, 5]})).startswith("✓")
        with pytest.raises(AssertionError):
            qc.check_round_range(pd.DataFrame({"round_number": [0, 6]}))

    def test_no_unknown_country(self):
        with pytest.raises(AssertionError):
            qc.check_no_unknown_country(pd.DataFrame({"country": [config.UNKNOWN_NATIONALITY]}))

    def test_default_alias_table_is_idempotent(self):
        assert qc.check_alias_idempotence().startswith("✓")

    def test_alias_chain_detected(self):
        aliases = MappingProxyType({"USA": "United States", "United States": "United States of America"})
        with pytest.raises(AssertionError, match="United States"):
            qc.check_alias_idempotence(aliases)

    def test_radar_axes_missing(self):
        with pytest.raises(AssertionError, match="volume"):
            qc.check_radar_axes(pd.DataFrame({axis: [1.0] for axis in config.RADAR_AXES[:-1]}))


class TestReport:

    def test_run_checks_collects_failures(self):
        checks = [
            ("ok", qc.check_percentages_sum, {"df": pd.DataFrame({"pct": [100.0]})}),
            ("bad", qc.check_percentages_sum, {"df": pd.DataFrame({"pct": [10.0]})}),
        ]
        results = qc.run_checks(checks)
        assert [passed for _, passed, _ in results] == [True, False]

    def test_print_qc_report_counts_failures(self, capsys):
        checks = [("bad", qc.check_percentages_sum, {"df": pd.DataFrame({"pct": [10.0]})})]
        assert qc.print_qc_report(checks) == 1
        assert "QUALITY CONTROL REPORT" in capsys.readouterr().out
