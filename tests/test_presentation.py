"""
Tests for plots.py, captions.py and report.py: figures, prose and the end-to-end run.

Run from the project root:
    pytest tests/test_presentation.py -v
"""

import pandas as pd
import pytest

from ufc_report import captions, plots
from ufc_report.report import build_summaries, run_report


@pytest.fixture
def summaries(raw_fighters, raw_fights, raw_strikes):
    return build_summaries(raw_fighters, raw_fights, raw_strikes, fighter="Max Holloway", verbose=False)


# ---------------------------------------------------------------------------
# Plots
# ---------------------------------------------------------------------------

class TestPlots:

    def test_choropleth(self, summaries, world, tmp_path):
        path, log = plots.plot_country_choropleth(summaries["countries"], world, tmp_path / "map.png")
        assert path.exists()
        assert any("3 countries shaded" in line for line in log)

    def test_choropleth_reports_unmatched(self, world, tmp_path):
        summary = pd.DataFrame({"country": ["Atlantis"], "n_fighters": [1], "pct": [100.0]})
        _, log = plots.plot_country_choropleth(summary, world, tmp_path / "map.png")
        assert any("Atlantis" in line for line in log)

    @pytest.mark.parametrize("func,key", [
        (plots.plot_weight_class_finishes, "weight_classes"),
        (plots.plot_finish_trend, "trend"),
        (plots.plot_fight_duration, "durations"),
        (plots.plot_round_strikes, "rounds"),
        (plots.plot_striking_radar, "rounds"),
    ])
    def test_figures_written(self, summaries, tmp_path, func, key):
        path = func(summaries[key], tmp_path / f"{key}.png")
        assert path.exists()
        assert path.stat().st_size > 0


# ---------------------------------------------------------------------------
# Captions
# ---------------------------------------------------------------------------

class TestCaptions:

    def test_country_caption_names_leader(self, summaries):
        text = captions.country_caption(summaries["countries"])
        assert "United States of America (50.0%)" in text
        assert "3 countries" in text

    def test_weight_class_caption(self, summaries):
        text = captions.weight_class_caption(summaries["weight_classes"])
        assert "Knockouts are most common" in text

    def test_trend_caption_covers_span(self, summaries):
        assert "Between 2010 and 2022" in captions.trend_caption(summaries["trend"])

    def test_duration_caption_compares_title_bouts(self, summaries):
        assert "title bouts" in captions.duration_caption(summaries["durations"])

    def test_striking_caption_names_fighter(self, summaries):
        text = captions.striking_caption(summaries["rounds"], "Max Holloway")
        assert text.startswith("Max Holloway")
        assert "round 3" in text

    def test_empty_tables(self):
        empty = pd.DataFrame(columns=["country", "n_fighters", "pct"])
        assert "No fighters" in captions.country_caption(empty)


# ---------------------------------------------------------------------------
# End-to-end
# ---------------------------------------------------------------------------

class TestRunReport:

    def test_full_run(self, input_files, tmp_path):
        result = run_report(input_files=input_files, figures_dir=tmp_path / "figures",
                            report_path=tmp_path / "report.md", fighter="Max Holloway", verbose=False)
        assert result["qc_failures"] == 0
        assert all(path.exists() for path in result["figures"].values())
        text = result["report"].read_text(encoding="utf-8")
        assert "](figures/fig_striking_radar.png)" in text
        assert "Max Holloway" in text

    def test_rerun_is_deterministic(self, input_files, tmp_path):
        kwargs = dict(input_files=input_files, figures_dir=tmp_path / "figures",
                      report_path=tmp_path / "report.md", fighter="Max Holloway", verbose=False)
        first = run_report(**kwargs)
        second = run_report(**kwargs)
        for key, table in first["summaries"].items():
            pd.testing.assert_frame_equal(table, second["summaries"][key])
        assert first["report"].read_text(encoding="utf-8") == second["report"].read_text(encoding="utf-8")

    def test_verbose_run_prints_banners(self, input_files, tmp_path, capsys):
        run_report(input_files=input_files, figures_dir=tmp_path / "figures",
                   report_path=tmp_path / "report.md", fighter="Max Holloway", verbose=True)
        out = capsys.readouterr().out
        assert "UFC FIGHTERS & FIGHTS REPORT" in out
        assert "QUALITY CONTROL REPORT" in out

    def test_missing_input_aborts(self, input_files, tmp_path):
        files = {**input_files, "fights": tmp_path / "missing.csv"}
        with pytest.raises(FileNotFoundError):
            run_report(input_files=files, figures_dir=tmp_path, report_path=tmp_path / "r.md", verbose=False)
