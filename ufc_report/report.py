"""
Report module: end-to-end pipeline (load → clean → aggregate → plot → caption → Markdown).
"""

import os
import sys
from pathlib import Path

from . import config, io, cleaning, aggregate, plots, captions, qc


def _print_section(title, log, verbose):
    if not verbose:
        return
    print(f"\n{title}")
    for line in log:
        print(f"  {line}")


def build_summaries(df_fighters, df_fights, df_strikes, fighter=config.PROFILE_FIGHTER,
                    strict=True, verbose=config.VERBOSE):
    """
    Clean raw tables and compute every summary table.

    Returns:
        Dict of summary DataFrames keyed by chart
    """
    fighters, log = cleaning.clean_fighters(df_fighters)
    _print_section("[clean] fighters", log, verbose)
    fights, log = cleaning.clean_fights(df_fights, strict=strict)
    _print_section("[clean] fights", log, verbose)
    strikes, log = cleaning.clean_strike_rounds(df_strikes)
    _print_section("[clean] strikes", log, verbose)

    summaries = {}
    summaries["countries"], log = aggregate.country_roster_share(fighters)
    _print_section("[aggregate] country roster share", log, verbose)
    summaries["weight_classes"], log = aggregate.weight_class_finish_distribution(fights)
    _print_section("[aggregate] weight-class finishes", log, verbose)
    summaries["trend"], log = aggregate.yearly_finish_trend(fights)
    _print_section("[aggregate] yearly finish trend", log, verbose)
    summaries["durations"], log = aggregate.fight_duration_by_weight_class(fights)
    _print_section("[aggregate] fight durations", log, verbose)
    summaries["rounds"], log = aggregate.round_striking_profile(strikes, fighter=fighter)
    _print_section("[aggregate] round striking profile", log, verbose)
    return summaries


def qc_checks(summaries):
    """(name, check_func, kwargs) tuples for `qc.print_qc_report`."""
    return [
        ("Alias table", qc.check_alias_idempotence, {}),
        ("Country shares", qc.check_percentages_sum, {"df": summaries["countries"]}),
        ("Country names", qc.check_no_unknown_country, {"df": summaries["countries"]}),
        ("Weight-class shares", qc.check_percentages_sum,
         {"df": summaries["weight_classes"], "group_col": "weight_class"}),
        ("Weight-class order", qc.check_weight_classes, {"df": summaries["weight_classes"]}),
        ("Yearly shares", qc.check_percentages_sum, {"df": summaries["trend"], "group_col": "year"}),
        ("Fight rounds", qc.check_round_range, {"df": summaries["durations"], "round_col": "round_ended"}),
        ("Strike rounds", qc.check_round_range, {"df": summaries["rounds"]}),
        ("Radar axes", qc.check_radar_axes, {"df": summaries["rounds"]}),
    ]


def render_markdown(summaries, figures, report_path, fighter=None):
    """Markdown document pairing each figure with its caption."""
    report_dir = Path(report_path).parent

    def link(key):
        return os.path.relpath(figures[key], report_dir).replace(os.sep, "/")

    sections = [
        ("Where fighters come from", "choropleth", captions.country_caption(summaries["countries"])),
        ("How fights end", "stacked_bars", captions.weight_class_caption(summaries["weight_classes"])),
        ("Finishes over time", "trend", captions.trend_caption(summaries["trend"])),
        ("How long fights last", "boxplot", captions.duration_caption(summaries["durations"])),
        ("Striking by round", "round_lines", None),
        ("Striking profile", "radar", captions.striking_caption(summaries["rounds"], fighter)),
    ]

    lines = ["# UFC fighters and fights", ""]
    for heading, key, text in sections:
        lines += [f"## {heading}", "", f"![{heading}]({link(key)})", ""]
        if text:
            lines += [text, ""]
    return "\n".join(lines)


def run_report(input_files=None, figures_dir=None, report_path=None,
               fighter=config.PROFILE_FIGHTER, strict=True, verbose=config.VERBOSE):
    """
    Run the full report.

    Args:
        input_files: Dict overriding config.INPUT_FILES entries
        figures_dir: Folder for PNG figures (default config.FIGURES_DIR)
        report_path: Markdown output path (default config.OUTPUT_FILES["report"])
        fighter: Fighter to profile in the striking charts (None = all rows)
        strict: Reject unrecognized finish methods
        verbose: Print progress and logs

    Returns:
        Dict with 'summaries', 'figures', 'report' and 'qc_failures'
    """
    files = {**config.INPUT_FILES, **(input_files or {})}
    if figures_dir is None and report_path is None:
        config.ensure_output_dirs()
    figures_dir = Path(figures_dir) if figures_dir is not None else config.FIGURES_DIR
    report_path = Path(report_path) if report_path is not None else config.OUTPUT_FILES["report"]
    figures = {key: figures_dir / path.name for key, path in config.OUTPUT_FILES.items() if key != "report"}

    if verbose:
        print("\n" + "=" * 80)
        print("UFC FIGHTERS & FIGHTS REPORT")
        print("=" * 80)
        print("\n[1/4] Loading data...")

    df_fighters = io.load_fighters(files["fighters"])
    df_fights = io.load_fights(files["fights"])
    df_strikes = io.load_strike_rounds(files["strikes"])
    world = io.load_world(files["world"])
    if verbose:
        print(f"  ✓ Loaded fighters: {len(df_fighters):,} rows")
        print(f"  ✓ Loaded fights: {len(df_fights):,} rows")
        print(f"  ✓ Loaded strike rounds: {len(df_strikes):,} rows")
        print(f"  ✓ Loaded world map: {len(world):,} polygons")
        print("\n[2/4] Cleaning & aggregating...")

    summaries = build_summaries(df_fighters, df_fights, df_strikes, fighter=fighter,
                                strict=strict, verbose=verbose)

    checks = qc_checks(summaries)
    if verbose:
        qc_failures = qc.print_qc_report(checks)
    else:
        qc_failures = sum(not passed for _, passed, _ in qc.run_checks(checks))

    if verbose:
        print("\n[3/4] Plotting...")
    figures["choropleth"], log = plots.plot_country_choropleth(summaries["countries"], world, figures["choropleth"])
    _print_section("[plot] choropleth", log, verbose)
    plots.plot_weight_class_finishes(summaries["weight_classes"], figures["stacked_bars"])
    plots.plot_finish_trend(summaries["trend"], figures["trend"])
    plots.plot_fight_duration(summaries["durations"], figures["boxplot"])
    plots.plot_round_strikes(summaries["rounds"], figures["round_lines"])
    radar_title = f"{fighter}: striking profile by round" if fighter else None
    plots.plot_striking_radar(summaries["rounds"], figures["radar"], title=radar_title)
    if verbose:
        for key, path in figures.items():
            print(f"  ✓ {key}: {path.name} ({io.file_size_mb(path):.2f} MB)")
        print("\n[4/4] Writing report...")

    report = io.save_text(render_markdown(summaries, figures, report_path, fighter), report_path)
    if verbose:
        print(f"  ✓ Saved report to: {report}")
        print("=" * 80 + "\n")

    return {"summaries": summaries, "figures": figures, "report": report, "qc_failures": qc_failures}


def main():
    """Console entry point: run the report with the configured paths."""
    if config.VERBOSE:
        config.print_config()

    try:
        result = run_report()
    except FileNotFoundError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        print(f"Place the input files in: {config.ORIGINAL_DIR}", file=sys.stderr)
        sys.exit(1)

    if result["qc_failures"]:
        print(f"⚠️  {result['qc_failures']} QC checks failed", file=sys.stderr)
        sys.exit(2)
