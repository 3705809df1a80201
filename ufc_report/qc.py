"""
Quality Control (QC) module: Assertions and data quality checks on summary tables.
"""

import numpy as np
from . import config


def check_percentages_sum(df, pct_col='pct', group_col=None, tol=1e-6):
    """Assert percentages sum to 100 overall, or within each group."""
    if len(df) == 0:
        return f"⚠️  Empty table; nothing to check"
    if group_col is None:
        total = df[pct_col].sum()
        assert abs(total - 100) <= tol, f"{pct_col} sums to {total:.4f}, not 100"
        return f"✓ {pct_col} sums to 100"

    totals = df.groupby(group_col, observed=True)[pct_col].sum()
    bad = totals[(totals - 100).abs() > tol]
    assert len(bad) == 0, f"{pct_col} does not sum to 100 for: {bad.index.tolist()}"
    return f"✓ {pct_col} sums to 100 within each of {len(totals)} {group_col} groups"


def check_weight_classes(df, col='weight_class'):
    """Assert weight classes are standard divisions, in lightest-to-heaviest order."""
    values = df[col].astype(str)
    invalid = set(values) - set(config.WEIGHT_CLASS_ORDER)
    assert not invalid, f"Unknown weight classes: {sorted(invalid)}"
    ranks = values.map(config.WEIGHT_CLASS_ORDER.index)
    assert ranks.is_monotonic_increasing, f"{col} not ordered lightest to heaviest"
    return f"✓ {values.nunique()} weight classes, ordered lightest to heaviest"


def check_round_range(df, round_col='round_number'):
    """Assert rounds are within 1..MAX_ROUNDS."""
    rounds = df[round_col].dropna()
    assert rounds.between(1, config.MAX_ROUNDS).all(), f"{round_col} outside 1-{config.MAX_ROUNDS}"
    return f"✓ {round_col} within 1-{config.MAX_ROUNDS}"


def check_no_unknown_country(df, col='country'):
    """Assert the unknown-nationality sentinel never reaches the country summary."""
    assert (df[col] != config.UNKNOWN_NATIONALITY).all(), f"'{config.UNKNOWN_NATIONALITY}' found in {col}"
    return f"✓ No '{config.UNKNOWN_NATIONALITY}' countries"


def check_alias_idempotence(aliases=config.NATIONALITY_ALIASES):
    """Assert no canonical name is itself an alias for a different name."""
    clashes = sorted(v for v in set(aliases.values()) if v in aliases and aliases[v] != v)
    assert not clashes, f"Canonical names remapped by alias table: {clashes}"
    return f"✓ Alias table idempotent ({len(aliases)} aliases)"


def check_radar_axes(df):
    """Check radar axes are present and within 0-100."""
    missing = [c for c in config.RADAR_AXES if c not in df.columns]
    assert not missing, f"Missing radar axes: {missing}"
    values = df[config.RADAR_AXES].to_numpy(dtype=float)
    finite = values[np.isfinite(values)]
    if ((finite < 0) | (finite > 100)).any():
        return f"⚠️  Radar axes outside 0-100"
    return f"✓ Radar axes within 0-100"


def run_checks(checks):
    """
    Run checks without printing.

    Args:
        checks: List of (name, check_func, kwargs) tuples

    Returns:
        List of (name, passed, message) tuples
    """
    results = []
    for name, check_func, kwargs in checks:
        try:
            results.append((name, True, check_func(**kwargs)))
        except AssertionError as e:
            results.append((name, False, str(e)))
    return results


def print_qc_report(checks):
    """
    Print formatted QC report.

    Returns:
        Number of failed checks
    """
    print("\n" + "=" * 80)
    print("QUALITY CONTROL REPORT")
    print("=" * 80)

    failures = 0
    for name, passed, message in run_checks(checks):
        if passed:
            print(f"\n{name}")
            print(f"  {message}")
        else:
            failures += 1
            print(f"\n❌ {name}")
            print(f"  ERROR: {message}")

    print("\n" + "=" * 80)
    return failures
