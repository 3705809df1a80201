"""
Aggregation module: per-chart summary tables (country share, weight-class finishes,
yearly trend, fight duration, round striking profile).
"""

import pandas as pd
import numpy as np
from statsmodels.nonparametric.smoothers_lowess import lowess
from . import config


def country_roster_share(df_fighters):
    """
    Share of the roster per country.

    Args:
        df_fighters: Cleaned fighters with a normalized `country` column

    Returns:
        DataFrame [country, n_fighters, pct] and log info
    """
    log = []
    fighters = df_fighters[df_fighters['country'] != config.UNKNOWN_NATIONALITY]

    summary = fighters.groupby('country', as_index=False).size().rename(columns={'size': 'n_fighters'})
    total = summary['n_fighters'].sum()
    summary['pct'] = summary['n_fighters'] / total * 100 if total > 0 else np.nan
    summary = summary.sort_values(['n_fighters', 'country'], ascending=[False, True]).reset_index(drop=True)

    log.append(f"✓ Roster share computed for {len(summary)} countries ({total:,} fighters)")
    if len(summary) > 0:
        top = summary.iloc[0]
        log.append(f"  - Largest: {top['country']} ({top['pct']:.1f}%)")
    return summary, log


def weight_class_finish_distribution(df_fights):
    """
    Share of each finish category within each weight class.

    Weight classes without fights are omitted.

    Returns:
        DataFrame [weight_class, finish_category, n_fights, pct] and log info
    """
    log = []
    counts = (
        df_fights.groupby(['weight_class', 'finish_category'], observed=True)
        .size()
        .rename('n_fights')
        .reset_index()
    )
    class_totals = counts.groupby('weight_class', observed=True)['n_fights'].transform('sum')
    counts['pct'] = counts['n_fights'] / class_totals * 100
    counts = counts.sort_values(['weight_class', 'finish_category']).reset_index(drop=True)

    n_classes = counts['weight_class'].nunique()
    log.append(f"✓ Finish distribution computed for {n_classes} weight classes")
    empty = [wc for wc in config.WEIGHT_CLASS_ORDER if wc not in set(counts['weight_class'].astype(str))]
    if empty:
        log.append(f"⚠️  No fights for: {', '.join(empty)} (omitted)")
    return counts, log


def _loess(x, y, frac):
    """LOESS fit of y on x; identity when there are too few points to smooth."""
    if len(np.unique(x)) < 3:
        return np.asarray(y, dtype=float)
    return lowess(y, x, frac=frac, it=0, return_sorted=False)


def yearly_finish_trend(df_fights, frac=config.LOESS_FRAC):
    """
    Proportion of each finish category per year, with a LOESS trend.

    Category/year combinations without fights count as 0%, so each year sums to 100.

    Returns:
        DataFrame [year, finish_category, n_fights, pct, pct_smoothed] and log info
    """
    log = []
    counts = pd.crosstab(df_fights['year'], df_fights['finish_category'])
    counts.columns = counts.columns.astype(str)
    counts = counts.reindex(columns=config.FINISH_CATEGORIES, fill_value=0).sort_index()
    pct = counts.div(counts.sum(axis=1), axis=0) * 100

    trend = (
        counts.stack().rename('n_fights').to_frame()
        .join(pct.stack().rename('pct'))
        .reset_index()
    )
    trend.columns = ['year', 'finish_category', 'n_fights', 'pct']

    smoothed = []
    for category in config.FINISH_CATEGORIES:
        part = trend[trend['finish_category'] == category]
        smoothed.append(pd.Series(
            _loess(part['year'].to_numpy(dtype=float), part['pct'].to_numpy(dtype=float), frac),
            index=part.index,
        ))
    trend['pct_smoothed'] = pd.concat(smoothed).sort_index() if smoothed else np.nan
    trend['finish_category'] = pd.Categorical(
        trend['finish_category'], categories=config.FINISH_CATEGORIES, ordered=True
    )
    trend = trend.sort_values(['year', 'finish_category']).reset_index(drop=True)

    if len(counts) > 0:
        log.append(f"✓ Yearly trend computed ({counts.index.min()}–{counts.index.max()}, {len(counts)} years)")
    else:
        log.append(f"⚠️  No dated fights; yearly trend is empty")
    if len(counts) < 3:
        log.append(f"⚠️  Fewer than 3 years; LOESS smoothing skipped")
    return trend, log


def fight_duration_by_weight_class(df_fights):
    """
    Elapsed fight time in minutes, per fight, for the duration boxplot.

    Returns:
        DataFrame [weight_class, title_bout, round_ended, fight_minutes] and log info
    """
    log = []
    fights = df_fights.dropna(subset=['round_ended', 'time_ended'])
    dropped = len(df_fights) - len(fights)
    if dropped > 0:
        log.append(f"⚠️  Excluded {dropped} fights with missing round/time ended")

    durations = fights[['weight_class', 'title_bout', 'round_ended']].copy()
    durations['fight_minutes'] = (
        (fights['round_ended'].astype(float) - 1) * config.ROUND_MINUTES + fights['time_ended'] / 60
    )
    durations = durations.sort_values(['weight_class', 'title_bout']).reset_index(drop=True)

    log.append(f"✓ Fight durations computed for {len(durations):,} fights")
    if len(durations) > 0:
        log.append(f"  - Median: {durations['fight_minutes'].median():.1f} min")
    return durations, log


def round_striking_profile(df_strikes, fighter=config.PROFILE_FIGHTER):
    """
    Per-round striking profile of one fighter, normalized into five radar axes.

    Each zone's attempted/landed counts are averaged per round, then:
      short_range = (clinch + ground attempted) / total attempted
      long_range  = distance attempted / total attempted
      tactical    = (leg + body attempted) / total attempted
      accuracy    = total landed / total attempted
      volume      = mean total attempted / career max single-round total attempted
    with totals taken over the positional zones (clinch, ground, distance).
    All axes are percentages; zero denominators give NaN.

    Args:
        df_strikes: Cleaned strike rounds
        fighter: Fighter to profile (matched against the `fighter` column);
            None profiles every row

    Returns:
        DataFrame indexed by round_number order and log info
    """
    log = []
    strikes = df_strikes
    if fighter is not None:
        if 'fighter' not in strikes.columns:
            raise ValueError("Strike data has no 'fighter' column to filter on")
        strikes = strikes[strikes['fighter'] == fighter]
        if len(strikes) == 0:
            raise ValueError(f"No strike records for fighter: {fighter}")
        log.append(f"✓ Profiling {fighter} ({len(strikes)} round records)")

    attempted = [f"{zone}_attempted" for zone in config.STRIKE_ZONES]
    landed = [f"{zone}_landed" for zone in config.STRIKE_ZONES]
    complete = strikes.dropna(subset=attempted + landed)
    if len(complete) < len(strikes):
        log.append(f"⚠️  Excluded {len(strikes) - len(complete)} rows with missing strike counts")

    pos_attempted = [f"{zone}_attempted" for zone in config.POSITION_ZONES]
    pos_landed = [f"{zone}_landed" for zone in config.POSITION_ZONES]
    career_max = complete[pos_attempted].sum(axis=1).max() if len(complete) > 0 else np.nan

    profile = complete.groupby('round_number', as_index=False)[attempted + landed].mean()
    total_attempted = profile[pos_attempted].sum(axis=1).replace(0, np.nan)
    total_landed = profile[pos_landed].sum(axis=1)

    profile['short_range'] = (profile['clinch_attempted'] + profile['ground_attempted']) / total_attempted * 100
    profile['long_range'] = profile['distance_attempted'] / total_attempted * 100
    profile['tactical'] = (profile['leg_attempted'] + profile['body_attempted']) / total_attempted * 100
    profile['accuracy'] = total_landed / total_attempted * 100
    if career_max and career_max > 0:
        profile['volume'] = profile[pos_attempted].sum(axis=1) / career_max * 100
    else:
        profile['volume'] = np.nan
    profile['round_number'] = profile['round_number'].astype('int64')
    profile = profile.sort_values('round_number').reset_index(drop=True)

    log.append(f"✓ Striking profile computed for {len(profile)} rounds")
    return profile, log
