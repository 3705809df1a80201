"""
Captions module: short narrative paragraphs describing each summary table.
"""

import pandas as pd
from . import config


def country_caption(summary, top_n=3):
    if len(summary) == 0:
        return "No fighters with a known nationality were found."
    top = summary.head(top_n)
    leaders = ", ".join(f"{row.country} ({row.pct:.1f}%)" for row in top.itertuples())
    total = int(summary['n_fighters'].sum())
    return (
        f"The roster of {total:,} fighters spans {len(summary)} countries. "
        f"The largest contingents come from {leaders}."
    )


def weight_class_caption(summary):
    if len(summary) == 0:
        return "No fights were available to compare weight classes."
    pct = summary.assign(weight_class=summary['weight_class'].astype(str),
                         finish_category=summary['finish_category'].astype(str))
    ko = pct[pct['finish_category'] == "KO/TKO"].set_index('weight_class')['pct']
    dec = pct[pct['finish_category'] == "Decision"].set_index('weight_class')['pct']

    parts = []
    if len(ko) > 0:
        parts.append(f"Knockouts are most common at {ko.idxmax()} ({ko.max():.1f}% of fights)")
    if len(dec) > 0:
        parts.append(f"decisions dominate at {dec.idxmax()} ({dec.max():.1f}%)")
    return "; ".join(parts) + "." if parts else "No KO/TKO or decision results recorded."


def trend_caption(trend):
    if len(trend) == 0:
        return "No dated fights were available for a trend."
    years = trend['year']
    first, last = int(years.min()), int(years.max())
    sentences = [f"Between {first} and {last}:"]
    for category in config.FINISH_CATEGORIES:
        part = trend[trend['finish_category'] == category].sort_values('year')
        if len(part) == 0:
            continue
        start, end = part['pct_smoothed'].iloc[0], part['pct_smoothed'].iloc[-1]
        if pd.isna(start) or pd.isna(end):
            continue
        direction = "rose" if end > start + 1 else "fell" if end < start - 1 else "held steady"
        sentences.append(f"{category} finishes {direction} ({start:.0f}% → {end:.0f}%).")
    return " ".join(sentences)


def duration_caption(durations):
    if len(durations) == 0:
        return "No fight durations were available."
    medians = durations.groupby('title_bout')['fight_minutes'].median()
    text = f"The median fight lasts {durations['fight_minutes'].median():.1f} minutes"
    if True in medians.index and False in medians.index:
        text += (f"; title bouts run {medians[True]:.1f} minutes against "
                 f"{medians[False]:.1f} for non-title fights")
    return text + "."


def striking_caption(profile, fighter=None):
    if len(profile) == 0:
        return "No strike records were available."
    who = fighter or "The profiled fighter"
    busiest = profile.loc[profile['volume'].idxmax()] if profile['volume'].notna().any() else None
    sharpest = profile.loc[profile['accuracy'].idxmax()] if profile['accuracy'].notna().any() else None

    sentences = [f"{who} throws {profile['long_range'].mean():.0f}% of strikes at distance on average."]
    if busiest is not None:
        sentences.append(f"Output peaks in round {int(busiest['round_number'])}.")
    if sharpest is not None:
        sentences.append(
            f"Accuracy is highest in round {int(sharpest['round_number'])} ({sharpest['accuracy']:.0f}%)."
        )
    return " ".join(sentences)
