"""
Cleaning module: Nationality normalization and typing of fight and strike tables.
"""

import pandas as pd
import numpy as np
from . import config

BOOL_MAP = {'t': True, 'f': False, 'true': True, 'false': False, '1': True, '0': False,
            'yes': True, 'no': False, '1.0': True, '0.0': False}


def normalize_nationality(name, aliases=config.NATIONALITY_ALIASES,
                          unknown=config.UNKNOWN_NATIONALITY):
    """
    Map a free-text nationality onto its canonical country name.

    Unmapped names are returned unchanged (stripped). Missing values become
    the `unknown` sentinel.
    """
    if name is None or pd.isna(name):
        return unknown
    name = str(name).strip()
    if not name:
        return unknown
    return aliases.get(name, name)


def normalize_nationalities(s: pd.Series, aliases=config.NATIONALITY_ALIASES,
                            unknown=config.UNKNOWN_NATIONALITY) -> pd.Series:
    """Vectorized `normalize_nationality` over a Series."""
    return s.apply(normalize_nationality, aliases=aliases, unknown=unknown)


def bucket_finish_method(method, mapping=config.FINISH_METHOD_MAP):
    """Return the coarse finish category for a raw finish-method string, or None."""
    if method is None or pd.isna(method):
        return None
    return mapping.get(str(method).strip().lower())


def normalize_weight_class(value):
    """Strip the "Women's" prefix and whitespace; return None if not a standard division."""
    if value is None or pd.isna(value):
        return None
    value = str(value).strip()
    if value.lower().startswith("women's "):
        value = value[len("women's "):].strip()
    for division in config.WEIGHT_CLASS_ORDER:
        if value.lower() == division.lower():
            return division
    return None


def clean_fighters(df_fighters, aliases=config.NATIONALITY_ALIASES):
    """
    Clean fighter roster: normalize nationality, drop unknown nationalities.

    Args:
        df_fighters: Raw fighters DataFrame
        aliases: Mapping of nationality alias -> canonical country name

    Returns:
        Cleaned DataFrame and log info
    """
    log = []
    df_clean = df_fighters.copy()

    if 'nationality' not in df_clean.columns:
        raise ValueError("'nationality' column not found in fighters")

    df_clean['country'] = normalize_nationalities(df_clean['nationality'], aliases=aliases)
    n_aliased = (df_clean['country'] != df_clean['nationality'].astype(str).str.strip()).sum()
    log.append(f"✓ Nationalities normalized ({n_aliased} rows remapped)")

    unknown = df_clean['country'] == config.UNKNOWN_NATIONALITY
    if unknown.sum() > 0:
        log.append(f"⚠️  Excluded {unknown.sum()} fighters with unknown nationality")
        df_clean = df_clean[~unknown]

    log.append(f"✓ Fighters cleaning complete: {df_fighters.shape} → {df_clean.shape}")
    return df_clean, log


def clean_fights(df_fights, strict=True):
    """
    Clean fight records: ordered weight classes, finish categories, dates, rounds.

    Args:
        df_fights: Raw fights DataFrame
        strict: Raise on unrecognized finish methods instead of bucketing them as "Other"

    Returns:
        Cleaned DataFrame and log info
    """
    log = []
    df_clean = df_fights.copy()

    # 1. Finish method -> coarse category
    df_clean['finish_category'] = df_clean['finish_method'].apply(bucket_finish_method)
    unmatched = df_clean['finish_category'].isna()
    if unmatched.sum() > 0:
        raw = sorted(df_clean.loc[unmatched, 'finish_method'].astype(str).unique().tolist())
        if strict:
            raise ValueError(f"Unrecognized finish methods: {raw}")
        df_clean.loc[unmatched, 'finish_category'] = "Other"
        log.append(f"⚠️  {unmatched.sum()} unrecognized finish methods bucketed as Other: {raw[:10]}")
    df_clean['finish_category'] = pd.Categorical(
        df_clean['finish_category'], categories=config.FINISH_CATEGORIES, ordered=True
    )
    log.append(f"✓ Finish methods mapped to {len(config.FINISH_CATEGORIES)} categories")

    # 2. Weight class -> ordered categorical (lightest first)
    df_clean['weight_class'] = df_clean['weight_class'].apply(normalize_weight_class)
    off_division = df_clean['weight_class'].isna()
    if off_division.sum() > 0:
        log.append(f"⚠️  Dropped {off_division.sum()} fights outside the standard divisions")
        df_clean = df_clean[~off_division].copy()
    df_clean['weight_class'] = pd.Categorical(
        df_clean['weight_class'], categories=config.WEIGHT_CLASS_ORDER, ordered=True
    )

    # 3. Parse date column
    df_clean['date'] = pd.to_datetime(df_clean['date'], errors='coerce')
    null_dates = df_clean['date'].isnull().sum()
    if null_dates > 0:
        log.append(f"⚠️  {null_dates} invalid dates (dropped)")
        df_clean = df_clean[df_clean['date'].notna()].copy()
    if len(df_clean) > 0:
        log.append(f"✓ Date column parsed ({df_clean['date'].min().date()} to {df_clean['date'].max().date()})")
    df_clean['year'] = df_clean['date'].dt.year.astype('int64')

    # 4. Round / time ended (missing values stay NaN and are skipped downstream)
    df_clean['round_ended'] = pd.to_numeric(df_clean['round_ended'], errors='coerce')
    df_clean['time_ended'] = pd.to_numeric(df_clean['time_ended'], errors='coerce')
    bad_round = df_clean['round_ended'].notna() & ~df_clean['round_ended'].between(1, config.MAX_ROUNDS)
    if bad_round.sum() > 0:
        log.append(f"⚠️  {bad_round.sum()} rounds outside 1-{config.MAX_ROUNDS} (set to NaN)")
        df_clean.loc[bad_round, 'round_ended'] = np.nan
    df_clean['round_ended'] = df_clean['round_ended'].astype('Int64')

    # 5. Title bout -> boolean
    df_clean['title_bout'] = (
        df_clean['title_bout'].astype(str).str.strip().str.lower().map(BOOL_MAP).fillna(False).astype(bool)
    )
    log.append(f"✓ title_bout converted to boolean ({df_clean['title_bout'].sum()} title fights)")

    log.append(f"✓ Fights cleaning complete: {df_fights.shape} → {df_clean.shape}")
    return df_clean, log


def clean_strike_rounds(df_strikes):
    """
    Clean per-round strike statistics: numeric counts, valid round numbers.

    Rows with missing counts are kept here; the striking profile excludes them.

    Returns:
        Cleaned DataFrame and log info
    """
    log = []
    df_clean = df_strikes.copy()

    count_cols = [f"{zone}_{kind}" for zone in config.STRIKE_ZONES for kind in ("attempted", "landed")]
    for col in count_cols + ['round_number']:
        df_clean[col] = pd.to_numeric(df_clean[col], errors='coerce')

    bad_round = ~df_clean['round_number'].between(1, config.MAX_ROUNDS)
    if bad_round.sum() > 0:
        log.append(f"⚠️  Dropped {bad_round.sum()} rows with round_number outside 1-{config.MAX_ROUNDS}")
        df_clean = df_clean[~bad_round].copy()
    df_clean['round_number'] = df_clean['round_number'].astype('int64')

    null_rows = df_clean[count_cols].isnull().any(axis=1).sum()
    if null_rows > 0:
        log.append(f"⚠️  {null_rows} rows with missing strike counts")

    if 'fighter' in df_clean.columns:
        df_clean['fighter'] = df_clean['fighter'].astype(str).str.strip()
        log.append(f"✓ {df_clean['fighter'].nunique()} fighters in strike data")

    log.append(f"✓ Strike cleaning complete: {df_strikes.shape} → {df_clean.shape}")
    return df_clean, log
