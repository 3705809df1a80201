"""
I/O module: Load input tables (CSV, GeoJSON) and save figures/reports.
"""

import pandas as pd
import geopandas as gpd
from pathlib import Path
import warnings

from . import config

FIGHTER_COLUMNS = ["nationality"]
FIGHT_COLUMNS = ["weight_class", "finish_method", "date", "round_ended", "time_ended", "title_bout"]
STRIKE_COLUMNS = ["round_number"] + [
    f"{zone}_{kind}" for zone in config.STRIKE_ZONES for kind in ("attempted", "landed")
]


def load_csv(filepath, **kwargs):
    """
    Load CSV file with error handling.

    Args:
        filepath: Path to CSV file
        **kwargs: Additional arguments for pd.read_csv()

    Returns:
        pd.DataFrame
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"CSV file not found: {filepath}")

    return pd.read_csv(filepath, **kwargs)


def require_columns(df, columns, name):
    """Raise ValueError if any of `columns` is missing from `df`."""
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(f"{name} is missing required columns: {missing}")
    return df


def _load_table(filepath, columns, name):
    df = load_csv(filepath)
    df.columns = [col.strip().lower().replace(' ', '_') for col in df.columns]
    return require_columns(df, columns, name)


def load_fighters(filepath=None):
    """Load the fighter roster (one row per fighter, with `nationality`)."""
    return _load_table(filepath or config.INPUT_FILES["fighters"], FIGHTER_COLUMNS, "fighters")


def load_fights(filepath=None):
    """Load fight records (weight class, finish method, date, round/time ended, title bout)."""
    return _load_table(filepath or config.INPUT_FILES["fights"], FIGHT_COLUMNS, "fights")


def load_strike_rounds(filepath=None):
    """Load per-round strike statistics (attempted/landed per zone)."""
    return _load_table(filepath or config.INPUT_FILES["strikes"], STRIKE_COLUMNS, "strikes")


def load_geojson(filepath, **kwargs):
    """
    Load GeoJSON file with CRS validation.

    Args:
        filepath: Path to GeoJSON file
        **kwargs: Additional arguments for gpd.read_file()

    Returns:
        geopandas.GeoDataFrame
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"GeoJSON file not found: {filepath}")

    gdf = gpd.read_file(filepath, **kwargs)

    if gdf.crs is None:
        warnings.warn(f"⚠️  CRS missing in {filepath.name}. Assuming EPSG:4326")
        gdf = gdf.set_crs("EPSG:4326")

    return gdf


def load_world(filepath=None):
    """Load world country polygons; requires a `name` column of country names."""
    gdf = load_geojson(filepath or config.INPUT_FILES["world"])
    return require_columns(gdf, ["name", "geometry"], "world countries")


def save_figure(fig, filepath, dpi=None):
    """
    Save a matplotlib figure, creating parent folders.

    Returns:
        Path to saved file
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(filepath, dpi=dpi or config.FIGURE_DPI, bbox_inches="tight", facecolor="white")
    return filepath


def save_text(text, filepath):
    """Write a text/Markdown document and return its path."""
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    filepath.write_text(text, encoding="utf-8")
    return filepath


def file_size_mb(filepath):
    """Get file size in MB."""
    return Path(filepath).stat().st_size / (1024 ** 2)
