"""
Configuration module: paths, lookup tables, and global report settings.
"""

from pathlib import Path
from types import MappingProxyType

# ============================================================================
# PROJECT PATHS (zero hardcoding - all relative to PROJECT_ROOT)
# ============================================================================

# Detect PROJECT_ROOT: either cwd or parent if in notebooks/scripts
def get_project_root():
    """Auto-detect project root by checking for data/ and ufc_report/ folders."""
    cwd = Path.cwd()

    # If already in project root
    if (cwd / "data").exists() and (cwd / "ufc_report").exists():
        return cwd

    # If in notebooks/ or scripts/
    if cwd.name in ["notebooks", "scripts"] and (cwd.parent / "data").exists():
        return cwd.parent

    # Fallback: the directory holding this package
    return Path(__file__).resolve().parents[1]

PROJECT_ROOT = get_project_root()

# Core data paths
DATA_DIR = PROJECT_ROOT / "data"
ORIGINAL_DIR = DATA_DIR / "original"
REPORTS_DIR = PROJECT_ROOT / "reports"
FIGURES_DIR = REPORTS_DIR / "figures"

# Input files (pre-scraped, read-only)
INPUT_FILES = {
    "fighters": ORIGINAL_DIR / "chloropeth_dataset.csv",
    "fights": ORIGINAL_DIR / "boxplot_timeseries_stackedbars_dataset.csv",
    "strikes": ORIGINAL_DIR / "lineplot_radarplot_dataset.csv",
    "world": ORIGINAL_DIR / "world_countries.geojson",
}

# Output files
OUTPUT_FILES = {
    "choropleth": FIGURES_DIR / "fig_country_roster_share.png",
    "stacked_bars": FIGURES_DIR / "fig_weight_class_finishes.png",
    "trend": FIGURES_DIR / "fig_finish_trend.png",
    "boxplot": FIGURES_DIR / "fig_fight_duration.png",
    "round_lines": FIGURES_DIR / "fig_round_strikes.png",
    "radar": FIGURES_DIR / "fig_striking_radar.png",
    "report": REPORTS_DIR / "ufc_report.md",
}


def ensure_output_dirs():
    """Create report/figure directories if missing."""
    REPORTS_DIR.mkdir(parents=True, exist_ok=True)
    FIGURES_DIR.mkdir(parents=True, exist_ok=True)

# ============================================================================
# NATIONALITY NORMALIZATION
# ============================================================================

# Rows normalizing to this value are excluded from the country summary
UNKNOWN_NATIONALITY = "Unknown"

# Free-text nationality -> country name used by the world GeoJSON (Natural Earth)
NATIONALITY_ALIASES = MappingProxyType({
    "USA": "United States of America",
    "United States": "United States of America",
    "US": "United States of America",
    "America": "United States of America",
    "UK": "United Kingdom",
    "England": "United Kingdom",
    "Scotland": "United Kingdom",
    "Wales": "United Kingdom",
    "Northern Ireland": "United Kingdom",
    "Great Britain": "United Kingdom",
    "Republic of Ireland": "Ireland",
    "Russian Federation": "Russia",
    "Czech Republic": "Czechia",
    "Korea": "South Korea",
    "Republic of Korea": "South Korea",
    "Bosnia and Herzegovina": "Bosnia and Herz.",
    "Dominican Republic": "Dominican Rep.",
    "Democratic Republic of the Congo": "Dem. Rep. Congo",
    "DR Congo": "Dem. Rep. Congo",
    "Holland": "Netherlands",
    "The Netherlands": "Netherlands",
    "UAE": "United Arab Emirates",
    "Cote d'Ivoire": "Côte d'Ivoire",
    "Ivory Coast": "Côte d'Ivoire",
    "Macedonia": "North Macedonia",
    "Kyrgyz Republic": "Kyrgyzstan",
    "Republic of Moldova": "Moldova",
    "Brasil": "Brazil",
    "N/A": UNKNOWN_NATIONALITY,
    "": UNKNOWN_NATIONALITY,
})

# ============================================================================
# FIGHT CATEGORIES
# ============================================================================

# Lightest -> heaviest
WEIGHT_CLASS_ORDER = [
    "Strawweight",
    "Flyweight",
    "Bantamweight",
    "Featherweight",
    "Lightweight",
    "Welterweight",
    "Middleweight",
    "Light Heavyweight",
    "Heavyweight",
]

FINISH_CATEGORIES = ["Decision", "KO/TKO", "Submission", "Other"]

# Raw finish-method strings (lowercased, stripped) -> coarse category.
# Anything not listed is rejected at load time in strict mode.
FINISH_METHOD_MAP = MappingProxyType({
    "decision": "Decision",
    "decision - unanimous": "Decision",
    "decision - split": "Decision",
    "decision - majority": "Decision",
    "u-dec": "Decision",
    "s-dec": "Decision",
    "m-dec": "Decision",
    "ko": "KO/TKO",
    "tko": "KO/TKO",
    "ko/tko": "KO/TKO",
    "tko - doctor's stoppage": "KO/TKO",
    "submission": "Submission",
    "sub": "Submission",
    "dq": "Other",
    "overturned": "Other",
    "could not continue": "Other",
    "cnc": "Other",
    "other": "Other",
})

ROUND_MINUTES = 5
MAX_ROUNDS = 5

# ============================================================================
# STRIKING PROFILE
# ============================================================================

STRIKE_ZONES = ["clinch", "ground", "distance", "leg", "body"]

# Positional zones partition all significant strikes; leg/body are targets
POSITION_ZONES = ["clinch", "ground", "distance"]

RADAR_AXES = ["short_range", "long_range", "tactical", "accuracy", "volume"]

# None profiles every row of the strike dataset (single-fighter extract)
PROFILE_FIGHTER = None

# ============================================================================
# SMOOTHING & PLOTTING
# ============================================================================

CRS_WEB = "EPSG:4326"  # World map CRS

LOESS_FRAC = 0.75  # Fraction of years in each local regression
FIGURE_DPI = 300

FINISH_COLORS = {
    "Decision": "#1F78B4",
    "KO/TKO": "#E31A1C",
    "Submission": "#33A02C",
    "Other": "#999999",
}

# ============================================================================
# LOGGING & VERBOSITY
# ============================================================================

VERBOSE = True

def print_config():
    """Print all configuration settings."""
    print("\n" + "=" * 80)
    print("REPORT CONFIGURATION")
    print("=" * 80)
    print(f"\n📁 PROJECT ROOT: {PROJECT_ROOT}")
    print(f"📂 DATA DIR: {DATA_DIR}")
    print(f"📂 FIGURES DIR: {FIGURES_DIR}")
    print(f"\n🥊 Weight classes: {len(WEIGHT_CLASS_ORDER)}")
    print(f"   Finish categories: {', '.join(FINISH_CATEGORIES)}")
    print(f"   Profiled fighter: {PROFILE_FIGHTER or 'all rows'}")
    print(f"   LOESS span: {LOESS_FRAC}")
    print(f"\n✓ Configuration loaded successfully")
    print("=" * 80 + "\n")
