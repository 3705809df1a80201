"""
UFC Fighters & Fights Report
Package for loading pre-scraped UFC datasets, summarizing them, and rendering report figures.
"""

__version__ = "1.0.0"

# Lazy imports to avoid long startup times (matplotlib, geopandas)
# Import as needed in code

__all__ = ["config", "io", "cleaning", "aggregate", "qc", "plots", "captions", "report"]
