"""
conftest.py for tests/

Small in-memory versions of the three UFC datasets and a toy world map, so the
pipeline runs without the real CSVs. Figures render on the Agg backend.
"""

import matplotlib
matplotlib.use("Agg")

import pandas as pd
import geopandas as gpd
import pytest
from shapely.geometry import box


@pytest.fixture
def raw_fighters():
    return pd.DataFrame({
        "name": ["A", "B", "C", "D", "E", "F"],
        "nationality": ["USA", "United States", "Brazil", "England", None, "Unknown"],
    })


@pytest.fixture
def raw_fights():
    return pd.DataFrame({
        "weight_class": ["Heavyweight", "Heavyweight", "Heavyweight", "Lightweight",
                         "Women's Strawweight", "Lightweight", "Catch Weight", "Flyweight"],
        "finish_method": ["KO/TKO", "KO/TKO", "Decision - Unanimous", "Submission",
                          "Decision - Split", "TKO - Doctor's Stoppage", "Decision - Unanimous", "DQ"],
        "date": ["2010-03-01", "2012-05-02", "2014-07-03", "2016-09-04",
                 "2018-11-05", "2020-01-06", "2020-02-07", "2022-03-08"],
        "round_ended": [1, 2, 3, 5, 3, 1, 3, 2],
        "time_ended": [150, 60, 300, 120, 300, 30, 300, 200],
        "title_bout": ["False", "True", "False", "True", "f", "t", "False", "0"],
    })


@pytest.fixture
def raw_strikes():
    rows = []
    for fighter, scale in [("Max Holloway", 1), ("Other Fighter", 3)]:
        for rnd in (1, 2, 3):
            rows.append({
                "fighter": fighter,
                "round_number": rnd,
                "clinch_attempted": 2 * scale, "clinch_landed": 1 * scale,
                "ground_attempted": 2 * scale, "ground_landed": 1 * scale,
                "distance_attempted": 16 * rnd * scale, "distance_landed": 8 * rnd * scale,
                "leg_attempted": 3 * scale, "leg_landed": 2 * scale,
                "body_attempted": 5 * scale, "body_landed": 3 * scale,
            })
    return pd.DataFrame(rows)


@pytest.fixture
def world():
    return gpd.GeoDataFrame(
        {"name": ["United States of America", "Brazil", "United Kingdom", "France"]},
        geometry=[box(-120, 30, -70, 50), box(-70, -30, -40, 0), box(-5, 50, 2, 58), box(0, 42, 8, 50)],
        crs="EPSG:4326",
    )


@pytest.fixture
def input_files(tmp_path, raw_fighters, raw_fights, raw_strikes, world):
    files = {
        "fighters": tmp_path / "chloropeth_dataset.csv",
        "fights": tmp_path / "boxplot_timeseries_stackedbars_dataset.csv",
        "strikes": tmp_path / "lineplot_radarplot_dataset.csv",
        "world": tmp_path / "world_countries.geojson",
    }
    raw_fighters.to_csv(files["fighters"], index=False)
    raw_fights.to_csv(files["fights"], index=False)
    raw_strikes.to_csv(files["strikes"], index=False)
    world.to_file(files["world"], driver="GeoJSON")
    return files
