"""
Plotting module: static figures for each summary table (map, bars, trend, boxplot, radar).
"""

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
from matplotlib.lines import Line2D
import seaborn as sns

from . import config
from .io import save_figure


def plot_country_choropleth(summary, world, out_path=config.OUTPUT_FILES["choropleth"]):
    """
    World choropleth of roster share per country.

    Args:
        summary: Country summary [country, n_fighters, pct]
        world: GeoDataFrame of country polygons with a `name` column
        out_path: Output PNG path

    Returns:
        Path to saved figure and log info
    """
    log = []
    gdf = world.to_crs(config.CRS_WEB) if world.crs is not None and world.crs != config.CRS_WEB else world
    gdf = gdf.merge(summary, left_on='name', right_on='country', how='left')

    unmatched = sorted(set(summary['country']) - set(world['name']))
    if unmatched:
        log.append(f"⚠️  {len(unmatched)} countries not on the map: {unmatched[:10]}")
    log.append(f"✓ {gdf['pct'].notna().sum()} countries shaded")

    fig, ax = plt.subplots(figsize=(14, 7))
    if gdf['pct'].notna().any():
        gdf.plot(
            column='pct',
            cmap='Reds',
            legend=True,
            edgecolor='0.6',
            linewidth=0.3,
            ax=ax,
            legend_kwds={'label': 'Share of roster (%)', 'shrink': 0.6},
            missing_kwds={'color': 'lightgrey'},
        )
    else:
        gdf.plot(color='lightgrey', edgecolor='0.6', linewidth=0.3, ax=ax)
    ax.set_title('UFC roster by nationality')
    ax.axis('off')

    path = save_figure(fig, out_path)
    plt.close(fig)
    return path, log


def plot_weight_class_finishes(summary, out_path=config.OUTPUT_FILES["stacked_bars"]):
    """Horizontal 100% stacked bars of finish categories per weight class."""
    table = summary.assign(
        weight_class=summary['weight_class'].astype(str),
        finish_category=summary['finish_category'].astype(str),
    ).pivot(index='weight_class', columns='finish_category', values='pct')
    classes = [wc for wc in config.WEIGHT_CLASS_ORDER if wc in table.index]
    table = table.reindex(index=classes, columns=config.FINISH_CATEGORIES).fillna(0)

    fig, ax = plt.subplots(figsize=(10, 6))
    left = np.zeros(len(table))
    for category in config.FINISH_CATEGORIES:
        values = table[category].to_numpy()
        ax.barh(table.index, values, left=left, color=config.FINISH_COLORS[category],
                label=category, edgecolor='white')
        left += values

    ax.invert_yaxis()  # lightest on top
    ax.set_xlim(0, 100)
    ax.set_xlabel('Share of fights (%)')
    ax.set_title('How fights end, by weight class')
    ax.legend(title='Finish', loc='lower right', bbox_to_anchor=(1.0, 1.02), ncol=4, frameon=False)

    path = save_figure(fig, out_path)
    plt.close(fig)
    return path


def plot_finish_trend(trend, out_path=config.OUTPUT_FILES["trend"]):
    """Yearly finish-category proportions (points) with LOESS trend lines."""
    fig, ax = plt.subplots(figsize=(11, 6))
    for category in config.FINISH_CATEGORIES:
        part = trend[trend['finish_category'] == category]
        color = config.FINISH_COLORS[category]
        ax.scatter(part['year'], part['pct'], color=color, alpha=0.5, s=18)
        ax.plot(part['year'], part['pct_smoothed'], color=color, linewidth=2, label=category)

    ax.set_xlabel('Year')
    ax.set_ylabel('Share of fights (%)')
    ax.set_ylim(bottom=0)
    ax.set_title('Finish methods over time (LOESS trend)')
    ax.legend(title='Finish', frameon=False)
    sns.despine(ax=ax)

    path = save_figure(fig, out_path)
    plt.close(fig)
    return path


def plot_fight_duration(durations, out_path=config.OUTPUT_FILES["boxplot"]):
    """Boxplot with jittered points of fight minutes per weight class, split by title bout."""
    data = durations.assign(
        weight_class=durations['weight_class'].astype(str),
        bout=np.where(durations['title_bout'], 'Title bout', 'Non-title'),
    )
    order = [wc for wc in config.WEIGHT_CLASS_ORDER if wc in set(data['weight_class'])]
    hue_order = [h for h in ['Non-title', 'Title bout'] if h in set(data['bout'])]
    palette = {'Non-title': '#A6CEE3', 'Title bout': '#FDBF6F'}

    fig, ax = plt.subplots(figsize=(11, 7))
    sns.boxplot(data=data, x='fight_minutes', y='weight_class', hue='bout', order=order,
                hue_order=hue_order, palette=palette, showfliers=False, ax=ax)
    sns.stripplot(data=data, x='fight_minutes', y='weight_class', hue='bout', order=order,
                  hue_order=hue_order, dodge=True, jitter=0.25, size=2, alpha=0.35,
                  palette={h: '#333333' for h in hue_order}, legend=False, ax=ax)

    for end_of_round in range(config.ROUND_MINUTES, config.ROUND_MINUTES * config.MAX_ROUNDS, config.ROUND_MINUTES):
        ax.axvline(end_of_round, color='0.8', linestyle='--', linewidth=0.8, zorder=0)

    handles = [mpatches.Patch(color=palette[h], label=h) for h in hue_order]
    ax.legend(handles=handles, title='', loc='lower right', frameon=False)
    ax.set_xlabel('Fight duration (minutes)')
    ax.set_ylabel('')
    ax.set_title('How long fights last, by weight class')

    path = save_figure(fig, out_path)
    plt.close(fig)
    return path


def plot_round_strikes(profile, out_path=config.OUTPUT_FILES["round_lines"]):
    """Mean attempted strikes per zone, by round."""
    fig, ax = plt.subplots(figsize=(9, 6))
    palette = sns.color_palette('tab10', len(config.STRIKE_ZONES))
    for color, zone in zip(palette, config.STRIKE_ZONES):
        ax.plot(profile['round_number'], profile[f'{zone}_attempted'], 'o-', color=color,
                linewidth=2, label=zone.capitalize())
        ax.plot(profile['round_number'], profile[f'{zone}_landed'], 'o--', color=color,
                linewidth=1, alpha=0.6)

    style_handles = [
        Line2D([0], [0], color='0.3', linestyle='-', label='Attempted'),
        Line2D([0], [0], color='0.3', linestyle='--', label='Landed'),
    ]
    zone_legend = ax.legend(title='Zone', loc='upper left', bbox_to_anchor=(1.01, 1.0), frameon=False)
    ax.add_artist(zone_legend)
    ax.legend(handles=style_handles, loc='lower left', bbox_to_anchor=(1.01, 0.0), frameon=False)

    ax.set_xticks(profile['round_number'])
    ax.set_xlabel('Round')
    ax.set_ylabel('Mean strikes per round')
    ax.set_title('Striking by round')
    sns.despine(ax=ax)

    path = save_figure(fig, out_path)
    plt.close(fig)
    return path


def plot_striking_radar(profile, out_path=config.OUTPUT_FILES["radar"], title=None):
    """Radar chart of the five striking axes, one polygon per round."""
    labels = ['Short range', 'Long range', 'Tactical', 'Accuracy', 'Volume']
    n_axes = len(config.RADAR_AXES)

    angles = [n / float(n_axes) * 2 * np.pi for n in range(n_axes)]
    angles += angles[:1]  # Complete the loop

    fig, ax = plt.subplots(figsize=(8, 8), subplot_kw=dict(polar=True))
    palette = sns.color_palette('viridis', max(len(profile), 1))
    for color, (_, row) in zip(palette, profile.iterrows()):
        values = [0.0 if pd.isna(row[axis]) else float(row[axis]) for axis in config.RADAR_AXES]
        values += values[:1]
        ax.plot(angles, values, 'o-', linewidth=2, color=color, label=f"Round {int(row['round_number'])}")
        ax.fill(angles, values, alpha=0.1, color=color)

    ax.set_xticks(angles[:-1])
    ax.set_xticklabels(labels, fontsize=11, fontweight='bold')
    ax.set_ylim(0, 100)
    ax.set_yticks([25, 50, 75, 100])
    ax.set_yticklabels(['25%', '50%', '75%', '100%'], fontsize=9, color='gray')
    ax.set_title(title or 'Striking profile by round', fontsize=14, fontweight='bold', pad=30)
    ax.legend(loc='upper right', bbox_to_anchor=(1.3, 1.0), frameon=True)

    path = save_figure(fig, out_path)
    plt.close(fig)
    return path
