"""
Plots of problems and solutions.

Coordinates are converted to floats here and only here; nothing drawn feeds
back into a check.
"""

from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.collections import LineCollection, PatchCollection
from matplotlib.patches import Polygon as MplPolygon

from geometry import Edge, Polygon, Vertex
from validator import Problem, Solution

COLORS = {
    'positive': '#377eb8',
    'negative': '#e41a1c',
    'skeleton': '#333333',
    'facet': '#4daf4a',
    'destination': '#ff7f00',
}


def to_array(vertices: Sequence[Vertex]) -> np.ndarray:
    return np.array([(float(v.x), float(v.y)) for v in vertices], dtype=float).reshape(-1, 2)


def _edge_segments(edges: Sequence[Edge]) -> np.ndarray:
    return np.array(
        [[(float(e.v1.x), float(e.v1.y)), (float(e.v2.x), float(e.v2.y))] for e in edges],
        dtype=float,
    ).reshape(-1, 2, 2)


def _patches(polygons: Sequence[Polygon]):
    return [MplPolygon(to_array(p.vertices), closed=True) for p in polygons if len(p) >= 3]


def plot_problem(problem: Problem, ax) -> None:
    """Positive polygons filled, negative ones hatched, skeleton dashed."""
    ax.add_collection(PatchCollection(
        _patches(problem.pos_polys), alpha=0.4, facecolor=COLORS['positive'],
        edgecolor='black', linewidth=1.0,
    ))
    ax.add_collection(PatchCollection(
        _patches(problem.neg_polys), alpha=0.6, facecolor='white', hatch='//',
        edgecolor=COLORS['negative'], linewidth=1.0,
    ))
    if problem.skeleton:
        ax.add_collection(LineCollection(
            _edge_segments(problem.skeleton), colors=COLORS['skeleton'],
            linestyles='dashed', linewidths=0.8,
        ))
    ax.autoscale_view()
    ax.set_aspect('equal')
    ax.set_title('Problem')


def plot_solution(solution: Solution, axes) -> None:
    """Draw the source (facets and boundary) and the destination side by side."""
    ax_src, ax_dst = axes

    ax_src.add_collection(PatchCollection(
        _patches(solution.facets), alpha=0.3, facecolor=COLORS['facet'],
        edgecolor='#333333', linewidth=0.5,
    ))
    src = to_array(solution.source)
    if len(src):
        ax_src.plot(src[:, 0], src[:, 1], 'k-', linewidth=1.5)
        ax_src.scatter(src[:, 0], src[:, 1], c='black', s=15, zorder=5)
    ax_src.plot([0, 1, 1, 0, 0], [0, 0, 1, 1, 0], ':', color='gray', linewidth=0.8)
    ax_src.set_xlim(-0.05, 1.05)
    ax_src.set_ylim(-0.05, 1.05)
    ax_src.set_aspect('equal')
    ax_src.set_title(f'Source ({len(solution.facets)} facets)')

    dst = to_array(solution.destination)
    if len(dst):
        ax_dst.scatter(dst[:, 0], dst[:, 1], c=COLORS['destination'], s=15, zorder=5)
    ax_dst.set_aspect('equal')
    ax_dst.set_title('Destination vertices')


def save_figure(
    path,
    problem: Optional[Problem] = None,
    solution: Optional[Solution] = None,
) -> Path:
    """Render whatever is given into a single PNG and return its path."""
    if problem is None and solution is None:
        raise ValueError("Nothing to plot: give a problem, a solution or both")

    n_axes = (1 if problem is not None else 0) + (2 if solution is not None else 0)
    fig, axes = plt.subplots(1, n_axes, figsize=(5 * n_axes, 5), squeeze=False)
    axes = axes[0]

    idx = 0
    if problem is not None:
        plot_problem(problem, axes[idx])
        idx += 1
    if solution is not None:
        plot_solution(solution, axes[idx:idx + 2])

    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    fig.savefig(out, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return out
