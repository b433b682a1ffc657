"""Total value as a function of capacity."""

from typing import Optional, Tuple, TYPE_CHECKING

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

from ..config import get_config

if TYPE_CHECKING:
    from ..problem import AllocationProblem


def compute_value_curve(
    problem: 'AllocationProblem',
    capacity_range: Tuple[float, float],
    n_points: Optional[int] = None,
) -> pd.DataFrame:
    """Evaluate the problem's policy across a range of capacities.

    Args:
        problem: Allocation problem whose requests and policy are kept fixed
        capacity_range: (min, max) capacities, both >= 0
        n_points: Number of capacities to evaluate (default: configured curve_points)

    Returns:
        DataFrame with columns:
        - capacity: capacity evaluated
        - total_value: total value at this capacity
        - capacity_used: capacity handed out
        - n_fulfilled: number of fully served requests
        - marginal_value: d(total_value)/d(capacity), the density of the
          request being filled at that point
        - value_gain: total_value - value at the problem's own capacity
    """
    if n_points is None:
        n_points = get_config().curve_points
    if n_points < 2:
        raise ValueError(f"n_points must be >= 2, got {n_points}")
    if capacity_range[0] < 0 or capacity_range[1] < capacity_range[0]:
        raise ValueError(f"Invalid capacity_range: {capacity_range}")

    capacities = np.linspace(capacity_range[0], capacity_range[1], n_points)

    baseline_value = problem.evaluate().total_value

    rows = []
    for capacity in capacities:
        summary = problem.with_capacity(float(capacity)).evaluate()
        rows.append({
            'capacity': float(capacity),
            'total_value': summary.total_value,
            'capacity_used': summary.capacity_used,
            'n_fulfilled': summary.n_fulfilled,
        })

    df = pd.DataFrame(rows)
    if capacity_range[1] > capacity_range[0]:
        df['marginal_value'] = np.gradient(df['total_value'].to_numpy(), df['capacity'].to_numpy())
    else:
        df['marginal_value'] = 0.0
    df['value_gain'] = df['total_value'] - baseline_value
    return df


def plot_value_curve(
    problem: 'AllocationProblem',
    capacity_range: Tuple[float, float],
    n_points: Optional[int] = None,
    ax: Optional[plt.Axes] = None,
    figsize: tuple = (10, 6),
    xlabel: str = 'Capacity',
    ylabel: str = 'Total Value',
    show_gain: bool = False,
    show_capacity: bool = True,
    color: str = '#2E86AB',
    linestyle: str = '-',
    label: Optional[str] = None,
) -> plt.Axes:
    """Plot total value vs capacity.

    Args:
        problem: Allocation problem to sweep
        capacity_range: (min, max) capacities
        n_points: Number of capacities to evaluate
        ax: Matplotlib axes (creates new if None)
        figsize: Figure size if creating new axes
        xlabel: X-axis label
        ylabel: Y-axis label
        show_gain: If True, plot value gain over the problem's own capacity
        show_capacity: If True, mark the problem's own capacity
        label: Legend label (default: policy repr)

    Returns:
        Matplotlib axes with the plot
    """
    created_fig = False
    if ax is None:
        plt.rcParams['font.size'] = 14
        plt.rcParams['axes.labelsize'] = 14
        plt.rcParams['legend.fontsize'] = 12
        fig, ax = plt.subplots(figsize=figsize)
        created_fig = True

    df = compute_value_curve(problem, capacity_range, n_points)

    y_col = 'value_gain' if show_gain else 'total_value'
    ax.plot(
        df['capacity'], df[y_col],
        linewidth=3, color=color, linestyle=linestyle,
        label=label if label else repr(problem.policy),
    )

    if show_gain:
        ax.axhline(y=0, color='black', linestyle='--', linewidth=1.5, alpha=0.5)

    if show_capacity:
        ax.axvline(
            x=problem.constraint.get_capacity(),
            color='grey', linestyle=':', linewidth=1.5,
        )

    ax.set_xlim(capacity_range[0], capacity_range[1])
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.grid(alpha=0.3)
    ax.legend()

    if created_fig:
        plt.tight_layout()

    return ax
