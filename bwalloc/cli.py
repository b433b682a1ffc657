"""Command-line entry point: python -m bwalloc."""

import argparse
from typing import Callable, List, Optional, Sequence, Tuple

from .constraints import CapacityConstraint
from .data import Request, RequestData
from .logger import configure_logging, get_logger
from .problem import AllocationProblem
from .report import format_table

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 1

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def prompt_capacity(input_fn: Callable[[str], str] = input) -> float:
    return float(input_fn("Enter the Total Available Bandwidth (e.g., 1000 Mbps): "))


def prompt_requests(input_fn: Callable[[str], str] = input) -> List[Request]:
    """Read requests interactively.

    Asks for the number of competing tasks, then name, demand and priority
    for each. A count <= 0 yields no requests.

    Raises:
        ValueError: If a number cannot be parsed
    """
    count = int(input_fn("Enter the number of competing users/tasks: "))
    requests = []
    for i in range(max(count, 0)):
        print(f"Task #{i + 1}:")
        name = input_fn("  Name: ").strip()
        demand = float(input_fn("  Demand (Bandwidth requested): "))
        priority = float(input_fn("  Priority (e.g., 1-100): "))
        requests.append(Request(name=name, demand=demand, priority=priority))
    return requests


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bwalloc",
        description="Allocate bandwidth across tasks by priority per unit demand.",
    )
    parser.add_argument(
        "--capacity", type=float, default=None,
        help="Total available bandwidth (prompted for if omitted)",
    )
    parser.add_argument(
        "--requests", default=None, metavar="CSV",
        help="CSV file with name, demand, priority columns (interactive if omitted)",
    )
    parser.add_argument("--name-col", default="name")
    parser.add_argument("--demand-col", default="demand")
    parser.add_argument("--priority-col", default="priority")
    parser.add_argument(
        "--compare", action="store_true",
        help="Also report the demand-proportional baseline",
    )
    parser.add_argument(
        "--plot", default=None, metavar="PATH",
        help="Save a total value vs capacity curve to PATH",
    )
    parser.add_argument(
        "--log-level", default=None, type=str.upper, choices=LOG_LEVELS,
        help="Logging level (default: BWALLOC_LOG_LEVEL or WARNING)",
    )
    return parser


def _load_inputs(
    args: argparse.Namespace,
    input_fn: Callable[[str], str],
) -> Tuple[float, List[Request]]:
    if args.requests is not None:
        data = RequestData.from_csv(
            args.requests,
            name_col=args.name_col,
            demand_col=args.demand_col,
            priority_col=args.priority_col,
        )
        requests = data.requests
        capacity = args.capacity if args.capacity is not None else prompt_capacity(input_fn)
    else:
        capacity = args.capacity if args.capacity is not None else prompt_capacity(input_fn)
        requests = prompt_requests(input_fn)
    return capacity, requests


def _save_plot(problem: AllocationProblem, path: str) -> None:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    from .comparison import plot_value_curve

    capacity = problem.constraint.get_capacity()
    total_demand = sum(r.demand for r in problem.requests)
    upper = max(capacity, total_demand) or 1.0
    ax = plot_value_curve(problem, (0.0, upper))
    ax.figure.savefig(path)
    plt.close(ax.figure)
    logger.info("Saved value curve to %s", path)


def main(
    argv: Optional[Sequence[str]] = None,
    input_fn: Callable[[str], str] = input,
) -> int:
    """Run the allocator and print the results table.

    Returns:
        Process exit code: 0 on success, 1 on invalid input
    """
    args = build_parser().parse_args(argv)
    try:
        configure_logging(args.log_level, force=args.log_level is not None)
    except ValueError as exc:
        print(f"Error: {exc}")
        return EXIT_INVALID_INPUT

    print("--- Bandwidth Allocation (Fractional Knapsack) ---")
    try:
        capacity, requests = _load_inputs(args, input_fn)
        if not requests:
            print("No tasks to allocate. Exiting.")
            return EXIT_OK
        problem = AllocationProblem(
            requests=requests,
            constraint=CapacityConstraint(capacity),
        )
        summary = problem.evaluate()
    except (ValueError, OSError, EOFError) as exc:
        logger.error("Invalid input: %s", exc)
        print(f"Error: {exc}")
        return EXIT_INVALID_INPUT

    print()
    print("--- Final Bandwidth Allocation Table ---")
    print()
    print(format_table(summary))

    if args.compare:
        comparison = problem.compare_to_proportional()
        ratio = comparison["value_ratio"]
        print(
            f"Proportional baseline value: {comparison['baseline_value']:.2f} | "
            f"Ratio: {'n/a' if ratio is None else f'{ratio:.2f}'}"
        )

    if args.plot:
        _save_plot(problem, args.plot)

    return EXIT_OK
