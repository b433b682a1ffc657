"""Plain-text rendering of allocation summaries."""

from typing import List

from .summary import AllocationSummary

_RULE = "-" * 96
_ROW = "| {:<20} | {:<10} | {:<15} | {:<15} | {:<20} |"


def _fmt_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


def format_header(summary: AllocationSummary) -> str:
    return (
        f"Total Bandwidth: {summary.capacity_initial:.2f} | "
        f"Bandwidth Used: {summary.capacity_used:.2f} | "
        f"Total Priority Value: {summary.total_value:.2f}"
    )


def format_table(summary: AllocationSummary) -> str:
    """Render the summary as a fixed-width table in processing order.

    Share of Total is the allocated amount as a percentage of the initial
    capacity. The number is left-aligned in a 20-wide field with the percent
    sign after it.
    """
    lines: List[str] = [
        format_header(summary),
        _RULE,
        _ROW.format("Task Name", "Priority", "Demand", "Allocated", "Share of Total (%)"),
        _RULE,
    ]
    for result in summary.results:
        request = result.request
        lines.append(_ROW.format(
            request.name,
            _fmt_number(request.priority),
            f"{request.demand:.2f}",
            f"{result.allocated:.2f}",
            f"{result.share * 100.0:<20.2f}%",
        ))
    lines.append(_RULE)
    return "\n".join(lines)
