# Copyright 2025 Ilya Makarov
#
# Licensed under the Business Source License 1.1
# Change Date: 2028-11-05
# Change License: Apache License 2.0

"""Text and JSON renderings of a simulation's results."""

from typing import Any, Dict, Iterable, List

from .models import Page
from .page_manager import PageManager
from .statistics import PageStatistics

TITLE = "Page Replacement Simulation [LRU]"
LABEL_WIDTH = 15


def build_framed_header(
    header: str, border_width: int = 80, frame_character: str = "="
) -> str:
    """
    Frame text between two borders, centred.

    Text longer than the border is truncated and ends with "...".
    """
    if len(header) > border_width:
        header = header[: max(border_width - 5, 0)] + "..."
    start = max((border_width - len(header)) // 2, 0)
    border = frame_character * border_width
    return "\n".join([border, " " * start + header, border])


def format_statistics(stats: PageStatistics) -> str:
    rows = [
        ("First Load", stats.first_load),
        ("Page Hits", stats.page_hits),
        ("Page Faults", stats.page_faults),
        ("Aborted Jobs", stats.aborted_jobs),
    ]
    return "\n".join(f"{label.ljust(LABEL_WIDTH)}: {value}" for label, value in rows)


def format_tier(title: str, pages: Iterable[Page]) -> str:
    """Framed listing of a tier, front (LRU) first, terminated by END"""
    lines = [build_framed_header(title)]
    lines.extend(str(page) for page in pages)
    lines.append("END")
    return "\n".join(lines)


def render_report(manager: PageManager) -> str:
    sections: List[str] = [
        build_framed_header(TITLE),
        f"Jobs: {manager.job_count}  Transactions: {manager.transaction_count}",
        build_framed_header("Statistics", LABEL_WIDTH, "*"),
        format_statistics(manager.statistics),
        format_tier("Physical Memory", manager.physical_contents()),
        format_tier("Swap Memory", manager.swap_contents()),
    ]
    return "\n".join(sections)


def report_dict(manager: PageManager) -> Dict[str, Any]:
    result = {"title": TITLE}
    result.update(manager.to_dict())
    return result
