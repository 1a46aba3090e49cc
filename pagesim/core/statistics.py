# Copyright 2025 Ilya Makarov
#
# Licensed under the Business Source License 1.1
# Change Date: 2028-11-05
# Change License: Apache License 2.0

"""Outcome counters for the page-replacement engine."""

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict


@dataclass
class PageStatistics:
    """Tallies of page request outcomes"""
    first_load: int = 0
    page_hits: int = 0
    page_faults: int = 0
    aborted_jobs: int = 0
    total_requests: int = 0

    @property
    def hit_rate(self) -> float:
        served = self.first_load + self.page_hits + self.page_faults
        return self.page_hits / served if served > 0 else 0.0

    def increment_first_load(self) -> None:
        self.first_load += 1
        self.total_requests += 1

    def increment_page_hit(self) -> None:
        self.page_hits += 1
        self.total_requests += 1

    def increment_page_fault(self) -> None:
        self.page_faults += 1
        self.total_requests += 1

    def increment_aborted_jobs(self) -> None:
        self.aborted_jobs += 1
        self.total_requests += 1

    def reset(self) -> None:
        """
        Zero the outcome counters.

        total_requests is left untouched: it counts every request this
        instance has ever seen, across resets.
        """
        self.first_load = 0
        self.page_hits = 0
        self.page_faults = 0
        self.aborted_jobs = 0

    def snapshot(self) -> "PageStatistics":
        """Independent copy of the current counters"""
        return replace(self)

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result["hit_rate"] = self.hit_rate
        return result

    def __str__(self) -> str:
        return (
            f"First Load: {self.first_load} Page Hits: {self.page_hits} "
            f"Page Faults: {self.page_faults} Aborted Jobs: {self.aborted_jobs}"
        )
