# Copyright 2025 Ilya Makarov
#
# Licensed under the Business Source License 1.1
# Change Date: 2028-11-05
# Change License: Apache License 2.0

"""
Two-tier LRU page-replacement engine.

Pages live in a fast physical tier or a slower swap tier, never both.
Every touch moves a page to the back of its tier, so the front of a tier
is always the next candidate for demotion:

- first load:  page goes to the back of physical memory; if physical is
               full its front page is demoted to swap first
- hit:         page is already in physical memory and moves to the back
- fault:       page is in swap; it is promoted to the back of physical
               memory, demoting physical's front page if needed
- abort:       a page that is in neither tier arrives while both tiers
               are full; the job is evicted from memory and its
               remaining records are skipped

Example usage:
    manager = PageManager(memory_capacity=2, swap_capacity=1)
    manager.queue_jobs([Job(1, 1), Job(2, 1), Job(3, 1)])
    manager.process()
    manager.physical_contents()   # [Page(Job(2, 1)), Page(Job(3, 1))]
"""

import logging
from collections import deque
from typing import Any, Deque, Dict, FrozenSet, Iterable, List, Set

from .linked_list import BoundedList
from .models import Job, Page
from .statistics import PageStatistics

logger = logging.getLogger("pagesim.page_manager")


class PageManager:
    """
    Drives a physical and a swap BoundedList through load/hit/fault/abort
    transitions for a queue of job page requests.
    """

    def __init__(self, memory_capacity: int, swap_capacity: int):
        """
        Args:
            memory_capacity: Pages the physical tier can hold
            swap_capacity: Pages the swap tier can hold
        """
        self._physical_memory: BoundedList[Page] = BoundedList(memory_capacity)
        self._swap_memory: BoundedList[Page] = BoundedList(swap_capacity)
        self._job_queue: Deque[Job] = deque()
        self._job_lookup: Dict[int, List[Page]] = {}
        self._aborted_jobs: Set[int] = set()
        self._last_timestamp = 0
        self._job_count = 0
        self._transaction_count = 0
        self.statistics = PageStatistics()

    # =========================================================================
    # Read-only state
    # =========================================================================

    @property
    def memory_capacity(self) -> int:
        return self._physical_memory.capacity

    @property
    def swap_capacity(self) -> int:
        return self._swap_memory.capacity

    @property
    def job_count(self) -> int:
        """Distinct job ids queued (terminator records excluded)"""
        return self._job_count

    @property
    def transaction_count(self) -> int:
        """Records queued, terminators included"""
        return self._transaction_count

    @property
    def pending_count(self) -> int:
        return len(self._job_queue)

    @property
    def is_memory_full(self) -> bool:
        return self._physical_memory.is_full and self._swap_memory.is_full

    @property
    def is_physical_memory_full(self) -> bool:
        return self._physical_memory.is_full

    @property
    def is_swap_memory_full(self) -> bool:
        return self._swap_memory.is_full

    @property
    def aborted_jobs(self) -> FrozenSet[int]:
        return frozenset(self._aborted_jobs)

    def is_aborted(self, job_id: int) -> bool:
        return job_id in self._aborted_jobs

    def physical_contents(self) -> List[Page]:
        """Physical memory pages, least to most recently used"""
        return self._physical_memory.values()

    def swap_contents(self) -> List[Page]:
        """Swap memory pages, least to most recently used"""
        return self._swap_memory.values()

    def pages_for(self, job_id: int) -> List[Page]:
        """Every page allocated for a job since the last reset"""
        return list(self._job_lookup.get(job_id, []))

    def statistics_snapshot(self) -> PageStatistics:
        return self.statistics.snapshot()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "memory_capacity": self.memory_capacity,
            "swap_capacity": self.swap_capacity,
            "jobs": self._job_count,
            "transactions": self._transaction_count,
            "statistics": self.statistics.to_dict(),
            "aborted_jobs": sorted(self._aborted_jobs),
            "physical_memory": [_page_to_dict(p) for p in self.physical_contents()],
            "swap_memory": [_page_to_dict(p) for p in self.swap_contents()],
        }

    # =========================================================================
    # Queueing
    # =========================================================================

    def queue_job(self, job: Job) -> None:
        """Add a record to the pending queue"""
        self._job_queue.append(job)
        self._transaction_count += 1

        if job.is_terminator:
            return

        if job.job_id not in self._job_lookup:
            self._job_lookup[job.job_id] = []
            self._job_count += 1

    def queue_jobs(self, jobs: Iterable[Job]) -> None:
        for job in jobs:
            self.queue_job(job)

    # =========================================================================
    # Processing
    # =========================================================================

    def process(self) -> int:
        """
        Drain the pending queue in FIFO order.

        Returns:
            Number of records taken off the queue
        """
        drained = 0
        while self._job_queue:
            job = self._job_queue.popleft()
            drained += 1

            if job.job_id in self._aborted_jobs:
                continue

            if job.is_terminator:
                self.unload_memory(job.job_id)
                continue

            page = Page(job, self._last_timestamp)
            self._last_timestamp += 1
            self._job_lookup.setdefault(job.job_id, []).append(page)
            self.load_page(page)

        logger.info(
            f"Processed {drained} records: {self.statistics} "
            f"(physical {len(self._physical_memory)}/{self.memory_capacity}, "
            f"swap {len(self._swap_memory)}/{self.swap_capacity})"
        )
        return drained

    def load_page(self, page: Page) -> None:
        """Route one page access through the placement decision"""
        if not self._is_in_memory(page):
            # A physical tier of capacity zero can never take the page
            if self.is_memory_full or self.memory_capacity == 0:
                self._abort(page)
                return

            self.statistics.increment_first_load()
            if self._physical_memory.is_full:
                self._move_to_swap()
            self._physical_memory.append(page)
            logger.debug(f"First load: {page}")
        elif page in self._physical_memory:
            self.statistics.increment_page_hit()
            handle = self._physical_memory.find(page)
            self._physical_memory.move_to_back(handle)
            logger.debug(f"Page hit: {page}")
        else:
            self.statistics.increment_page_fault()
            self._move_from_swap(page)
            logger.debug(f"Page fault: {page}")

    def unload_memory(self, job_id: int) -> None:
        """Remove every page recorded for a job from whichever tier holds it"""
        for page in self._job_lookup.get(job_id, []):
            self._physical_memory.remove_by_value(page)
            self._swap_memory.remove_by_value(page)
        logger.debug(f"Unloaded memory for job {job_id}")

    def reset(self) -> None:
        """Return to the freshly constructed state (capacities unchanged)"""
        self._swap_memory.clear()
        self._physical_memory.clear()
        self._job_queue.clear()
        self._job_lookup.clear()
        self._aborted_jobs.clear()
        self.statistics.reset()
        self._last_timestamp = 0
        self._job_count = 0
        self._transaction_count = 0

    # =========================================================================
    # Internals
    # =========================================================================

    def _is_in_memory(self, page: Page) -> bool:
        return page in self._physical_memory or page in self._swap_memory

    def _abort(self, page: Page) -> None:
        job_id = page.job.job_id
        self.statistics.increment_aborted_jobs()
        self._aborted_jobs.add(job_id)
        self.unload_memory(job_id)
        logger.warning(f"Out of memory. Job: {job_id} Page: {page.job.page_id}")

    def _move_to_swap(self) -> None:
        """Demote the least recently used physical page"""
        handle = self._physical_memory.first
        page = self._physical_memory.value_at(handle)
        self._swap_memory.append(page)
        self._physical_memory.remove(handle)

    def _move_from_swap(self, page: Page) -> None:
        """
        Promote a page from swap to the back of physical memory.

        The page leaves swap before physical's front page is demoted, so
        the two are exchanged even when both tiers are full.
        """
        self._swap_memory.remove_by_value(page)
        if self._physical_memory.is_full:
            self._move_to_swap()
        self._physical_memory.append(page)


def _page_to_dict(page: Page) -> Dict[str, int]:
    return {
        "job_id": page.job.job_id,
        "page_id": page.job.page_id,
        "timestamp": page.timestamp,
    }
