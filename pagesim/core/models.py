# Copyright 2025 Ilya Makarov
#
# Licensed under the Business Source License 1.1
# Change Date: 2028-11-05
# Change License: Apache License 2.0

"""
Value records for the paging simulation.

A Job is one (job, page) access request. A Page is a stamped access of a
Job; two pages are the same logical page when their jobs are equal,
whatever their timestamps.
"""

from dataclasses import dataclass, field

# Reserved page id meaning "release all memory held by the job"
TERMINATOR = -999


@dataclass(frozen=True)
class Job:
    """Page access request for a job"""
    job_id: int
    page_id: int

    @property
    def is_terminator(self) -> bool:
        return self.page_id == TERMINATOR

    def __str__(self) -> str:
        return f"#: {self.job_id}, Page: {self.page_id}"


@dataclass(unsafe_hash=True)
class Page:
    """Job page stamped with the logical time of its access"""
    job: Job
    timestamp: int = field(default=0, compare=False)

    def __post_init__(self):
        if not isinstance(self.job, Job):
            raise TypeError(f"Page requires a Job, got {type(self.job).__name__}")

    def __str__(self) -> str:
        return f"Job: {self.job}"
