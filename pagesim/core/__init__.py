# Copyright 2025 Ilya Makarov
#
# Licensed under the Business Source License 1.1
# Change Date: 2028-11-05
# Change License: Apache License 2.0

"""
PageSim Core - Init file

Exports the paging engine, its data structures and the I/O helpers
around it.
"""

from .exceptions import (
    CapacityExceededError,
    ConfigError,
    ConfigFileError,
    ConfigValidationError,
    InvalidHandleError,
    JobFileNotFoundError,
    JobSourceError,
    ListError,
    MalformedRecordError,
    PageSimError,
)
from .job_source import load_jobs, parse_record, parse_records
from .linked_list import BoundedList
from .models import TERMINATOR, Job, Page
from .page_manager import PageManager
from .report import build_framed_header, render_report, report_dict
from .statistics import PageStatistics

__all__ = [
    # Engine
    "PageManager",
    "BoundedList",
    "PageStatistics",
    "Job",
    "Page",
    "TERMINATOR",
    # I/O
    "load_jobs",
    "parse_record",
    "parse_records",
    "build_framed_header",
    "render_report",
    "report_dict",
    # Errors
    "PageSimError",
    "ConfigError",
    "ConfigFileError",
    "ConfigValidationError",
    "ListError",
    "CapacityExceededError",
    "InvalidHandleError",
    "JobSourceError",
    "JobFileNotFoundError",
    "MalformedRecordError",
]
