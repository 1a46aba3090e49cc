# Copyright 2025 Ilya Makarov
#
# Licensed under the Business Source License 1.1
# Change Date: 2028-11-05
# Change License: Apache License 2.0

"""
Job record reader.

Job files hold one "jobId,pageId" record per line; a page id of -999
terminates the job. Parsing is all-or-nothing: a single malformed record
fails the whole load.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .exceptions import JobFileNotFoundError, MalformedRecordError
from .models import Job

logger = logging.getLogger("pagesim.job_source")


def parse_record(
    line: str, line_number: Optional[int] = None, source: Optional[str] = None
) -> Job:
    """
    Parse a single "jobId,pageId" record.

    Raises:
        MalformedRecordError: If the record is not two comma-separated integers
    """
    fields = line.strip().split(",")
    if len(fields) != 2:
        raise MalformedRecordError(
            f"Expected 2 fields, got {len(fields)}",
            line_number=line_number,
            line=line.rstrip("\r\n"),
            source=source,
        )

    try:
        return Job(int(fields[0]), int(fields[1]))
    except ValueError as e:
        raise MalformedRecordError(
            "Record fields must be integers",
            line_number=line_number,
            line=line.rstrip("\r\n"),
            source=source,
            cause=e,
        )


def parse_records(lines: Iterable[str], source: Optional[str] = None) -> List[Job]:
    """Parse every non-blank line; fails on the first malformed record"""
    jobs = []
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        jobs.append(parse_record(line, line_number=line_number, source=source))
    return jobs


def load_jobs(file_path: Union[str, Path]) -> List[Job]:
    """
    Load job records from a file.

    Args:
        file_path: Path to a CSV job file

    Returns:
        Jobs in file order

    Raises:
        JobFileNotFoundError: If the file does not exist
        MalformedRecordError: If any record cannot be parsed or the file
            is not UTF-8 text
    """
    path = Path(file_path)
    if not path.is_file():
        raise JobFileNotFoundError(
            "The file could not be found. Please check the path.", path=str(path)
        )

    # utf-8-sig drops a leading byte order mark
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            jobs = parse_records(f, source=str(path))
    except UnicodeDecodeError as e:
        raise MalformedRecordError(
            "Job file is not valid UTF-8 text", source=str(path), cause=e
        ) from e

    logger.debug(f"Loaded {len(jobs)} records from {path}")
    return jobs
