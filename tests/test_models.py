# Copyright 2025 Ilya Makarov
#
# Licensed under the Business Source License 1.1
# Change Date: 2028-11-05
# Change License: Apache License 2.0

import dataclasses

import pytest

from pagesim.core.models import TERMINATOR, Job, Page
from pagesim.core.statistics import PageStatistics


def test_job_equality_and_hash():
    """Jobs compare on both fields"""
    assert Job(1, 2) == Job(1, 2)
    assert Job(1, 2) != Job(2, 1)
    assert len({Job(1, 2), Job(1, 2), Job(1, 3)}) == 2


def test_job_is_immutable():
    job = Job(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        job.page_id = 5


def test_terminator():
    assert Job(3, TERMINATOR).is_terminator
    assert TERMINATOR == -999
    assert not Job(3, 1).is_terminator


def test_page_identity_ignores_timestamp():
    """Pages of the same job are the same logical page"""
    first = Page(Job(1, 1), 0)
    later = Page(Job(1, 1), 17)
    assert first == later
    assert hash(first) == hash(later)
    assert first != Page(Job(1, 2), 0)
    assert {first: "resident"}[later] == "resident"


def test_page_timestamp_is_mutable():
    page = Page(Job(1, 1), 3)
    key = hash(page)
    page.timestamp = 10
    assert page.timestamp == 10
    assert hash(page) == key


def test_page_requires_job():
    with pytest.raises(TypeError):
        Page((1, 1), 0)


def test_string_forms():
    assert str(Job(4, 2)) == "#: 4, Page: 2"
    assert str(Page(Job(4, 2), 9)) == "Job: #: 4, Page: 2"


class TestPageStatistics:
    """Counter behaviour"""

    def test_increments_bump_total(self):
        stats = PageStatistics()
        stats.increment_first_load()
        stats.increment_page_hit()
        stats.increment_page_hit()
        stats.increment_page_fault()
        stats.increment_aborted_jobs()
        assert (stats.first_load, stats.page_hits, stats.page_faults, stats.aborted_jobs) == (1, 2, 1, 1)
        assert stats.total_requests == 5

    def test_reset_keeps_total_requests(self):
        stats = PageStatistics()
        stats.increment_first_load()
        stats.increment_page_fault()
        stats.reset()
        assert (stats.first_load, stats.page_hits, stats.page_faults, stats.aborted_jobs) == (0, 0, 0, 0)
        assert stats.total_requests == 2

    def test_hit_rate(self):
        stats = PageStatistics()
        assert stats.hit_rate == 0.0
        stats.increment_first_load()
        stats.increment_page_hit()
        stats.increment_page_hit()
        stats.increment_page_fault()
        assert stats.hit_rate == 0.5

    def test_snapshot_and_dict(self):
        stats = PageStatistics()
        stats.increment_page_hit()
        snapshot = stats.snapshot()
        stats.increment_page_hit()
        assert snapshot.page_hits == 1
        assert stats.to_dict()["page_hits"] == 2
        assert stats.to_dict()["hit_rate"] == 1.0

    def test_str(self):
        stats = PageStatistics(first_load=1, page_hits=2, page_faults=3, aborted_jobs=4)
        assert str(stats) == "First Load: 1 Page Hits: 2 Page Faults: 3 Aborted Jobs: 4"
