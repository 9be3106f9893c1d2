"""Tests for the storage-cost estimator."""

import pytest

from tasksweep.adapters.sample_tasks import SampleTaskSource
from tasksweep.core.footprint import DEFAULT_MODEL, FootprintModel, estimate_memory


@pytest.fixture
def sample_tasks():
    return SampleTaskSource().fetch_all()


class TestFootprintModel:
    def test_default_bytes_per_task(self):
        # 64 overhead + 3 numbers * 8 + 4 strings * 30
        assert DEFAULT_MODEL.bytes_per_task == 208

    def test_custom_model(self):
        model = FootprintModel(object_overhead=16, bytes_per_number=4, bytes_per_string=10)
        assert model.bytes_per_task == 16 + 12 + 40


class TestEstimateMemory:
    def test_sample_day(self, sample_tasks):
        estimate = estimate_memory(sample_tasks)
        assert estimate.task_count == 10
        assert estimate.bytes_per_task == 208
        assert estimate.total_bytes == 10 * 208 + 32 + 10 * 8
        assert estimate.total_kb == "2.14"

    def test_empty_is_collection_overhead(self):
        estimate = estimate_memory([])
        assert estimate.task_count == 0
        assert estimate.total_bytes == 32
        assert estimate.total_kb == "0.03"

    def test_strictly_increasing(self, sample_tasks):
        totals = [estimate_memory(sample_tasks[:n]).total_bytes for n in range(len(sample_tasks) + 1)]
        assert all(a < b for a, b in zip(totals, totals[1:]))

    def test_bytes_per_task_constant(self, sample_tasks):
        per_task = {estimate_memory(sample_tasks[:n]).bytes_per_task for n in range(len(sample_tasks) + 1)}
        assert per_task == {208}

    def test_custom_model(self, sample_tasks):
        model = FootprintModel(collection_overhead=0, pointer_size=0)
        estimate = estimate_memory(sample_tasks, model)
        assert estimate.total_bytes == 10 * 208

    def test_total_kb_two_decimals(self, sample_tasks):
        estimate = estimate_memory(sample_tasks[:3])
        assert estimate.total_kb == f"{estimate.total_bytes / 1024:.2f}"
        assert len(estimate.total_kb.split(".")[1]) == 2
