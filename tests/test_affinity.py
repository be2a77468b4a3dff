import pytest

from zcore.affinity import Affinity, parse_threads_per_core


def test_parse_reads_first_cpu_cores_line():
    text = "processor\t: 0\ncpu cores\t: 4\nprocessor\t: 1\ncpu cores\t: 8\n"
    assert parse_threads_per_core(text) == 4


def test_parse_multi_digit_value():
    assert parse_threads_per_core("model name : x\ncpu cores : 16\n") == 16


@pytest.mark.parametrize("text", ["", "model name : x\nsiblings : 2\n", "cpu cores :\n"])
def test_parse_without_value_gives_zero(text):
    assert parse_threads_per_core(text) == 0


def test_affinity_counts_are_consistent():
    affinity = Affinity()
    assert affinity.core_count >= 1
    assert affinity.threads_per_core >= 1
    assert affinity.thread_count == affinity.threads_per_core * affinity.core_count


def test_thread_count_for_each_core():
    affinity = Affinity()
    counts = [affinity.thread_count_for_core(core) for core in range(affinity.core_count)]
    assert sum(counts) == affinity.thread_count


@pytest.mark.parametrize("offset", [-1, 0])
def test_thread_count_for_invalid_core(offset):
    affinity = Affinity()
    core = -1 if offset < 0 else affinity.core_count
    with pytest.raises(IndexError):
        affinity.thread_count_for_core(core)


def test_set_succeeds():
    affinity = Affinity()
    assert affinity.set(0, 0) is True