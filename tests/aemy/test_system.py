from datetime import timedelta

import pytest

from aemy import system


@pytest.mark.parametrize(
    "delta, expected",
    [
        (timedelta(0), "0s"),
        (timedelta(seconds=59), "59s"),
        (timedelta(minutes=3), "3m 0s"),
        (timedelta(hours=2, seconds=5), "2h 5s"),
        (timedelta(days=1, hours=2, minutes=3, seconds=4), "1d 2h 3m 4s"),
    ],
)
def test_format_duration(delta, expected):
    assert system.format_duration(delta) == expected


def test_cpu_model_reads_model_name(tmp_path):
    cpuinfo = tmp_path / "cpuinfo"
    cpuinfo.write_text("processor\t: 0\nmodel name\t: Test CPU @ 3.00GHz\n")

    assert system.cpu_model(cpuinfo) == "Test CPU @ 3.00GHz"


def test_cpu_model_unavailable(tmp_path):
    assert system.cpu_model(tmp_path / "missing") == "N/A"
    empty = tmp_path / "empty"
    empty.write_text("processor\t: 0\n")
    assert system.cpu_model(empty) == "N/A"


@pytest.mark.parametrize(
    "hour, word",
    [(5, "Morning"), (10, "Morning"), (11, "Afternoon"), (15, "Evening"), (18, "Night"), (2, "Night")],
)
def test_greeting(hour, word):
    assert word in system.greeting(hour)


def test_uptime_is_non_negative():
    assert system.uptime() >= timedelta(0)
