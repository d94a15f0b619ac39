"""Tests for basicstats.report.Report."""

from basicstats.report import Report


def _report() -> Report:
    return Report(
        size=5,
        capacity=20,
        mean=3.0,
        median=3.0,
        mode=1.0,
        stddev=1.4142135,
        harmonic_mean=2.1897810,
    )


def test_unused_capacity():
    assert _report().unused_capacity == 15


def test_format_report_exact_lines():
    assert _report().format_report() == [
        "Results:",
        "--------",
        "Num values: 5",
        "Mean: 3.000",
        "Median: 3.000",
        "Mode: 1.000",
        "Standard Deviation: 1.414",
        "Harmonic Mean: 2.190",
        "Unused array capacity: 15",
    ]


def test_format_report_rounds_to_three_decimals():
    r = _report()
    r.mean = -0.0004
    r.median = 1234.56789
    lines = r.format_report()
    assert "Mean: -0.000" in lines
    assert "Median: 1234.568" in lines
