from benchmark import EstimationResult, Method, RunConfig
from report import format_report, format_usage, print_report


def make_result():
    return EstimationResult(
        value=3.14159, iterations=10**9, elapsed_seconds=2.0, cpu_seconds=1.9
    )


def test_format_report():
    report = format_report(RunConfig(Method.SERIES, 3), make_result())
    lines = report.split("\n")
    assert lines[0] == "=== Results ==="
    assert "Computed pi:    3.142" in lines
    assert "Reference pi:   3.141592653589793" in lines
    assert "Error:          2.65e-06" in lines
    assert "Iterations:     1000000000" in lines
    assert "Elapsed time:   2.000000 s" in lines
    assert "CPU time:       1.900000 s" in lines
    assert "Speed:          5.00e+08 ops/s" in lines
    assert "=== CPU performance ===" in lines
    assert "Score:          500.00 MOPS (million operations/second)" in lines
    assert lines[-1] == "Performance:    excellent"


def test_format_report_precision():
    report = format_report(RunConfig(Method.FAST_CONVERGING, 1), make_result())
    assert "Computed pi:    3.1\n" in report


def test_print_report(capsys):
    print_report(RunConfig(Method.SERIES, 3), make_result())
    out = capsys.readouterr().out
    assert out == "\n" + format_report(RunConfig(Method.SERIES, 3), make_result()) + "\n"


def test_format_usage():
    usage = format_usage("pi_calculator")
    assert usage.startswith("Usage: pi_calculator <method> <precision>")
    assert "  1 - Leibniz series" in usage
    assert "  2 - Monte Carlo sampling" in usage
    assert "  3 - Machin formula" in usage
    assert "Precision: decimal places (1-15)" in usage
    assert usage.endswith("Example: pi_calculator 3 10")
