from benchmark import (
    MAX_PRECISION,
    MIN_PRECISION,
    REFERENCE_PI,
    Method,
    performance_score,
    performance_tier,
    throughput,
)


def format_usage(prog):
    lines = [f"Usage: {prog} <method> <precision>", "Methods:"]
    lines += [f"  {int(method)} - {method.label}" for method in Method]
    lines.append(f"Precision: decimal places ({MIN_PRECISION}-{MAX_PRECISION})")
    lines.append(f"Example: {prog} 3 10")
    return "\n".join(lines)


def format_report(config, result, reference=REFERENCE_PI):
    score = performance_score(result)
    lines = [
        "=== Results ===",
        f"Computed pi:    {result.value:.{config.precision}f}",
        f"Reference pi:   {reference:.15f}",
        f"Error:          {abs(result.value - reference):.2e}",
        f"Iterations:     {result.iterations}",
        f"Elapsed time:   {result.elapsed_seconds:.6f} s",
        f"CPU time:       {result.cpu_seconds:.6f} s",
        f"Speed:          {throughput(result):.2e} ops/s",
        "",
        "=== CPU performance ===",
        f"Score:          {score:.2f} MOPS (million operations/second)",
        f"Performance:    {performance_tier(score)}",
    ]
    return "\n".join(lines)


def print_report(config, result, reference=REFERENCE_PI):
    print("")
    print(format_report(config, result, reference))
