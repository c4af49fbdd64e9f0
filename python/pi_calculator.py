#!/usr/bin/env python3
import sys

from benchmark import parse_args, run_benchmark
from errors import ArgumentCountError, MethodRangeError, PrecisionRangeError
from report import format_usage, print_report


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    usage = format_usage(sys.argv[0])

    try:
        config = parse_args(argv)
    except ArgumentCountError:
        print(usage)
        sys.exit(1)
    except MethodRangeError as e:
        print(f"Error: {e}")
        print(usage)
        sys.exit(1)
    except PrecisionRangeError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print("Starting pi computation...")
    print(f"Method: {config.method.label}")

    result = run_benchmark(config)
    print_report(config, result)


if __name__ == "__main__":
    main()
