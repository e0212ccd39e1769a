"""
literal-support – Main entry point.

Minimal bootstrap script: configures logging, binds the process clock and
runs a quick parse self-check.
"""

from src.utils.literals import parse_float_literal, parse_integer_literal
from src.utils.logging import configure_logging
from src.utils.time import Stopwatch, get_clock


def main() -> None:
    """Print a bootstrap confirmation message."""
    configure_logging()
    clock = get_clock()
    watch = Stopwatch(clock)

    samples = [("0x7FFFFFFF", 16), ("0b1010", 2), ("-12345", 10), ("0xFFFFFFFF", 16)]
    for text, base in samples:
        print(f"parse_integer_literal({text!r}, {base}) = {parse_integer_literal(text, base)}")
    print(f"parse_float_literal('6.02e23') = {parse_float_literal('6.02e23')}")

    print(f"literal-support bootstrap complete in {watch.elapsed_ms():.3f} ms")


if __name__ == "__main__":
    main()
