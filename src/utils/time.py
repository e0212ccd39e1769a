"""
Millisecond timestamp sources for timing measurements.

This module answers one question: "how many milliseconds have passed?" It
provides a Clock abstraction with three implementations and a process-wide
accessor that picks the best available source exactly once.

**Conceptual**: Code that measures durations should depend on a Clock rather
than calling time.* directly. In production the process clock is bound to a
high-resolution monotonic timer when the host exposes one, falling back to the
wall clock otherwise. In tests a FakeClock makes elapsed time deterministic.

**Monotonicity**: MonotonicClock never goes backwards. WallClock follows the
system clock and can regress if the system time is adjusted, so callers must
not assume strict monotonicity when it is bound.

Timestamps are opaque: only differences between values taken in the same
process run are meaningful.
"""

import threading
import time
from typing import Any, Callable, Optional, Protocol

from src.config.settings import CLOCK_SOURCES, get_settings
from src.utils.logging import get_logger

_NS_PER_MS = 1_000_000

logger = get_logger(__name__)


class Clock(Protocol):
    """
    Abstract millisecond time source protocol.

    **Usage**: Consumers should accept a Clock (constructor or function
    parameter) and call clock.now() when they need a timestamp. Pass nothing
    to fall back on the process clock from get_clock().
    """

    def now(self) -> float:
        """Return the current timestamp in milliseconds (opaque origin)."""
        ...


class MonotonicClock:
    """Clock backed by time.perf_counter_ns() (high resolution, never decreasing)."""

    source = "monotonic"

    def now(self) -> float:
        return time.perf_counter_ns() / _NS_PER_MS


class WallClock:
    """
    Clock backed by the system wall clock (milliseconds since the Unix epoch).

    Used when no high-resolution monotonic timer is available. Values can go
    backwards if the system time is changed while the process runs.
    """

    source = "wall"

    def now(self) -> float:
        return time.time_ns() / _NS_PER_MS


class FakeClock:
    """
    Manually driven clock for deterministic tests.

    **Usage**:
        clock = FakeClock(start_ms=1000.0)
        watch = Stopwatch(clock)
        clock.advance(250.0)
        watch.elapsed_ms()  # 250.0
    """

    source = "fake"

    def __init__(self, start_ms: float = 0.0):
        self._now_ms = float(start_ms)

    def now(self) -> float:
        return self._now_ms

    def advance(self, ms: float) -> None:
        """
        Move the clock forward by ms milliseconds.

        Raises:
            ValueError: If ms is negative (a fake clock is monotonic too).
        """
        if ms < 0:
            raise ValueError(f"Cannot advance clock backwards, got: {ms}")
        self._now_ms += ms


def has_high_resolution_timer(
    probe: Callable[[str], Any] = time.get_clock_info,
) -> bool:
    """
    Report whether the host exposes a monotonic high-resolution timer.

    **Conceptual**: This is the capability check behind clock selection. It is
    side-effect free, so repeating it (e.g. from racing threads) is harmless.
    The probe is injectable so tests can simulate hosts with and without the
    capability.

    Args:
        probe: Callable returning clock info (with a ``monotonic`` attribute)
               for a clock name. Defaults to time.get_clock_info.

    Returns:
        True if "perf_counter" is available and monotonic.
    """
    try:
        info = probe("perf_counter")
    except ValueError:
        # get_clock_info raises ValueError for clocks the platform lacks
        return False
    return bool(getattr(info, "monotonic", False))


def select_clock(
    source: str = "auto",
    probe: Callable[[str], Any] = time.get_clock_info,
) -> Clock:
    """
    Build the clock for a configured source.

    Args:
        source: "auto" (monotonic if available, else wall), "monotonic" or "wall".
        probe: Capability probe passed to has_high_resolution_timer().

    Returns:
        MonotonicClock or WallClock instance.

    Raises:
        ValueError: If source is not one of CLOCK_SOURCES.
    """
    if source not in CLOCK_SOURCES:
        raise ValueError(
            f"Unknown clock source: {source!r}. "
            f"Expected one of: {', '.join(CLOCK_SOURCES)}"
        )
    if source == "monotonic":
        return MonotonicClock()
    if source == "wall":
        return WallClock()
    return MonotonicClock() if has_high_resolution_timer(probe) else WallClock()


# Process-wide clock binding, set once by get_clock() or explicitly by set_clock().
_process_clock: Optional[Clock] = None
_process_clock_lock = threading.Lock()


def get_clock() -> Clock:
    """
    Get the process-wide clock, selecting it on first use.

    **Conceptual**: Selection happens once per process; later calls return the
    same object without re-probing. The first initialization is guarded by a
    lock (double-checked) so threads racing on the first call all converge on
    one instance.

    Returns:
        The bound Clock.

    Raises:
        ValueError: On the first call only, if LITERALS_CLOCK_SOURCE is invalid.
                    Nothing is bound in that case.
    """
    global _process_clock

    clock = _process_clock
    if clock is not None:
        return clock

    # A bad environment raises here, before anything is bound.
    source = get_settings().clock_source
    selected = False
    with _process_clock_lock:
        if _process_clock is None:
            _process_clock = select_clock(source)
            selected = True
        clock = _process_clock

    if selected:
        logger.info(
            "clock_source_selected",
            requested=source,
            bound=getattr(clock, "source", type(clock).__name__),
        )
    return clock


def set_clock(clock: Clock) -> None:
    """Bind clock as the process clock (startup injection or tests)."""
    global _process_clock
    with _process_clock_lock:
        _process_clock = clock


def reset_clock() -> None:
    """Clear the process clock so the next get_clock() selects again (for testing)."""
    global _process_clock
    with _process_clock_lock:
        _process_clock = None


def now() -> float:
    """
    Return the current timestamp in milliseconds from the process clock.

    Non-decreasing across calls while the monotonic source is bound. Once a clock
    is bound this never raises. The first call in a process may raise ValueError
    if LITERALS_CLOCK_SOURCE is invalid; call get_clock() at startup to surface
    that early.
    """
    return get_clock().now()


class Stopwatch:
    """
    Elapsed-time helper built on a Clock.

    **Usage**:
        watch = Stopwatch()
        do_work()
        print(f"took {watch.elapsed_ms():.1f} ms")
    """

    def __init__(self, clock: Optional[Clock] = None):
        self._clock = clock if clock is not None else get_clock()
        self._started_ms = self._clock.now()

    def elapsed_ms(self) -> float:
        """Milliseconds since construction or the last restart()."""
        return self._clock.now() - self._started_ms

    def restart(self) -> float:
        """Reset the start point and return the elapsed time before the reset."""
        current = self._clock.now()
        elapsed = current - self._started_ms
        self._started_ms = current
        return elapsed
