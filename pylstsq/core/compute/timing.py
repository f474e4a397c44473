"""
Wall-clock timing for fit().

A Timer measures one overall span plus any number of named sections
inside it. Results go into the `timing` dict of a Result, keyed by
section name, with the overall span under 'total_seconds'.
"""

from collections import defaultdict
from contextlib import contextmanager
from time import perf_counter
from typing import Iterator


class Timer:
    """
    Overall span plus accumulated named sections, in seconds.

    Re-entering a section name adds to its previous total. Sections are
    not required to be disjoint or to lie within start()/stop().

        timer = Timer()
        timer.start()
        with timer.section('solve'):
            x = solve(M, b, work=work)
        with timer.section('residuals'):
            r = b - M @ x
        timer.stop()
        timer.result()   # {'total_seconds': ..., 'solve': ..., 'residuals': ...}
    """

    def __init__(self):
        self._sections: defaultdict[str, float] = defaultdict(float)
        self._started_at: float | None = None
        self._total: float | None = None

    def start(self) -> None:
        self._started_at = perf_counter()
        self._total = None

    def stop(self) -> None:
        if self._started_at is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._total = perf_counter() - self._started_at

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Add the time spent inside the block to section `name`."""
        entered = perf_counter()
        try:
            yield
        finally:
            self._sections[name] += perf_counter() - entered

    def result(self) -> dict[str, float]:
        """
        Return {'total_seconds': ..., <section>: ...}.

        Raises:
            RuntimeError: If the overall span has not been stopped yet
        """
        if self._total is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._total, **self._sections}


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Time a block without the start()/stop() calls.

        with timed() as timer:
            pinv = pseudo_inverse(M)
        timer.result()['total_seconds']
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
