import functools
import logging
from pathlib import Path
from typing import Iterable, Optional, TextIO, Union

from wordcrawl.profiler.profiled import profiled_methods
from wordcrawl.profiler.profiling_state import ProfilingState
from wordcrawl.utils.clock import Clock, SystemClock

logger = logging.getLogger(__name__)


class ProfilingProxy:
    """Stands in for `delegate`, timing calls to the profiled methods.

    Every other attribute is forwarded untouched. Exceptions raised by the
    delegate reach the caller unchanged; the elapsed time is recorded either way.
    """

    def __init__(self, delegate, methods: frozenset, state: ProfilingState, clock: Clock):
        object.__setattr__(self, "_delegate", delegate)
        object.__setattr__(self, "_methods", methods)
        object.__setattr__(self, "_state", state)
        object.__setattr__(self, "_clock", clock)

    def __getattr__(self, name):
        attr = getattr(self._delegate, name)
        if name not in self._methods or not callable(attr):
            return attr

        @functools.wraps(attr)
        def timed(*args, **kwargs):
            start = self._clock.now()
            try:
                return attr(*args, **kwargs)
            finally:
                self._state.record(type(self._delegate), name, self._clock.now() - start)

        return timed

    def __setattr__(self, name, value):
        setattr(self._delegate, name, value)

    def __eq__(self, other):
        if isinstance(other, ProfilingProxy):
            other = other._delegate
        return self._delegate == other

    def __hash__(self):
        return hash(self._delegate)

    def __repr__(self):
        return f"<ProfilingProxy of {self._delegate!r}>"


class Profiler:
    """Wraps objects so that calls to their `@profiled` methods are timed."""

    def __init__(self, clock: Optional[Clock] = None, state: Optional[ProfilingState] = None):
        self.clock = clock or SystemClock()
        self.state = state or ProfilingState()
        self.start_time = self.clock.now()

    def wrap(self, delegate, klass: Optional[type] = None, methods: Optional[Iterable[str]] = None):
        """Return a proxy around `delegate`.

        `klass` is the interface whose profiled methods are timed (defaults to
        the delegate's type). `methods` overrides the marker-based lookup.
        """
        klass = klass or type(delegate)
        names = frozenset(methods) if methods is not None else profiled_methods(klass)
        if not names:
            raise ValueError(f"{klass.__qualname__} has no profiled methods")
        missing = [n for n in names if not callable(getattr(delegate, n, None))]
        if missing:
            raise ValueError(f"{type(delegate).__qualname__} lacks profiled method(s): {', '.join(sorted(missing))}")
        return ProfilingProxy(delegate, names, self.state, self.clock)

    def write_to(self, stream: TextIO) -> None:
        stream.write(f"Run at {self.start_time.isoformat()}\n")
        for line in self.state.lines():
            stream.write(line + "\n")
        stream.write("\n")

    def write_data(self, path: Union[str, Path]) -> None:
        """Append the recorded timings to `path`, creating it if needed."""
        with open(path, "a", encoding="utf-8") as f:
            self.write_to(f)
        logger.info("Profile data written to %s", path)
