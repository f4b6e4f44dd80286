from .profiled import profiled as profiled
from .profiler import Profiler as Profiler
from .profiler import ProfilingProxy as ProfilingProxy
from .profiling_state import ProfilingState as ProfilingState

__all__ = ["profiled", "Profiler", "ProfilingProxy", "ProfilingState"]
