PROFILED_ATTR = "__wordcrawl_profiled__"


def profiled(func):
    """Mark a method so that `Profiler.wrap` records how long each call takes."""
    setattr(func, PROFILED_ATTR, True)
    return func


def is_profiled(func) -> bool:
    return bool(getattr(func, PROFILED_ATTR, False))


def profiled_methods(klass: type) -> frozenset:
    """Names of the profiled methods declared on `klass` or its bases."""
    names = set()
    for cls in klass.__mro__:
        for name, attr in vars(cls).items():
            if is_profiled(getattr(attr, "__func__", attr)):
                names.add(name)
    return frozenset(names)
