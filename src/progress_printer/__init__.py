# Lightweight package init: avoid eager imports so the CLI starts fast.
__all__ = ["ProgressRenderer", "PrettyTestRunner"]

def __getattr__(name):
    if name == "ProgressRenderer":
        from .renderer import ProgressRenderer as _ProgressRenderer
        return _ProgressRenderer
    if name == "PrettyTestRunner":
        from .runners.runner import PrettyTestRunner as _PrettyTestRunner
        return _PrettyTestRunner
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
