"""Pluggable metrics for block-kit; nothing is recorded unless a hook is given."""

from . import names
from .base import MetricsHook, NoOpMetricsHook

__all__ = [
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
]
