"""Console reporting for verification runs."""

from .progress import ProgressTicker
from .stdout import StdoutReporter

__all__ = ["ProgressTicker", "StdoutReporter"]
