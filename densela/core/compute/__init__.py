"""
Shared compute infrastructure for densela.

IMPORTANT: This is NOT where algorithm backends live. Those go in
{domain}/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Algorithm thresholds and comparison tiers
"""

from densela.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
