"""
Simulation helpers: clock drift over nonnegative spans.
"""

from taitime.sim.clock_noise import (
    REFERENCE_SPAN_1MIN,
    REFERENCE_SPAN_1SEC,
    REFERENCE_SPAN_15MIN,
    ClockNoise,
    ClockNoiseConfig,
    add_noise,
)

__all__ = [
    # Constants
    "REFERENCE_SPAN_1SEC",
    "REFERENCE_SPAN_1MIN",
    "REFERENCE_SPAN_15MIN",
    # Types
    "ClockNoise",
    "ClockNoiseConfig",
    # Functions
    "add_noise",
]
