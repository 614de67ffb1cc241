# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for solar position export.

Adapters implement this to export sweep samples in various formats
(CSV, etc.).
"""
from typing import Protocol, runtime_checkable

from timeofday.domain.day_sweep import SweepSample


@runtime_checkable
class SolarPositionExporter(Protocol):
    """Port for exporting solar position samples to file."""

    def export(self, samples: list[SweepSample], path: str) -> int:
        """
        Export solar position samples to a file.

        Args:
            samples: Sweep samples, in the order they should be written.
            path: Output file path.

        Returns:
            Number of samples exported.
        """
        ...
