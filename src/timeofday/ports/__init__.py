# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for solar position export.

Adapters implement these to write sweep results in different formats.
"""
from timeofday.ports.export import SolarPositionExporter

__all__ = ["SolarPositionExporter"]
