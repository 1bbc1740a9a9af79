"""Context-specific scanners for the JSDev scanner.

Each scanner is a mixin that consumes one kind of construct: string and
regexp literals, macro conditions, or macro bodies.
"""

from __future__ import annotations

from jsdev.scanner.scanners.condition import ConditionScannerMixin
from jsdev.scanner.scanners.literal import LiteralScannerMixin
from jsdev.scanner.scanners.stuff import StuffScannerMixin

__all__ = [
    "ConditionScannerMixin",
    "LiteralScannerMixin",
    "StuffScannerMixin",
]
