"""
PinPoint Output
================

Output generation modules for the PinPoint predictor.

Modules:
    console  -- Rich-based console display
    report   -- JSON report generation
"""

from pinpoint.output.console import PinpointConsoleOutput
from pinpoint.output.report import PinpointReportGenerator

__all__ = [
    "PinpointConsoleOutput",
    "PinpointReportGenerator",
]
