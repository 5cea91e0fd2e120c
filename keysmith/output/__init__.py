"""
Keysmith Output
================

Rich console displays and JSON/HTML report writers.
"""

from keysmith.output.console import KeysmithConsoleOutput
from keysmith.output.report import KeysmithReportGenerator

__all__ = ["KeysmithConsoleOutput", "KeysmithReportGenerator"]
