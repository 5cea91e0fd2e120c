"""
Keysmith Analyzers
===================

Post-hoc password strength analysis.
"""

from keysmith.analyzers.strength import StrengthAnalyzer, analyze

__all__ = ["StrengthAnalyzer", "analyze"]
