"""
Keysmith -- Random Password Generator & Strength Analyzer
==========================================================

Generates random passwords that are guaranteed to contain every enabled
character category, and estimates the brute-force strength of existing
passwords.

Modules:
    - keysmith.generators: Length validation, charset building, generation
    - keysmith.analyzers: Password strength analysis
    - keysmith.core: Engine facade, data models, errors
    - keysmith.output: Console and report output
    - keysmith.cli: Click-based command-line interface
"""

__version__ = "1.0.0"
__tool_name__ = "keysmith"
