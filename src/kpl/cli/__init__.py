"""
KPL Command-Line Interface
==========================

This package provides the command-line tools for the KPL toolkit:

- **kplscan**: tokenize a KPL source file and print its tokens

Each tool is implemented as a Click-based CLI application with
comprehensive help and error reporting.
"""

__all__ = ["kplscan"]
