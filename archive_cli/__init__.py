"""
Internet Archive CLI.

Search the Internet Archive from the terminal.
"""

__version__ = "1.0.0"
