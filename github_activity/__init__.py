"""
Command line tool that prints the recent public activity of a GitHub user.
"""

__version__ = "0.1.0"
