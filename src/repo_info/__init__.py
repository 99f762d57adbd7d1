"""Repo Info — GitHub repository summary and language breakdown in the terminal.

Fetches a repository's metadata and per-language byte counts from the
GitHub REST API and prints them with a proportional bar chart.
"""

__version__ = "0.1.0"
