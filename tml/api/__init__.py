"""API module for tml.

Functions defined here are the single source of truth for the CLI; the CLI
layer only parses arguments and displays StageResult objects.
"""

__all__ = []
