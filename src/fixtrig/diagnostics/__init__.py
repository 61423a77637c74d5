"""Diagnostics package.

- diagnostics.accuracy: error sweep of sin/cos against float math
  (requires numpy; plotting requires matplotlib). Install with:
  pip install "fixtrig[diagnostics]"
"""

__all__ = ["accuracy"]
