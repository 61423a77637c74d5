"""Offline design tools (table generation). Not imported by the numeric core."""

__all__ = ["quarter_table"]
