"""Diagnostics package.

Optional numpy/matplotlib tools (pip install "solarcalc[diagnostics]").
"""

__all__ = ["model_comparison"]
