"""State/store layer.

This package is the single source of truth for how incoming platform
network callbacks are merged into the three signal cells and reconciled
into one connectivity verdict.
"""
