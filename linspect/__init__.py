"""Parse df and mount-table output, render statistics tables, and keep CSV time series."""

__version__ = "0.1.0"