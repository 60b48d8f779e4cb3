"""querywatch - terminal dashboard for a query cluster's monitoring API."""

__version__ = "0.1.0"
