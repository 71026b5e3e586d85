"""nowctl — deployment platform CLI utility."""

__version__ = "0.1.0"
