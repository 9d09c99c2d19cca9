"""Campus lost-and-found work-request routing engine."""

__version__ = "0.1.0"
