"""solidctl: runnable companion to the object-oriented and SOLID design guides."""

__version__ = "0.3.0"
