__version__ = "v0.2.0"
