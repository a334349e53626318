"""Canadian income tax and CPP bracket calculator."""

__version__ = "0.1.0"
