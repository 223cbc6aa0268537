"""Record classes, enumerations and vectors for common analysis files of short-baseline neutrino experiments."""

__version__ = "0.1.0"