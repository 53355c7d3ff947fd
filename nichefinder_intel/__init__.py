"""NicheFinder opportunity intelligence: deterministic derivations for the operator dashboard."""

__version__ = "0.3.0"
