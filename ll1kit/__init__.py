"""Table-driven scanner, LL(1) grammar toolkit and recursive-descent recognisers."""

__version__ = "0.1.0"