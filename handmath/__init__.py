"""Elementary math functions computed from series, iteration and bisection."""

__version__ = "0.1.0"
__all__ = ["basic", "powers", "trig"]