"""String helpers, callable wrappers, guarded values, enum maps and bitmasks,
double-ended containers, route matching and a cooperative task scheduler."""

__version__ = "0.1.0"