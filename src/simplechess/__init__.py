"""simplechess: simplified chess with a one-ply heuristic opponent."""

__version__ = "0.1.0"
