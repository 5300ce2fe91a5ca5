"""Loading of problem documents into the typed domain model."""

from .reader import ProblemFormatError, load_problem, read_problem

__all__ = ["ProblemFormatError", "load_problem", "read_problem"]
