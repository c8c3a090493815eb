"""Exercise grader driving rustc and cargo, plus solutions to algorithm exercises."""

__version__ = "0.1.0"