"""List directory contents in the manner of ls, with a printf-style formatter for the output."""

__version__ = "0.1.0"