"""Learning Hour generator - facilitation content for technical coaching sessions."""

__version__ = "0.1.0"
