"""tutorctl — command-line argument interpreter for tutoring records."""

__version__ = "0.3.0"
