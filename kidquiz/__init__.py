"""kidquiz - Adaptive quiz recommendations for young learners."""

__version__ = "0.1.0"
