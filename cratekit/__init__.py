"""Boolean and cfg expressions, sorted collections, checked casts, a code emitter and concurrency helpers."""

__version__ = "0.1.0"