"""edugraph — educational concept graph with guarded Yields relations."""

__version__ = "0.1.0"
