"""Hopeful Futures: accessible job matching with Gemini-written summaries and training plans."""

__version__ = "0.1.0"
