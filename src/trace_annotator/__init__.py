"""Trace annotation and citation resolution for research-assistant transcripts."""

__version__ = "0.1.0"
