"""
Mood Co-Worker - Personal Mood Journal Client

A terminal client for a mood-journaling API: log in, record
how the day felt, and see how your mood trends over time.

The server keeps the journal. This client only reads and writes it.
"""

__version__ = "0.1.0"
