"""Structured Unix signal handling: independent actions per signal, signal details, a bounded channel and exfiltrators."""

__version__ = "0.3.18"

__all__ = [
    "channel",
    "consts",
    "exfiltrator",
    "low_level",
    "signal_details",
]