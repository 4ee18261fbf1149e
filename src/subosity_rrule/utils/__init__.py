"""Utility modules for subosity-rrule."""
