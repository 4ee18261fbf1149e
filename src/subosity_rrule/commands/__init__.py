"""Command modules for the subosity-rrule command line."""
