"""Command line interface for ninepack."""
