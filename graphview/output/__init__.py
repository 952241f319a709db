"""Output formatting for the command-line interface."""
