"""Command-line dispatcher: argument parsing and process wiring."""
