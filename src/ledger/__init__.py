"""ledger: a personal task ledger stored as line-delimited JSON."""

__version__ = "0.1.0"
