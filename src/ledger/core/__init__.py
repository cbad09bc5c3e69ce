"""Shared state and ports wired together by the CLI bootstrap."""
