"""Circular-buffer source filtering and DFA recognition of assignment targets and reserved words."""

__version__ = "0.1.0"
__all__ = ["buffer", "dfa", "cli"]