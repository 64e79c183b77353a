"""
Input validation for values and commands coming from outside the library.
"""

from sortedseq.security.validator import InputValidator

__all__ = ["InputValidator"]
