"""Tileyard: grid tile placement on a pan and zoom surface."""
