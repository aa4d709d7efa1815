"""Static reference tables.

This package holds the closed script and language sets, the code-point
ranges used to classify characters, and the reference trigram profiles.
Everything here is built once at import time and never mutated.
"""
