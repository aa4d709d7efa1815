"""Language detection pipeline.

This package turns raw text into a language guess: normalization,
script classification, trigram extraction, candidate filtering,
profile distance scoring and confidence calculation.
"""
