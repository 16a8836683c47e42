"""Spectrum color mapping and marker placement.

Pure functions of label text and guess values:
- colors: label -> color, interpolation, jitter
- placement: where (and in what color) a guess marker is drawn
- Forbidden: scoring, aggregation, any shared state
"""
