"""Aggregation over a round's guesses.

- Reduces guess snapshots to statistics, consensus labels and scores
- Pure functions over caller-supplied collections
- Forbidden: persistence, transport, any state held between calls
"""
