# core/errors.py
"""Collaborator-side exceptions. Gameplay never raises; it rejects silently."""


class ScoreStoreError(Exception):
    """Raised when the high-score file cannot be read or written."""
