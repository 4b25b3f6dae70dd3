"""Concrete collaborators for the reconciliation engine."""
