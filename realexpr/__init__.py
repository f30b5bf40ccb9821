"""Immutable real-valued symbolic expressions with evaluation and differentiation."""
