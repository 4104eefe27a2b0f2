"""Diagram rendering for rules and transition history."""

from .diagram import DiagramRenderer

__all__ = ["DiagramRenderer"]
