"""
Persistence package for machine documents.

Architecture:
- Document models define the serialized shape
- Serializer captures and restores state and history
- Rules are never part of a document
"""

from .document import MachineDocument, TransitionDocument
from .serializer import Serializer

__all__ = ["MachineDocument", "Serializer", "TransitionDocument"]
