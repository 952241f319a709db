"""Render binding between graphs and display targets."""

from .frame import Frame, FrameSnapshot

__all__ = [
    "Frame",
    "FrameSnapshot",
]
