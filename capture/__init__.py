"""
Capture package for the roomscan pipeline.
Input models for a completed room capture and the JSON loader.
"""
from .captured_room import (
    CapturedSurface,
    CapturedSection,
    CapturedRoom,
    load_captured_room,
)

__all__ = [
    "CapturedSurface",
    "CapturedSection",
    "CapturedRoom",
    "load_captured_room",
]
