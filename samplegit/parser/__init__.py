"""
Parser module for Ableton Live project files.

This module handles:
- Loading and decompressing .als files
- Extracting sample file references from the project XML
"""

from .xml_loader import load_descriptor_text, read_ableton_project
from .sample_refs import AbletonProject, is_audio_file, parse_project

__all__ = [
    "AbletonProject",
    "is_audio_file",
    "load_descriptor_text",
    "parse_project",
    "read_ableton_project",
]
