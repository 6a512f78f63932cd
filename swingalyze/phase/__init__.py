"""
Phase Tracking Module
=====================
Frame-count swing phase tracker and coaching note rendering.
"""

from .tracker import Note, PhaseTracker
from .notes import dedupe_notes, escape_html, notes_page, notes_to_html

__all__ = ['Note', 'PhaseTracker', 'dedupe_notes', 'escape_html', 'notes_page', 'notes_to_html']
