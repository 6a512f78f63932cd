"""
Coaching note rendering: de-duplication, limit and HTML output.
"""

import html
from typing import Dict, Iterable, List, Optional

from ..config import DISPLAY_CONFIG


def dedupe_notes(notes: Iterable, limit: Optional[int] = None) -> List:
    """
    Keep the first note per exact text, in emission order, capped at limit.
    """
    limit = DISPLAY_CONFIG['max_notes'] if limit is None else limit
    seen = set()
    kept = []
    for note in notes:
        if note.text in seen:
            continue
        seen.add(note.text)
        kept.append(note)
        if len(kept) >= limit:
            break
    return kept


def escape_html(text: str) -> str:
    """Escape &, < and > only"""
    return html.escape(text, quote=False)


def note_class(note) -> str:
    if note.kind in ('', 'neutral'):
        return 'note'
    return f'note {note.kind}'


def notes_to_html(notes: Iterable) -> str:
    return ''.join(f'<li class="{note_class(n)}">{escape_html(n.text)}</li>' for n in notes)


def notes_page(notes: Iterable, readouts: Dict[str, str], status: str = '',
               refresh_sec: int = 1) -> str:
    """
    Small self-refreshing page with the current status, readouts and notes.
    Written into the served directory by the player.
    """
    rows = ''.join(
        f'<tr><th>{escape_html(label)}</th><td>{escape_html(value)}</td></tr>'
        for label, value in readouts.items()
    )
    return (
        '<!doctype html>\n'
        '<html><head><meta charset="utf-8">'
        f'<meta http-equiv="refresh" content="{int(refresh_sec)}">'
        '<title>Swingalyze notes</title>'
        '<link rel="stylesheet" href="style.css"></head>\n'
        '<body>'
        f'<p class="status">{escape_html(status)}</p>'
        f'<table class="readouts">{rows}</table>'
        f'<ul class="notes">{notes_to_html(notes)}</ul>'
        '</body></html>\n'
    )
