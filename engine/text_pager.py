"""
Fabricof - engine/text_pager.py
Greedy word wrap and a scrollable line window for the dialogue textbox.
The pager holds no state; callers own the scroll offset.
"""

from typing import List, Sequence


def wrap(text: str, width: int) -> List[str]:
    """
    Greedy word wrap on whitespace. Words are never split: a word longer
    than `width` gets a line of its own and overflows it.
    """
    lines: List[str] = []
    current = ""
    for word in text.split():
        if not current:
            current = word
        elif len(current) + 1 + len(word) <= width:
            current = f"{current} {word}"
        else:
            lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines


def wrap_entries(entries: Sequence[str], width: int) -> List[str]:
    """Wrapped lines of every entry, in source order, as one flat list."""
    lines: List[str] = []
    for entry in entries:
        lines.extend(wrap(entry, width))
    return lines


def max_scroll(entries: Sequence[str], width: int, visible_height: int) -> int:
    return max(0, len(wrap_entries(entries, width)) - visible_height)


def clamp_scroll(offset: int, entries: Sequence[str], width: int, visible_height: int) -> int:
    return max(0, min(offset, max_scroll(entries, width, visible_height)))


def paginate(entries: Sequence[str], width: int, visible_height: int, scroll_offset: int) -> List[str]:
    """
    Returns the lines in [scroll_offset, scroll_offset + visible_height).
    Runs past the end yield fewer lines; nothing is padded.
    """
    lines = wrap_entries(entries, width)
    start = max(0, scroll_offset)
    end = max(start, start + max(0, visible_height))
    return lines[start:end]
