"""Input collection for new entries.

Works on plain lines, whatever produced them: the CLI feeds it from the
terminal, tests feed it from lists. Nothing here touches the store.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from .models import EntryDraft, normalize_keywords, validate_title

# Returns the next line, or None at end of input.
LineReader = Callable[[], "str | None"]


def _strip_newline(line: str) -> str:
    return line.rstrip("\r\n")


def collect_content(lines: Iterable[str]) -> str:
    """Read a content block terminated by two consecutive empty lines.

    The second empty line confirms the end and is not part of the
    content; the first one is dropped as trailing. A single empty line
    between text lines is kept. End of input also ends the block.

    >>> collect_content(["line1", "", "line2", "", ""])
    'line1\\n\\nline2'
    """
    collected: list[str] = []
    pending_blank = False
    for raw in lines:
        line = _strip_newline(raw)
        if line == "":
            if pending_blank:
                break
            pending_blank = True
            continue
        if pending_blank:
            collected.append("")
            pending_blank = False
        collected.append(line)
    return "\n".join(collected)


def parse_keywords(line: str | None) -> frozenset[str]:
    """Split a keyword line on whitespace into a lowercase set."""
    if not line:
        return frozenset()
    return normalize_keywords(line.split())


def _iter_lines(read_line: LineReader) -> Iterator[str]:
    while True:
        line = read_line()
        if line is None:
            return
        yield line


def collect_entry(read_line: LineReader, prompt: Callable[[str], None] | None = None) -> EntryDraft:
    """Gather title, content block and keyword line from ``read_line``.

    Args:
        read_line: Line source; returns None at end of input.
        prompt: Called with "Title", "Content" and "Keywords" before each part is read.

    Raises:
        ValidationError: If the title line is missing or blank.
    """
    ask = prompt or (lambda label: None)
    ask("Title")
    title = validate_title(_strip_newline(read_line() or "")).strip()
    ask("Content")
    content = collect_content(_iter_lines(read_line))
    ask("Keywords")
    keywords = parse_keywords(read_line())
    return EntryDraft(title=title, content=content, keywords=keywords)
