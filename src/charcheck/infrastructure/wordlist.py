"""Forbidden-term word list loading.

Format: UTF-8 text, one term per line. Blank lines and lines starting
with ``#`` are ignored. Duplicates (case-insensitive) keep their first
position so the compiled alternation order follows the file.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from charcheck.errors import WordListError

logger = structlog.get_logger(__name__)

COMMENT_PREFIX = "#"


def parse_forbidden_terms(text: str) -> tuple[str, ...]:
    """Extract ordered, de-duplicated terms from word list text.

    Examples:
        >>> parse_forbidden_terms("# header\\nfoo\\n\\nBar\\nfoo\\n")
        ('foo', 'Bar')
    """
    seen: set[str] = set()
    terms: list[str] = []
    for line in text.splitlines():
        term = line.strip()
        if not term or term.startswith(COMMENT_PREFIX):
            continue
        key = term.casefold()
        if key in seen:
            continue
        seen.add(key)
        terms.append(term)
    return tuple(terms)


def load_forbidden_terms(path: Path) -> tuple[str, ...]:
    """Read and parse the word list at *path*.

    Raises:
        WordListError: The file is missing, unreadable, or not UTF-8.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise WordListError(path, exc.strerror or str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise WordListError(path, "not valid UTF-8") from exc
    terms = parse_forbidden_terms(raw)
    logger.debug("word_list_loaded", path=str(path), term_count=len(terms))
    return terms
