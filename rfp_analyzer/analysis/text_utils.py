"""
Text utilities for the RFP Analyzer.

Fixed-delimiter splitting shared by the outliner and the extractors.
"""

from typing import Iterator, List, Tuple
import re


PARAGRAPH_SEPARATOR = "\n\n"

# A sentence ends at any run of terminal punctuation
_SENTENCE_RE = re.compile(r"([^.!?]*)([.!?]*)")

# Characters \s matches in compiled patterns
WHITESPACE_CHARS = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"


def compile_pattern(pattern: str, flags: int = 0) -> re.Pattern:
    """
    Compile an extraction pattern.

    \\w, \\d and case folding are ASCII-only, while \\s still covers
    WHITESPACE_CHARS (NBSP, ideographic space, BOM, ...).
    """
    parts = []
    in_class = False
    i = 0
    while i < len(pattern):
        char = pattern[i]
        if char == "\\" and i + 1 < len(pattern):
            escape = pattern[i:i + 2]
            if escape == r"\s":
                parts.append(WHITESPACE_CHARS if in_class else f"[{WHITESPACE_CHARS}]")
            else:
                parts.append(escape)
            i += 2
            continue
        if char == "[" and not in_class:
            in_class = True
        elif char == "]" and in_class:
            in_class = False
        parts.append(char)
        i += 1
    return re.compile("".join(parts), flags | re.ASCII)


def split_lines(text: str) -> List[str]:
    """Split page text on newlines and trim each line (empty lines kept)."""
    return [line.strip() for line in text.split("\n")]


def split_paragraphs(text: str) -> List[str]:
    """
    Split text on blank-line boundaries.

    Only the literal "\\n\\n" sequence separates paragraphs. Whitespace-only
    paragraphs are dropped and the rest are trimmed.
    """
    return [p.strip() for p in text.split(PARAGRAPH_SEPARATOR) if p.strip()]


def iter_sentences(text: str) -> Iterator[Tuple[str, str]]:
    """
    Yield (sentence, terminator) pairs.

    Sentences are the pieces left after splitting on runs of '.', '!' and
    '?'. The terminator is the punctuation run that ended the sentence ('' at
    end of text). Whitespace-only sentences are skipped and the rest trimmed.
    """
    for match in _SENTENCE_RE.finditer(text):
        sentence, terminator = match.group(1), match.group(2)
        if sentence.strip():
            yield sentence.strip(), terminator
