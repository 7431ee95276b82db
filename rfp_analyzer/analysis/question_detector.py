"""
RFP Analyzer: Question Detector
Finds the questions an RFP asks of its reader

Two kinds of question are recognized:
1. Explicit - the sentence carries a question mark
2. Implicit - the sentence is phrased as a demand for information
   ("must provide", "please describe", ...)
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from .text_utils import iter_sentences

logger = logging.getLogger(__name__)


class QuestionKind(str, Enum):
    EXPLICIT = "explicit"
    IMPLICIT = "implicit"


@dataclass(frozen=True)
class QuestionMatch:
    """A detected question and the rule that fired"""
    text: str
    kind: QuestionKind


# Phrases that turn a statement into an implicit question
IMPLICIT_QUESTION_PHRASES = [
    "must provide",
    "shall provide",
    "is required",
    "are required",
    "please describe",
    "please explain",
]


def _is_explicit(sentence: str, terminator: str) -> bool:
    return "?" in sentence or "?" in terminator


def _is_implicit(sentence: str, terminator: str) -> bool:
    lowered = sentence.lower()
    return any(phrase in lowered for phrase in IMPLICIT_QUESTION_PHRASES)


# Evaluated in order, first match wins
QUESTION_RULES: Sequence[Tuple[Callable[[str, str], bool], QuestionKind]] = (
    (_is_explicit, QuestionKind.EXPLICIT),
    (_is_implicit, QuestionKind.IMPLICIT),
)


class QuestionDetector:
    """Classify sentence segments as explicit or implicit questions."""

    def __init__(self, rules: Sequence[Tuple[Callable[[str, str], bool], QuestionKind]] = QUESTION_RULES):
        self.rules = rules

    def detect(self, text: str) -> List[str]:
        return [match.text for match in self.detect_detailed(text)]

    def detect_detailed(self, text: str) -> List[QuestionMatch]:
        matches = []
        for sentence, terminator in iter_sentences(text):
            kind = self.classify(sentence, terminator)
            if kind is not None:
                matches.append(QuestionMatch(text=sentence, kind=kind))

        explicit = sum(1 for m in matches if m.kind == QuestionKind.EXPLICIT)
        logger.debug(
            f"Detected {len(matches)} questions "
            f"({explicit} explicit, {len(matches) - explicit} implicit)"
        )
        return matches

    def classify(self, sentence: str, terminator: str = "") -> Optional[QuestionKind]:
        for predicate, kind in self.rules:
            if predicate(sentence, terminator):
                return kind
        return None


def identify_questions(text: str) -> List[str]:
    return QuestionDetector().detect(text)
