# Lexical cue categories used by the marker assessors.
#
# Every cue list is a named category of case-insensitive matchers. Cues made
# of words that must appear in order ("if ... then") are scanned forward one
# word at a time, so matching stays linear in the sentence length.

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Union


@dataclass(frozen=True)
class OrderedCue:
    """Words that must occur in order on one line, each separated from the last.

    Exposes the ``search``/``findall`` subset of ``re.Pattern`` that cue
    categories rely on. With ``either_order`` the words may also appear in
    reverse.
    """

    steps: tuple[re.Pattern[str], ...]
    either_order: bool = False

    def _spans(self, line: str, steps: tuple[re.Pattern[str], ...]) -> Iterator[tuple[int, int]]:
        pos = 0
        while True:
            first = steps[0].search(line, pos)
            if first is None:
                return
            end = first.end()
            for step in steps[1:]:
                # at least one character between consecutive words
                found = step.search(line, end + 1)
                if found is None:
                    return
                end = found.end()
            yield first.start(), end
            pos = max(end, first.start() + 1)

    def _line_spans(self, line: str) -> list[tuple[int, int]]:
        spans = list(self._spans(line, self.steps))
        if not self.either_order:
            return spans
        spans += self._spans(line, self.steps[::-1])
        taken: list[tuple[int, int]] = []
        for start, end in sorted(spans):
            if not taken or start >= taken[-1][1]:
                taken.append((start, end))
        return taken

    def search(self, text: str) -> bool:
        return any(self._line_spans(line) for line in text.split("\n"))

    def findall(self, text: str) -> list[str]:
        return [line[start:end] for line in text.split("\n") for start, end in self._line_spans(line)]


CueMatcher = Union[re.Pattern[str], OrderedCue]


@dataclass(frozen=True)
class CueCategory:
    name: str
    patterns: tuple[CueMatcher, ...]

    def search(self, sentence: str) -> bool:
        return any(p.search(sentence) for p in self.patterns)

    def count(self, sentence: str) -> int:
        return sum(len(p.findall(sentence)) for p in self.patterns)


def _cue(name: str, *patterns: str | OrderedCue) -> CueCategory:
    return CueCategory(name, tuple(
        p if isinstance(p, OrderedCue) else re.compile(p, re.IGNORECASE) for p in patterns
    ))


def _in_order(*words: str, either_order: bool = False) -> OrderedCue:
    return OrderedCue(tuple(re.compile(w, re.IGNORECASE) for w in words), either_order)


# ---------------------------------------------------------------------------
# Semantic compression
# ---------------------------------------------------------------------------

INFERENTIAL = _cue(
    "inferential",
    r"\bthus\b", r"\btherefore\b", r"\bconsequently\b", r"\bhence\b",
    r"\bimplies\b", r"\bentails\b", r"\bit follows\b",
    r"\bfollows\s+(?:necessarily\s+)?from\b", r"\bthis means\b",
)
SYNTHESIS = _cue(
    "synthesis",
    r"\bcombines\b", r"\bintegrates\b", r"\bunifies\b", r"\bsynthesi[sz]es\b",
    _in_order(r"\bboth\b", r"\band\b"), _in_order(r"\bnot only\b", r"\bbut\b"),
)
DEFINITIONAL = _cue(
    "definitional",
    r"\b(?:is|are)\s+defined\s+as\b", r"\bmeans\b", r"\brefers?\s+to\b",
    r"\bcan\s+be\s+understood\s+as\b",
)
IMPLICATION_CHAIN = _cue(
    "implication_chain",
    _in_order(r"\bif\b", r"\bthen\b"),
    _in_order(r"\bsince\b", r"\btherefore\b", either_order=True),
    _in_order(r"\bbecause\b", r"\bthus\b", either_order=True),
    _in_order(r"\bgiven\s+that\b", r"\bit\s+follows\b"),
)
DEFINITIONAL_RELATIVE = _cue(
    "definitional_relative",
    r"\bdefined\s+as\b", r"\b(?:which|that)\s+(?:is|are)\s+(?:called|known\s+as|understood\s+as)\b",
    r"\bwhere\s+\w+\s+(?:denotes|stands\s+for)\b", r"\bwhereby\b",
)

# ---------------------------------------------------------------------------
# Inferential continuity
# ---------------------------------------------------------------------------

STRONG_CONNECTIVE = _cue(
    "strong_connective",
    r"\btherefore\b", r"\bthus\b", r"\bconsequently\b", r"\bit follows\b", r"\bhence\b",
)
MEDIUM_CONNECTIVE = _cue(
    "medium_connective",
    r"\bmoreover\b", r"\bfurthermore\b", r"\badditionally\b", r"\bin addition\b",
)
WEAK_CONNECTIVE = _cue(
    "weak_connective",
    r"\bhowever\b", r"\bbut\b", r"\bnevertheless\b", r"\byet\b",
)
CAUSAL = _cue(
    "causal",
    r"\bbecause\b", r"\bsince\b", r"\bgiven\s+that\b", r"\btherefore\b", r"\bthus\b",
    r"\bhence\b", r"\bconsequently\b", r"\bas a result\b", r"\bit follows\b",
)

# ---------------------------------------------------------------------------
# Epistemic resistance
# ---------------------------------------------------------------------------

TAUTOLOGY = _cue(
    "tautology",
    r"\bis\s+(?:important|good|bad|clear)\b", r"\bobviously\b", r"\bof\s+course\b",
    r"\bneedless\s+to\s+say\b", r"\bit\s+goes\s+without\s+saying\b",
)
REINTERPRETATION = _cue(
    "reinterpretation",
    r"\bcontrary\s+to\b", r"\brather\s+than\b", r"\binstead\s+of\b",
    _in_order(r"\bnot\b", r"\bbut\s+rather\b"), _in_order(r"\bthe\s+real\b", r"\bis\b"),
    r"\bon\s+the\s+contrary\b",
)
COGNITIVE_LOAD = _cue(
    "cognitive_load",
    r"\bif\s+and\s+only\s+if\b", r"\bnecessary\s+and\s+sufficient\b",
    _in_order(r"\bif\b", r"\bthen\b", r"\bunless\b"), r"\brecursive(?:ly)?\b", r"\bparado(?:x|xes|xical)\b",
    r"\bself-\w+", r"\bitself\b", r"\bmeta-\w+",
)
NON_OBVIOUS = _cue(
    "non_obvious",
    r"\bsurprisingly\b", r"\bcounter-?intuitive(?:ly)?\b", r"\bunexpectedly\b",
    r"\bparadoxically\b", r"\bironically\b",
    r"\bspecifically\b", r"\bprecisely\b", r"\bstrictly\s+speaking\b", r"\bin\s+particular\b",
    r"\bdistinction\s+between\b", r"\bdistinguish(?:es|ed)?\b", r"\bas\s+opposed\s+to\b",
    r"\bdiffers?\s+from\b",
)
CLAUSE_SEPARATOR = CueCategory("clause_separator", (re.compile(r"[,;:]"),))

# ---------------------------------------------------------------------------
# Metacognitive awareness
# ---------------------------------------------------------------------------

REFRAMING = _cue(
    "reframing",
    r"\blet\s+us\s+consider\b", r"\blet's\s+consider\b", r"\bput\s+differently\b",
    r"\bto\s+reframe\b", r"\bin\s+other\s+words\b", _in_order(r"\bfrom\b", r"\bperspective\b"),
)
RECURSIVE_DEFINITION = _cue(
    "recursive_definition",
    r"\bdefines\s+itself\b", r"\bcircular\s+definition\b", r"\bself-defining\b",
    r"\bin\s+terms\s+of\s+itself\b", r"\brecursively\s+defined\b",
)
LEVEL_SHIFT = _cue(
    "level_shift",
    r"\bthis\s+argument\b", r"\bour\s+discussion\b", r"\bthis\s+analysis\b",
    r"\bmeta-\w+", r"\babout\s+thinking\b", r"\bthe\s+present\s+argument\b",
)


CUE_CATEGORIES = MappingProxyType({
    c.name: c
    for c in (
        INFERENTIAL, SYNTHESIS, DEFINITIONAL, IMPLICATION_CHAIN, DEFINITIONAL_RELATIVE,
        STRONG_CONNECTIVE, MEDIUM_CONNECTIVE, WEAK_CONNECTIVE, CAUSAL,
        TAUTOLOGY, REINTERPRETATION, COGNITIVE_LOAD, NON_OBVIOUS, CLAUSE_SEPARATOR,
        REFRAMING, RECURSIVE_DEFINITION, LEVEL_SHIFT,
    )
})
