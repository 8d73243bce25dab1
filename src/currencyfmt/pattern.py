"""Currency pattern parsing into typed segments.

CLDR currency patterns such as ``¤#,##0.00`` or ``#,##0.00 ¤;(#,##0.00 ¤)``
are parsed once into sequences of segments (literal text, number slot,
currency slot, plus and minus slots). Formatting then walks the segments
instead of substituting placeholder text, so literal locale text can never
collide with a placeholder.

Supported syntax (subset of CLDR number patterns):
    - A run of ``#``, ``0-9``, ``,``, ``.`` or ``@`` is the number slot.
      Only the first run in a sub-pattern is a slot; later runs are literal.
    - A run of ``¤`` is the currency slot.
    - ``+`` and ``-`` are the plus and minus sign slots.
    - ``'...'`` quotes literal text; ``''`` is a literal apostrophe.
    - ``;`` outside quotes separates the positive and negative sub-patterns.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from functools import lru_cache
from typing import TypeAlias

from currencyfmt.constants import MAX_LOCALE_CACHE_SIZE

__all__ = [
    "CURRENCY_SIGN",
    "CurrencyPattern",
    "Segment",
    "SegmentKind",
    "SubPattern",
    "grouping_sizes",
    "parse_pattern",
]

CURRENCY_SIGN = "\xa4"
_NUMBER_CHARS = frozenset("#0123456789,.@")
_QUOTE = "'"
_SEPARATOR = ";"


class SegmentKind(StrEnum):
    """Kind of a parsed pattern segment."""

    LITERAL = "literal"
    NUMBER = "number"
    CURRENCY = "currency"
    PLUS = "plus"
    MINUS = "minus"


@dataclass(frozen=True, slots=True)
class Segment:
    """One element of a sub-pattern.

    Attributes:
        kind: Segment kind
        text: Literal text for LITERAL segments, the source text of the slot
            otherwise (e.g. '#,##0.00' for the number slot)
    """

    kind: SegmentKind
    text: str = ""


SubPattern: TypeAlias = tuple[Segment, ...]


@dataclass(frozen=True, slots=True)
class CurrencyPattern:
    """Parsed positive and negative sub-patterns.

    Attributes:
        positive: Segments used for zero and positive amounts
        negative: Segments used for negative amounts; synthesized as a minus
            slot followed by the positive segments when the source pattern
            has no negative sub-pattern
        explicit_negative: Whether the source pattern had a negative sub-pattern
    """

    positive: SubPattern
    negative: SubPattern
    explicit_negative: bool = False

    def select(self, *, negative: bool) -> SubPattern:
        """Return the sub-pattern for an amount's sign."""
        return self.negative if negative else self.positive

    @property
    def has_currency(self) -> bool:
        """Whether the positive sub-pattern has a currency slot."""
        return any(segment.kind is SegmentKind.CURRENCY for segment in self.positive)


def _split_subpatterns(pattern: str) -> tuple[str, str | None]:
    """Split on the first unquoted ';'."""
    quoted = False
    for index, char in enumerate(pattern):
        if char == _QUOTE:
            quoted = not quoted
        elif char == _SEPARATOR and not quoted:
            return pattern[:index], pattern[index + 1 :]
    return pattern, None


def _run_end(text: str, start: int, chars: frozenset[str] | str) -> int:
    end = start
    while end < len(text) and text[end] in chars:
        end += 1
    return end


def _parse_subpattern(text: str) -> SubPattern:
    segments: list[Segment] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            segments.append(Segment(SegmentKind.LITERAL, "".join(literal)))
            literal.clear()

    def slot(kind: SegmentKind, source: str) -> None:
        flush()
        segments.append(Segment(kind, source))

    seen_number = False
    index = 0
    while index < len(text):
        char = text[index]
        if char == _QUOTE:
            if text.startswith("''", index):
                literal.append(_QUOTE)
                index += 2
                continue
            end = text.find(_QUOTE, index + 1)
            if end == -1:
                # Unterminated quote runs to the end of the sub-pattern
                literal.append(text[index + 1 :])
                break
            literal.append(text[index + 1 : end])
            index = end + 1
        elif char == CURRENCY_SIGN:
            end = _run_end(text, index, CURRENCY_SIGN)
            slot(SegmentKind.CURRENCY, text[index:end])
            index = end
        elif char in _NUMBER_CHARS and not seen_number:
            end = _run_end(text, index, _NUMBER_CHARS)
            slot(SegmentKind.NUMBER, text[index:end])
            seen_number = True
            index = end
        elif char == "+":
            slot(SegmentKind.PLUS, char)
            index += 1
        elif char == "-":
            slot(SegmentKind.MINUS, char)
            index += 1
        else:
            literal.append(char)
            index += 1
    flush()
    return tuple(segments)


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def parse_pattern(pattern: str) -> CurrencyPattern:
    """Parse a currency pattern into positive and negative segment tuples.

    Args:
        pattern: CLDR currency pattern (e.g., '¤#,##0.00', '#,##0.00 ¤')

    Returns:
        Parsed pattern. The empty pattern parses to an empty positive
        sub-pattern and a negative sub-pattern holding only a minus slot.

    Examples:
        >>> [s.kind.value for s in parse_pattern("¤#,##0.00").positive]
        ['currency', 'number']
        >>> [s.kind.value for s in parse_pattern("¤#,##0.00").negative]
        ['minus', 'currency', 'number']
    """
    positive_text, negative_text = _split_subpatterns(pattern)
    positive = _parse_subpattern(positive_text)
    if negative_text is None:
        negative = (Segment(SegmentKind.MINUS, "-"), *positive)
        return CurrencyPattern(positive=positive, negative=negative)
    return CurrencyPattern(
        positive=positive,
        negative=_parse_subpattern(negative_text),
        explicit_negative=True,
    )


def grouping_sizes(pattern: str) -> tuple[int, int]:
    """Primary and secondary grouping sizes implied by a pattern's number slot.

    Examples:
        >>> grouping_sizes("¤#,##0.00")
        (3, 3)
        >>> grouping_sizes("¤#,##,##0.00")
        (3, 2)
        >>> grouping_sizes("¤0.00")
        (0, 0)
    """
    for segment in parse_pattern(pattern).positive:
        if segment.kind is SegmentKind.NUMBER:
            integer_part = segment.text.split(".", 1)[0]
            groups = integer_part.split(",")
            if len(groups) < 2:
                return 0, 0
            primary = len(groups[-1])
            secondary = len(groups[-2]) if len(groups) > 2 else primary
            return primary, secondary
    return 0, 0
