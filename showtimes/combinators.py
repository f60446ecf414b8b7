"""Small text matchers and the combinators that compose them.

A matcher is any callable taking the input string and returning either
``Match(text, rest)`` or ``NoMatch(input)``. A failing matcher hands back the
exact string it was given, so callers can fall back and try something else
without tracking positions.

    >>> sequence([digit, literal("PM")])("1PM, $10")
    Match(text='1PM', rest=', $10')
"""

from string import digits
from typing import Callable, List, Union

from .models import Match, NoMatch

Result = Union[Match, NoMatch]
Matcher = Callable[[str], Result]


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------

def literal(expected: str) -> Matcher:
    """Match ``expected`` at the start of the input."""
    def match(text: str) -> Result:
        if text.startswith(expected):
            return Match(expected, text[len(expected):])
        return NoMatch(text)
    return match


def digit(text: str) -> Result:
    """Match a single ASCII digit."""
    if text and text[0] in digits:
        return Match(text[0], text[1:])
    return NoMatch(text)


def rest(text: str) -> Result:
    """Consume whatever is left. Never fails."""
    return Match(text, "")


# ---------------------------------------------------------------------------
# Combinators
# ---------------------------------------------------------------------------

def sequence(matchers: List[Matcher]) -> Matcher:
    """All matchers in order, each on what the previous one left."""
    def match(text: str) -> Result:
        matched = []
        remaining = text
        for matcher in matchers:
            result = matcher(remaining)
            if not result:
                return NoMatch(text)
            matched.append(result.text)
            remaining = result.rest
        return Match("".join(matched), remaining)
    return match


def alternation(matchers: List[Matcher]) -> Matcher:
    """First matcher that succeeds, tried in listed order."""
    def match(text: str) -> Result:
        for matcher in matchers:
            result = matcher(text)
            if result:
                return result
        return NoMatch(text)
    return match


def optional(matcher: Matcher) -> Matcher:
    """Inner match if there is one, otherwise an empty match."""
    def match(text: str) -> Result:
        result = matcher(text)
        if result:
            return result
        return Match("", text)
    return match


def one_or_more(matcher: Matcher) -> Matcher:
    """Repeat ``matcher`` as long as it keeps matching. Needs at least one hit."""
    def match(text: str) -> Result:
        matched = []
        remaining = text
        while remaining:
            result = matcher(remaining)
            if not result:
                break
            matched.append(result.text)
            if result.rest == remaining:
                # Zero-width match, repeating it would never end
                break
            remaining = result.rest
        if not matched:
            return NoMatch(text)
        return Match("".join(matched), remaining)
    return match


def scan_until(matcher: Matcher, text: str) -> Result:
    """Walk forward until ``matcher`` succeeds somewhere in ``text``.

    Returns ``Match(prefix, remainder)`` where ``prefix`` is everything skipped
    and ``remainder`` starts at the position where ``matcher`` matched. The
    cost is one matcher call per position tried.

        >>> scan_until(sequence([literal(". "), digit]), "foobar. 8PM")
        Match(text='foobar', rest='. 8PM')
    """
    for index in range(len(text)):
        if matcher(text[index:]):
            return Match(text[:index], text[index:])
    return NoMatch(text)
