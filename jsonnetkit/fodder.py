"""Fodder: whitespace and comments kept alongside tokens for faithful round trips."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import Enum


class FodderKind(Enum):
    """The kind of a single piece of fodder."""

    LINE_END = 0
    """A line ending, optionally preceded by one comment on the same line."""
    INTERSTITIAL = 1
    """A C-style comment in the middle of a line."""
    PARAGRAPH = 2
    """A comment of at least one line, indented like the preceding line."""


@dataclass
class FodderElement:
    """A single piece of fodder."""

    kind: FodderKind
    blanks: int = 0
    indent: int = 0
    comment: list[str] = field(default_factory=list)


def make_fodder_element(
    kind: FodderKind, blanks: int, indent: int, comment: Iterable[str]
) -> FodderElement:
    """Build a fodder element, checking that it is well formed."""
    comment = list(comment)
    if kind is FodderKind.LINE_END and len(comment) > 1:
        raise ValueError(f"FodderLineEnd but comment == {comment}.")
    if kind is FodderKind.INTERSTITIAL:
        if blanks > 0:
            raise ValueError(f"FodderInterstitial but blanks == {blanks}")
        if indent > 0:
            raise ValueError(f"FodderInterstitial but indent == {indent}")
        if len(comment) != 1:
            raise ValueError(f"FodderInterstitial but comment == {comment}.")
    if kind is FodderKind.PARAGRAPH and not comment:
        raise ValueError("FodderParagraph but comment was empty")
    return FodderElement(kind=kind, blanks=blanks, indent=indent, comment=comment)


def has_clean_endline(fodder: list[FodderElement]) -> bool:
    """True if the fodder is not empty and does not end with an interstitial."""
    return bool(fodder) and fodder[-1].kind is not FodderKind.INTERSTITIAL


def fodder_append(fodder: list[FodderElement], elem: FodderElement) -> None:
    """Append ``elem`` to ``fodder`` in place, keeping the fodder well formed.

    A line end may not follow a paragraph or another line end: it is merged
    into the previous element, or turned into a paragraph if it has a comment.
    """
    if has_clean_endline(fodder) and elem.kind is FodderKind.LINE_END:
        if elem.comment:
            fodder.append(
                make_fodder_element(
                    FodderKind.PARAGRAPH, elem.blanks, elem.indent, elem.comment
                )
            )
        else:
            back = fodder[-1]
            fodder[-1] = replace(
                back, indent=elem.indent, blanks=back.blanks + elem.blanks
            )
        return
    if not has_clean_endline(fodder) and elem.kind is FodderKind.PARAGRAPH:
        fodder.append(make_fodder_element(FodderKind.LINE_END, 0, elem.indent, []))
    fodder.append(elem)


def fodder_concat(
    a: list[FodderElement], b: list[FodderElement]
) -> list[FodderElement]:
    """Return ``a`` followed by ``b``, keeping the result well formed."""
    if not a:
        return list(b)
    if not b:
        return list(a)
    result = list(a)
    fodder_append(result, b[0])
    result.extend(b[1:])
    return result


def fodder_move_front(a: list[FodderElement], b: list[FodderElement]) -> None:
    """Move the contents of ``b`` to the front of ``a``, leaving ``b`` empty."""
    a[:] = fodder_concat(b, a)
    b.clear()


def ensure_clean_newline(fodder: list[FodderElement]) -> None:
    """Add a line end to ``fodder`` in place if it does not end cleanly."""
    if not has_clean_endline(fodder):
        fodder_append(fodder, make_fodder_element(FodderKind.LINE_END, 0, 0, []))


def element_count_newlines(elem: FodderElement) -> int:
    """The number of newline characters a fodder element stands for."""
    if elem.kind is FodderKind.INTERSTITIAL:
        return 0
    if elem.kind is FodderKind.LINE_END:
        return 1
    if elem.kind is FodderKind.PARAGRAPH:
        return len(elem.comment) + elem.blanks
    raise ValueError(f"Unknown FodderElement kind {elem.kind}")


def count_newlines(fodder: Iterable[FodderElement]) -> int:
    """The number of newline characters the fodder stands for."""
    return sum(element_count_newlines(elem) for elem in fodder)