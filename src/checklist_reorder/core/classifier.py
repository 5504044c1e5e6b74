"""Line classification: root checklist items, sub-items and plain text."""

from collections.abc import Iterable

from checklist_reorder.models.checklist import Line


def usable_matchers(matchers: Iterable[str]) -> list[str]:
    """Drop empty and whitespace-only entries, which would otherwise match every line."""
    return [m for m in matchers if m and m.strip()]


def starts_with_any(text: str, prefixes: Iterable[str]) -> bool:
    return any(text.startswith(p) for p in usable_matchers(prefixes))


def is_root_checklist(text: str, statuses: Iterable[str]) -> bool:
    """Check whether the untrimmed line starts with a status prefix."""
    return starts_with_any(text, statuses)


def is_checklist_anywhere(text: str, statuses: Iterable[str]) -> bool:
    """Check whether the line is a checklist item at any indentation."""
    return starts_with_any(text.strip(), statuses)


def classify(text: str, statuses: Iterable[str], *, has_caret: bool = False) -> Line:
    """Classify a raw line.

    Args:
        text: The line, including leading whitespace.
        statuses: Prefixes that make a line a checklist item.
        has_caret: Whether the caret sits on this line.

    Returns:
        A Line carrying both membership flags.
    """
    statuses = usable_matchers(statuses)
    return Line(
        text=text,
        is_root_checklist=is_root_checklist(text, statuses),
        is_checklist_anywhere=is_checklist_anywhere(text, statuses),
        has_caret=has_caret,
    )
