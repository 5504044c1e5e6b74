"""Configuration constants for checklist-reorder."""

from pathlib import Path

# Line prefixes which make a line a checklist item at all.
DEFAULT_STATUSES: tuple[str, ...] = ("- [ ]", "- [/]", "- [x]", "- [-]", "- [>]", "- [<]")

# Status prefixes defining the primary sort rank. Later entries rank higher and
# sort first; unlisted statuses sort last.
DEFAULT_SORTED_STATUSES: tuple[str, ...] = ("- [x]", "- [-]")

# Priority markers, from high to low, matched anywhere in the line.
DEFAULT_SORTED_SUBSTRINGS: tuple[str, ...] = ("🔺", "⏫", "🔽", "⏬")

# A checklist block is left alone when one of these appears in it or right above it.
DEFAULT_IGNORE_SUBSTRINGS: tuple[str, ...] = ("#donotsort",)

# Settings file location. First file found is used; the first entry is where we save.
SETTINGS_FILES: list[Path] = [
    Path("~/.config/checklist-reorder/settings.json").expanduser(),
    Path("~/.checklist-reorder.json").expanduser(),
]

# Seconds between watcher ticks.
DEFAULT_INTERVAL_SECONDS: int = 5
MAX_INTERVAL_SECONDS: int = 999
# Shortest pause of the watch loop, also used when the interval is 0.
MIN_SLEEP_SECONDS: float = 0.1


def resolve_settings_file() -> Path:
    """Return the first existing settings file, or the default location."""
    for candidate in SETTINGS_FILES:
        if candidate.is_file():
            return candidate
    return SETTINGS_FILES[0]
