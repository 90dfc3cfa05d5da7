# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Diagnostics and near-match suggestions for unrecognized names.

When a flag or command name is not recognized, the engine compares it against
every known name in scope using the Levenshtein edit distance. The closest
name is offered as a suggestion when it is within `MAX_SUGGESTION_DISTANCE`
edits and closer than the offending name is long (so a one-letter typo never
"suggests" an unrelated one-letter name).

Functions:
- edit_distance: Levenshtein distance between two strings.
- suggest: Best near-match for a name, or None.
- close_matches: All near-matches, closest first.
- unknown_flag_error / unknown_command_error: Build structured ParseErrors.
"""
from __future__ import annotations

from typing import Sequence

from argtree.exceptions import Location, UnknownCommandError, UnknownFlagError
from argtree.logger import logger

MAX_SUGGESTION_DISTANCE = 2


def edit_distance(source: str, target: str) -> int:
    """
    Return the Levenshtein distance between `source` and `target`.

    Counts the minimum number of single-character insertions, deletions and
    substitutions needed to turn one string into the other.
    """
    if source == target:
        return 0
    if not source:
        return len(target)
    if not target:
        return len(source)
    if len(source) < len(target):
        source, target = target, source

    previous = list(range(len(target) + 1))
    for i, source_char in enumerate(source, start=1):
        current = [i]
        for j, target_char in enumerate(target, start=1):
            cost = 0 if source_char == target_char else 1
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + cost,
                )
            )
        previous = current
    return previous[-1]


def _within_bound(name: str, distance: int, max_distance: int) -> bool:
    return distance <= max_distance and distance < len(name)


def close_matches(
    name: str,
    candidates: Sequence[str],
    max_distance: int = MAX_SUGGESTION_DISTANCE,
) -> list[str]:
    """
    Return every candidate close enough to `name` to be suggested.

    Results are ordered by distance, then by their order in `candidates`.
    """
    scored = [
        (edit_distance(name, candidate), index, candidate)
        for index, candidate in enumerate(candidates)
    ]
    return [
        candidate
        for distance, _, candidate in sorted(scored)
        if _within_bound(name, distance, max_distance)
    ]


def suggest(
    name: str,
    candidates: Sequence[str],
    max_distance: int = MAX_SUGGESTION_DISTANCE,
) -> str | None:
    """
    Return the candidate closest to `name`, or None if none is close enough.

    Ties resolve to the candidate listed first.
    """
    best: str | None = None
    best_distance: int | None = None
    for candidate in candidates:
        distance = edit_distance(name, candidate)
        if best_distance is None or distance < best_distance:
            best, best_distance = candidate, distance
    if best is None or best_distance is None:
        return None
    if not _within_bound(name, best_distance, max_distance):
        return None
    return best


def unknown_flag_error(
    token: str,
    name: str,
    candidates: Sequence[str],
    location: Location | None = None,
) -> UnknownFlagError:
    """
    Build an UnknownFlagError for `token`.

    Args:
        token (str): The token as typed, e.g. `--verbos` or `-x`.
        name (str): The name part looked up, e.g. `verbos` or `x`.
        candidates (Sequence[str]): Known names of the same kind.
        location (Location | None): Where the token sits in the token list.
    """
    suggestion = suggest(name, candidates)
    logger.debug("Unknown flag '%s' (suggestion: %s)", token, suggestion)
    return UnknownFlagError(
        "Unknown flag",
        token=token,
        suggestion=suggestion,
        alternatives=close_matches(name, candidates),
        location=location,
    )


def unknown_command_error(
    name: str,
    siblings: Sequence[str],
    path: str = "",
    location: Location | None = None,
) -> UnknownCommandError:
    """Build an UnknownCommandError listing the sibling command names."""
    suggestion = suggest(name, siblings)
    logger.debug(
        "Unknown command '%s' under '%s' (suggestion: %s)", name, path, suggestion
    )
    return UnknownCommandError(
        "Unknown command",
        token=name,
        suggestion=suggestion,
        alternatives=siblings,
        location=location,
        path=path,
    )
