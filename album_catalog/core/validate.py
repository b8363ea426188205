"""Album Validation — pure field checks for create/update requests.

Invariants:
    - Returns {} for a valid album; otherwise one problem per invalid field
    - No state, no side effects

Design Decisions:
    - Empty means exactly "" (whitespace-only titles are accepted)
    - Length capped at the column width so oversize input is a 400, not a DB error
"""

from typing import Callable

MAX_TEXT_LENGTH = 255

Validator = Callable[[str, str, int], dict[str, str]]


def _check_text(value: str) -> str | None:
    if value == "":
        return "is empty"
    if len(value) > MAX_TEXT_LENGTH:
        return f"is longer than {MAX_TEXT_LENGTH} characters"
    return None


def validate_album(title: str, artist: str, price: int) -> dict[str, str]:
    """Map each invalid field to its problem description."""
    problems: dict[str, str] = {}
    if (problem := _check_text(title)) is not None:
        problems["title"] = problem
    if (problem := _check_text(artist)) is not None:
        problems["artist"] = problem
    if price <= 0:
        problems["price"] = "is not greater than zero"
    return problems
