from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NavResult:
    active_index: int
    show_suggestions: bool
    selected_index: int | None = None  # set only when Enter picks an item


def navigate(active_index: int, key: str, count: int, show_suggestions: bool) -> NavResult:
    if not show_suggestions or count <= 0:
        return NavResult(active_index=-1, show_suggestions=show_suggestions)

    if key == "ArrowDown":
        nxt = 0 if active_index >= count - 1 else active_index + 1
        return NavResult(active_index=nxt, show_suggestions=True)
    if key == "ArrowUp":
        nxt = count - 1 if active_index <= 0 else active_index - 1
        return NavResult(active_index=nxt, show_suggestions=True)
    if key == "Enter":
        if 0 <= active_index < count:
            return NavResult(active_index=active_index, show_suggestions=True, selected_index=active_index)
        return NavResult(active_index=active_index, show_suggestions=True)
    if key == "Escape":
        return NavResult(active_index=-1, show_suggestions=False)

    return NavResult(active_index=active_index, show_suggestions=True)
