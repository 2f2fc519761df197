"""Shared keybinding contract for the tutorial screen."""

from __future__ import annotations

from typing import TypeAlias

Binding: TypeAlias = tuple[str, str, str]

NEXT_RIGHT_BINDING: Binding = ("right", "next", "Next")
NEXT_L_BINDING: Binding = ("l", "next", "Next")
NEXT_SPACE_BINDING: Binding = ("space", "next", "Next")
BACK_LEFT_BINDING: Binding = ("left", "back", "Back")
BACK_H_BINDING: Binding = ("h", "back", "Back")
SKIP_S_BINDING: Binding = ("s", "skip", "Skip")
SKIP_ESCAPE_BINDING: Binding = ("escape", "skip", "Skip")
DONE_ENTER_BINDING: Binding = ("enter", "done", "Done")
QUIT_Q_BINDING: Binding = ("q", "quit", "Quit")


def compose_bindings(*bindings: Binding) -> list[Binding]:
    """Return binding tuples in order."""
    return list(bindings)
