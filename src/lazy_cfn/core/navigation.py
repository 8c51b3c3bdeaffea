"""Prompt helpers shared by the UI components."""

from __future__ import annotations

from typing import TYPE_CHECKING

import questionary

from .errors import UserCancelledError

if TYPE_CHECKING:
    from prompt_toolkit.completion import Completer


def get_questionary_style() -> questionary.Style:
    """Consistent questionary styling across all prompts."""
    return questionary.Style(
        [
            ("qmark", "fg:cyan bold"),
            ("question", "bold"),
            ("answer", "fg:cyan"),
            ("pointer", "fg:cyan bold"),
            ("highlighted", "fg:cyan"),
            ("selected", "fg:green"),
        ]
    )


def ask_text(prompt: str, default: str = "") -> str:
    """Free text prompt. Raises UserCancelledError on Ctrl-C."""
    answer = questionary.text(prompt, default=default, style=get_questionary_style()).ask()
    if answer is None:
        raise UserCancelledError()
    return answer.strip()


def select_many(prompt: str, choices: list[dict[str, str]]) -> list[str]:
    """Multi-select prompt returning the selected values. Raises UserCancelledError on Ctrl-C."""
    checkbox_choices = [questionary.Choice(choice["name"], choice["value"]) for choice in choices]
    selected = questionary.checkbox(prompt, choices=checkbox_choices, style=get_questionary_style()).ask()
    if selected is None:
        raise UserCancelledError()
    return selected


def autocomplete_select(prompt: str, labels: list[str], completer: Completer) -> str | None:
    """Type-ahead selection restricted to one of labels. Returns None when the user cancels."""
    known_labels = set(labels)
    return questionary.autocomplete(
        prompt,
        choices=labels,
        completer=completer,
        validate=lambda text: text in known_labels or "Pick one of the suggested resources",
        style=get_questionary_style(),
    ).ask()
