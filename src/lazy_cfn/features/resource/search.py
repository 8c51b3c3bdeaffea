"""Fuzzy search over resource choices."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from prompt_toolkit.completion import Completer, Completion
from rapidfuzz import fuzz, process, utils

from ...core.types import ResourceChoice

if TYPE_CHECKING:
    from prompt_toolkit.completion import CompleteEvent
    from prompt_toolkit.document import Document

FUZZY_MIN_SCORE = 60


def suggest(text: str, choices: list[ResourceChoice]) -> list[ResourceChoice]:
    """Choices whose label approximately matches text, best match first.

    Empty input returns every choice unchanged.
    """
    if not text.strip():
        return list(choices)
    if not choices:
        return []

    matches = process.extract(
        text,
        [choice["label"] for choice in choices],
        scorer=fuzz.WRatio,
        processor=utils.default_process,
        score_cutoff=FUZZY_MIN_SCORE,
        limit=None,
    )
    # Equal scores keep the original choice order.
    matches = sorted(matches, key=lambda match: (-match[1], match[2]))
    return [choices[index] for _label, _score, index in matches]


class ResourceCompleter(Completer):
    """Completer backing the resource autocomplete prompt with fuzzy suggestions."""

    def __init__(self, choices: list[ResourceChoice]) -> None:
        self.choices = choices

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        text = document.text_before_cursor
        for choice in suggest(text, self.choices):
            yield Completion(choice["label"], start_position=-len(text))
