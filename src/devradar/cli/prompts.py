"""Terminal prompts for the tool confirmation workflow."""

from __future__ import annotations

import questionary
from questionary import Style

STYLE = Style([
    ("qmark", "fg:cyan bold"),
    ("question", "bold"),
    ("answer", "fg:cyan"),
    ("pointer", "fg:cyan bold"),
    ("highlighted", "fg:cyan bold"),
    ("selected", "fg:green"),
    ("instruction", "fg:gray"),
])


class QuestionaryPresenter:
    """``ChoicePresenter`` backed by an interactive select menu.

    Aborting a prompt (Ctrl-C) picks the last option. The workflow lists
    its "end without changes" answer (Ignore, Stop) last.
    """

    def present_choice(self, prompt: str, options: list[str]) -> str:
        answer = questionary.select(prompt, choices=options, style=STYLE).ask()
        if answer is None:
            return options[-1]
        return answer
