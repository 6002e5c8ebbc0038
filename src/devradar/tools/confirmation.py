"""Interactive confirmation of unknown tool candidates.

Review Workflow::

    PENDING --Review--> REVIEWING --(last candidate / accept all / stop)--> DONE
       |
       +-----Ignore---------------------------------------------------> DONE

In REVIEWING each candidate gets one of four answers:

- ``ACCEPT``     -- keep it, move to the next candidate.
- ``SKIP``       -- drop it, move to the next candidate.
- ``ACCEPT_ALL`` -- keep it and every remaining candidate, finish.
- ``STOP``       -- drop it and every remaining candidate, finish.

``advance()`` is a pure transition over an immutable ``ReviewSession``;
``review_candidates()`` drives it through a ``ChoicePresenter`` so the
decision logic never depends on how answers are obtained. Accepted
candidates are then persisted by ``confirm_tools()``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Protocol

from devradar.storage.custom_tools import CustomToolStore
from devradar.tools.catalog import (
    AGENT_ICON,
    BUILTIN_TOOLS,
    IDE_ICON,
    ToolCategory,
    ToolDefinition,
    infer_category,
    known_aliases,
    to_title_case,
)
from devradar.tools.models import UnknownToolCandidate

logger = logging.getLogger(__name__)


class ReviewState(Enum):
    PENDING = "pending"
    REVIEWING = "reviewing"
    DONE = "done"


class BatchChoice(str, Enum):
    """Answer to the one-off "review these candidates?" prompt."""

    REVIEW = "Review"
    IGNORE = "Ignore"


class CandidateChoice(str, Enum):
    """Answer for a single candidate."""

    ACCEPT = "Add"
    SKIP = "Skip"
    ACCEPT_ALL = "Add all remaining"
    STOP = "Stop"


class ChoicePresenter(Protocol):
    """Anything that can ask a human to pick one of several options."""

    def present_choice(self, prompt: str, options: list[str]) -> str:
        ...


@dataclass(frozen=True)
class ReviewSession:
    """Immutable review progress.

    Attributes:
        candidates: All candidates under review, in presentation order.
        state: Current workflow state.
        index: Position of the candidate awaiting an answer.
        accepted: Candidates accepted so far, in order.
    """

    candidates: tuple[UnknownToolCandidate, ...]
    state: ReviewState = ReviewState.PENDING
    index: int = 0
    accepted: tuple[UnknownToolCandidate, ...] = field(default_factory=tuple)

    @property
    def current(self) -> UnknownToolCandidate | None:
        if self.state is not ReviewState.REVIEWING or self.index >= len(self.candidates):
            return None
        return self.candidates[self.index]


def start(session: ReviewSession, choice: BatchChoice) -> ReviewSession:
    """Apply the batch-level answer to a PENDING session.

    An empty candidate list goes straight to DONE.

    Raises:
        ValueError: If the session is not PENDING.
    """
    if session.state is not ReviewState.PENDING:
        raise ValueError(f"Cannot start a session in state {session.state.value}")
    if choice is BatchChoice.IGNORE or not session.candidates:
        return replace(session, state=ReviewState.DONE)
    return replace(session, state=ReviewState.REVIEWING, index=0)


def advance(session: ReviewSession, choice: CandidateChoice) -> ReviewSession:
    """Apply one per-candidate answer.

    Args:
        session: A REVIEWING session.
        choice: The answer for ``session.current``.

    Returns:
        The next session; DONE once no candidates remain.

    Raises:
        ValueError: If the session is not REVIEWING.
    """
    current = session.current
    if current is None:
        raise ValueError(f"No candidate awaiting review in state {session.state.value}")

    if choice is CandidateChoice.STOP:
        return replace(session, state=ReviewState.DONE)
    if choice is CandidateChoice.ACCEPT_ALL:
        remaining = session.candidates[session.index:]
        return replace(
            session,
            state=ReviewState.DONE,
            index=len(session.candidates),
            accepted=session.accepted + remaining,
        )

    accepted = session.accepted + (current,) if choice is CandidateChoice.ACCEPT else session.accepted
    next_index = session.index + 1
    state = ReviewState.DONE if next_index >= len(session.candidates) else ReviewState.REVIEWING
    return replace(session, state=state, index=next_index, accepted=accepted)


def review_candidates(
    candidates: list[UnknownToolCandidate],
    presenter: ChoicePresenter,
) -> list[UnknownToolCandidate]:
    """Ask a human which candidates to add.

    Args:
        candidates: Candidates from the discoverer.
        presenter: Source of answers.

    Returns:
        Accepted candidates, in presentation order.
    """
    session = ReviewSession(candidates=tuple(candidates))
    if not candidates:
        return []

    batch = presenter.present_choice(
        f"Found {len(candidates)} possible development tool(s) not in the catalog.",
        [c.value for c in BatchChoice],
    )
    session = start(session, BatchChoice(batch))

    while session.state is ReviewState.REVIEWING:
        candidate = session.current
        if candidate is None:
            break
        answer = presenter.present_choice(
            f"[{session.index + 1}/{len(session.candidates)}] "
            f"Add '{candidate.command}' ({candidate.source_path})?",
            [c.value for c in CandidateChoice],
        )
        session = advance(session, CandidateChoice(answer))
    return list(session.accepted)


def candidate_to_definition(candidate: UnknownToolCandidate) -> ToolDefinition:
    """Build a catalog entry for an accepted candidate."""
    command = candidate.command.lower()
    category = infer_category(command)
    return ToolDefinition(
        name=command,
        display_name=to_title_case(command),
        category=category,
        icon=IDE_ICON if category is ToolCategory.IDE else AGENT_ICON,
        command_aliases=(command,),
    )


def confirm_tools(
    candidates: list[UnknownToolCandidate],
    store: CustomToolStore,
    builtin_tools: list[ToolDefinition] | None = None,
) -> int:
    """Persist accepted candidates into the custom tool catalog.

    Candidates whose command already matches a built-in or custom name or
    alias (case-insensitively) are skipped, as are duplicates within
    ``candidates``. The file is written once, and only if something was
    added.

    Args:
        candidates: Accepted candidates.
        store: The custom tool persistence.
        builtin_tools: Override the built-in table (tests).

    Returns:
        Number of definitions added.
    """
    if not candidates:
        return 0

    custom = store.load()
    builtins = BUILTIN_TOOLS if builtin_tools is None else builtin_tools
    existing = known_aliases([*builtins, *custom])

    added = 0
    for candidate in candidates:
        command = candidate.command.lower()
        if not command or command in existing:
            continue
        custom.append(candidate_to_definition(candidate))
        existing.add(command)
        added += 1

    if added and not store.save(custom):
        logger.warning("Could not save %d new tool(s) to %s", added, store.path)
        return 0
    logger.info("Added %d custom tool(s)", added)
    return added
