"""Plain-text rendering of command results for chat and terminal front ends."""

from collections.abc import Sequence

from addressbook.application.commands import DISPLAYED_INDEX_OFFSET, CommandResult
from addressbook.domain import Person


def format_person_list(persons: Sequence[Person]) -> str:
    """Numbered listing using display indices. Private fields are hidden."""
    return "\n".join(
        f"{i}. {person.as_text_hide_private()}"
        for i, person in enumerate(persons, start=DISPLAYED_INDEX_OFFSET)
    )


def format_result(result: CommandResult) -> str:
    if not result.relevant_persons:
        return result.feedback_to_user
    return f"{format_person_list(result.relevant_persons)}\n{result.feedback_to_user}"
