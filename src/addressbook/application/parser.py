"""Turns one line of user input into a Command."""

import re

from addressbook.application.commands import (
    AddCommand,
    ClearCommand,
    Command,
    DeleteCommand,
    FindCommand,
    HelpCommand,
    IncorrectCommand,
    ListCommand,
    UpdateCommand,
    ViewAllCommand,
    ViewCommand,
)
from addressbook.application.messages import (
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
)
from addressbook.domain import InvalidFormatError

BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)

# '/' is the prefix separator, so field values cannot contain it.
PERSON_DATA_ARGS_FORMAT = re.compile(
    r"(?P<name>[^/]+)"
    r" (?P<is_phone_private>p?)p/(?P<phone>[^/]+)"
    r" (?P<is_email_private>p?)e/(?P<email>[^/]+)"
    r" (?P<is_address_private>p?)a/(?P<address>[^/]+)"
    r"(?P<tag_arguments>(?: t/[^/]+)*)"
)
INDEXED_PERSON_DATA_ARGS_FORMAT = re.compile(r"(?P<target_index>\S+) (?P<person_args>.+)", re.DOTALL)
KEYWORDS_ARGS_FORMAT = re.compile(r"(?P<keywords>\S+(?:\s+\S+)*)")
INDEX_ARGS_FORMAT = re.compile(r"(?P<target_index>\S+)")
INDEX_TOKEN_FORMAT = re.compile(r"[+-]?[0-9]+")


class ParseError(ValueError):
    """Arguments do not match the expected format."""


def _extract_tags(tag_arguments: str) -> list[str]:
    if not tag_arguments:
        return []
    # Drop the leading " t/" then split on the remaining separators.
    return tag_arguments.replace(" t/", "\n").split("\n")[1:]


def _parse_index(raw: str) -> int:
    """Signed ASCII-digit display index. Range is checked at execution, not here."""
    if not INDEX_TOKEN_FORMAT.fullmatch(raw):
        raise ValueError(f"Not a displayed index: {raw!r}")
    return int(raw)


def _match_person_args(args: str) -> re.Match:
    matcher = PERSON_DATA_ARGS_FORMAT.fullmatch(args)
    if not matcher:
        raise ParseError(args)
    return matcher


def _person_kwargs(matcher: re.Match) -> dict:
    return {
        "name": matcher["name"],
        "phone": matcher["phone"],
        "is_phone_private": bool(matcher["is_phone_private"]),
        "email": matcher["email"],
        "is_email_private": bool(matcher["is_email_private"]),
        "address": matcher["address"],
        "is_address_private": bool(matcher["is_address_private"]),
        "tags": _extract_tags(matcher["tag_arguments"]),
    }


def _prepare_add(args: str) -> Command:
    try:
        matcher = _match_person_args(args.strip())
    except ParseError:
        return IncorrectCommand(MESSAGE_INVALID_COMMAND_FORMAT.format(AddCommand.MESSAGE_USAGE))
    try:
        return AddCommand.from_raw(**_person_kwargs(matcher))
    except InvalidFormatError as e:
        return IncorrectCommand(e.message)


def _prepare_update(args: str) -> Command:
    usage = MESSAGE_INVALID_COMMAND_FORMAT.format(UpdateCommand.MESSAGE_USAGE)
    indexed = INDEXED_PERSON_DATA_ARGS_FORMAT.fullmatch(args.strip())
    if not indexed:
        return IncorrectCommand(usage)
    try:
        matcher = _match_person_args(indexed["person_args"].strip())
    except ParseError:
        return IncorrectCommand(usage)
    try:
        target_index = _parse_index(indexed["target_index"])
    except ValueError:
        return IncorrectCommand(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
    try:
        return UpdateCommand.from_raw(target_index, **_person_kwargs(matcher))
    except InvalidFormatError as e:
        return IncorrectCommand(e.message)


def _prepare_indexed(command_cls: type[Command], args: str) -> Command:
    matcher = INDEX_ARGS_FORMAT.fullmatch(args.strip())
    if not matcher:
        return IncorrectCommand(MESSAGE_INVALID_COMMAND_FORMAT.format(command_cls.MESSAGE_USAGE))
    try:
        return command_cls(_parse_index(matcher["target_index"]))
    except ValueError:
        return IncorrectCommand(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)


def _prepare_find(args: str) -> Command:
    matcher = KEYWORDS_ARGS_FORMAT.fullmatch(args.strip())
    if not matcher:
        return IncorrectCommand(MESSAGE_INVALID_COMMAND_FORMAT.format(FindCommand.MESSAGE_USAGE))
    return FindCommand(matcher["keywords"].split())


def parse_command(user_input: str) -> Command:
    """Parse user input into a command. Never raises; bad input becomes IncorrectCommand."""
    matcher = BASIC_COMMAND_FORMAT.fullmatch((user_input or "").strip())
    if not matcher:
        return IncorrectCommand(MESSAGE_INVALID_COMMAND_FORMAT.format(HelpCommand.MESSAGE_USAGE))

    command_word = matcher["command_word"]
    arguments = matcher["arguments"]

    if command_word == AddCommand.COMMAND_WORD:
        return _prepare_add(arguments)
    if command_word == UpdateCommand.COMMAND_WORD:
        return _prepare_update(arguments)
    if command_word == DeleteCommand.COMMAND_WORD:
        return _prepare_indexed(DeleteCommand, arguments)
    if command_word == ViewCommand.COMMAND_WORD:
        return _prepare_indexed(ViewCommand, arguments)
    if command_word == ViewAllCommand.COMMAND_WORD:
        return _prepare_indexed(ViewAllCommand, arguments)
    if command_word == FindCommand.COMMAND_WORD:
        return _prepare_find(arguments)
    if command_word == ListCommand.COMMAND_WORD:
        return ListCommand()
    if command_word == ClearCommand.COMMAND_WORD:
        return ClearCommand()
    return HelpCommand()
