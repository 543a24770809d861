"""Tool name to SOAP request mapping.

Argument extraction and validation happen here so that a bad call is
rejected before any request reaches the client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from studentvue_mcp import operations
from studentvue_mcp.operations import SoapRequest
from studentvue_mcp.tools.exceptions import ToolValidationError


@dataclass(frozen=True)
class ToolOperation:
    """How to turn one tool's arguments into a request."""

    name: str
    build: Callable[[dict], SoapRequest]


def require_str(args: dict, *names: str) -> tuple[str, ...]:
    """
    Extract required string arguments.

    Numbers are accepted and stringified, since hosts often send numeric
    identifiers and ZIP codes unquoted.

    Raises:
        ToolValidationError: An argument is missing, empty, or not a scalar.
    """
    if any(args.get(name) in (None, "") for name in names):
        raise ToolValidationError(f"{' and '.join(names)} {_noun(names)} required")

    values = []
    for name in names:
        value = args[name]
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            raise ToolValidationError(f"{name} must be a string")
        values.append(value if isinstance(value, str) else str(value))
    return tuple(values)


def optional_int(args: dict, name: str) -> int | None:
    """
    Extract an optional integer argument.

    Raises:
        ToolValidationError: Value is present but not an integer.
    """
    value = args.get(name)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    raise ToolValidationError(f"{name} must be an integer")


def include_flag(args: dict, name: str) -> bool:
    """Inclusion flags default to on; only an explicit False turns one off."""
    return args.get(name) is not False


def _noun(names: tuple[str, ...]) -> str:
    return "parameters are" if len(names) > 1 else "parameter is"


def _build_calendar(args: dict) -> SoapRequest:
    (date,) = require_str(args, "date")
    return operations.calendar(date)


def _build_document(args: dict) -> SoapRequest:
    (document_gu,) = require_str(args, "document_gu")
    return operations.document(document_gu)


def _build_report_card(args: dict) -> SoapRequest:
    (document_gu,) = require_str(args, "document_gu")
    return operations.report_card(document_gu)


def _build_mark_read(args: dict) -> SoapRequest:
    message_id, message_type = require_str(args, "message_id", "message_type")
    return operations.mark_message_read(message_id, message_type)


def _build_health_info(args: dict) -> SoapRequest:
    return operations.health_info(
        conditions=include_flag(args, "health_conditions"),
        visits=include_flag(args, "health_visits"),
        immunizations=include_flag(args, "health_immunizations"),
    )


def _build_attachment(args: dict) -> SoapRequest:
    (attachment_gu,) = require_str(args, "attachment_gu")
    return operations.message_attachment(attachment_gu)


def _build_districts(args: dict) -> SoapRequest:
    (zip_code,) = require_str(args, "zip_code")
    return operations.districts_by_zip(zip_code)


_BUILDERS: dict[str, Callable[[dict], SoapRequest]] = {
    "get_student_info": lambda args: operations.student_info(),
    "get_gradebook": lambda args: operations.gradebook(
        optional_int(args, "report_period")
    ),
    "get_attendance": lambda args: operations.attendance(),
    "get_messages": lambda args: operations.messages(),
    "get_calendar": _build_calendar,
    "get_class_schedule": lambda args: operations.class_schedule(
        optional_int(args, "term_index")
    ),
    "get_school_info": lambda args: operations.school_info(),
    "list_documents": lambda args: operations.list_documents(),
    "get_document": _build_document,
    "list_report_cards": lambda args: operations.list_report_cards(),
    "get_report_card": _build_report_card,
    "mark_message_read": _build_mark_read,
    "get_class_notes": lambda args: operations.class_notes(),
    "get_student_health_info": _build_health_info,
    "get_message_attachment": _build_attachment,
    "get_districts_by_zip": _build_districts,
}

TOOL_OPERATIONS: dict[str, ToolOperation] = {
    name: ToolOperation(name, build) for name, build in _BUILDERS.items()
}
