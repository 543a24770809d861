"""MCP tool schema definitions."""

from __future__ import annotations

_NO_PARAMETERS: dict = {
    "type": "object",
    "properties": {},
    "required": [],
}

GET_STUDENT_INFO_SCHEMA: dict = {
    "name": "get_student_info",
    "description": (
        "Retrieve student profile information including name, grade, school, "
        "contact info, and counselor details"
    ),
    "inputSchema": _NO_PARAMETERS,
}

GET_GRADEBOOK_SCHEMA: dict = {
    "name": "get_gradebook",
    "description": (
        "Retrieve current grades, assignments, and course information. "
        "Optionally specify a report period."
    ),
    "inputSchema": {
        "type": "object",
        "properties": {
            "report_period": {
                "type": "number",
                "description": "Optional report period number to retrieve grades for",
            },
        },
        "required": [],
    },
}

GET_ATTENDANCE_SCHEMA: dict = {
    "name": "get_attendance",
    "description": "Retrieve attendance records including absences, tardies, and reasons",
    "inputSchema": _NO_PARAMETERS,
}

GET_MESSAGES_SCHEMA: dict = {
    "name": "get_messages",
    "description": "Retrieve inbox messages from teachers and administrators",
    "inputSchema": _NO_PARAMETERS,
}

GET_CALENDAR_SCHEMA: dict = {
    "name": "get_calendar",
    "description": "Retrieve calendar events and upcoming assignments for a specific date",
    "inputSchema": {
        "type": "object",
        "properties": {
            "date": {
                "type": "string",
                "description": "Date in MM/DD/YYYY format",
            },
        },
        "required": ["date"],
    },
}

GET_CLASS_SCHEDULE_SCHEMA: dict = {
    "name": "get_class_schedule",
    "description": "Retrieve class schedule with periods, teachers, and room assignments",
    "inputSchema": {
        "type": "object",
        "properties": {
            "term_index": {
                "type": "number",
                "description": "Optional term index to retrieve schedule for",
            },
        },
        "required": [],
    },
}

GET_SCHOOL_INFO_SCHEMA: dict = {
    "name": "get_school_info",
    "description": (
        "Retrieve school details including principal, address, phone, "
        "and contact information"
    ),
    "inputSchema": _NO_PARAMETERS,
}

LIST_DOCUMENTS_SCHEMA: dict = {
    "name": "list_documents",
    "description": "List all available student documents",
    "inputSchema": _NO_PARAMETERS,
}

GET_DOCUMENT_SCHEMA: dict = {
    "name": "get_document",
    "description": "Download a specific document by GUID. Returns base64-encoded document data.",
    "inputSchema": {
        "type": "object",
        "properties": {
            "document_gu": {
                "type": "string",
                "description": "The document GUID to retrieve",
            },
        },
        "required": ["document_gu"],
    },
}

LIST_REPORT_CARDS_SCHEMA: dict = {
    "name": "list_report_cards",
    "description": "List available report cards by grading period",
    "inputSchema": _NO_PARAMETERS,
}

GET_REPORT_CARD_SCHEMA: dict = {
    "name": "get_report_card",
    "description": "Download a specific report card by GUID. Returns base64-encoded PDF data.",
    "inputSchema": {
        "type": "object",
        "properties": {
            "document_gu": {
                "type": "string",
                "description": "The report card document GUID to retrieve",
            },
        },
        "required": ["document_gu"],
    },
}

MARK_MESSAGE_READ_SCHEMA: dict = {
    "name": "mark_message_read",
    "description": "Mark a specific message as read",
    "inputSchema": {
        "type": "object",
        "properties": {
            "message_id": {
                "type": "string",
                "description": "The message ID to mark as read",
            },
            "message_type": {
                "type": "string",
                "description": "The message type",
            },
        },
        "required": ["message_id", "message_type"],
    },
}

GET_CLASS_NOTES_SCHEMA: dict = {
    "name": "get_class_notes",
    "description": "Retrieve homework notes (availability depends on district configuration)",
    "inputSchema": _NO_PARAMETERS,
}

GET_STUDENT_HEALTH_INFO_SCHEMA: dict = {
    "name": "get_student_health_info",
    "description": (
        "Retrieve student health information including conditions, visits, "
        "and immunizations"
    ),
    "inputSchema": {
        "type": "object",
        "properties": {
            "health_conditions": {
                "type": "boolean",
                "description": "Include health conditions",
                "default": True,
            },
            "health_visits": {
                "type": "boolean",
                "description": "Include health visits",
                "default": True,
            },
            "health_immunizations": {
                "type": "boolean",
                "description": "Include immunization records",
                "default": True,
            },
        },
        "required": [],
    },
}

GET_MESSAGE_ATTACHMENT_SCHEMA: dict = {
    "name": "get_message_attachment",
    "description": (
        "Download a message attachment by GUID. Returns base64-encoded attachment data."
    ),
    "inputSchema": {
        "type": "object",
        "properties": {
            "attachment_gu": {
                "type": "string",
                "description": "The attachment GUID from a message listing",
            },
        },
        "required": ["attachment_gu"],
    },
}

GET_DISTRICTS_BY_ZIP_SCHEMA: dict = {
    "name": "get_districts_by_zip",
    "description": "Search for school districts by ZIP code",
    "inputSchema": {
        "type": "object",
        "properties": {
            "zip_code": {
                "type": "string",
                "description": "5-digit ZIP code to search",
            },
        },
        "required": ["zip_code"],
    },
}

# All tool schemas
ALL_TOOL_SCHEMAS: list[dict] = [
    GET_STUDENT_INFO_SCHEMA,
    GET_GRADEBOOK_SCHEMA,
    GET_ATTENDANCE_SCHEMA,
    GET_MESSAGES_SCHEMA,
    GET_CALENDAR_SCHEMA,
    GET_CLASS_SCHEDULE_SCHEMA,
    GET_SCHOOL_INFO_SCHEMA,
    LIST_DOCUMENTS_SCHEMA,
    GET_DOCUMENT_SCHEMA,
    LIST_REPORT_CARDS_SCHEMA,
    GET_REPORT_CARD_SCHEMA,
    MARK_MESSAGE_READ_SCHEMA,
    GET_CLASS_NOTES_SCHEMA,
    GET_STUDENT_HEALTH_INFO_SCHEMA,
    GET_MESSAGE_ATTACHMENT_SCHEMA,
    GET_DISTRICTS_BY_ZIP_SCHEMA,
]


def get_all_tool_schemas() -> list[dict]:
    """Return all tool schemas in MCP tool listing format.

    Returns:
        List of tool definitions, each with 'name', 'description', and
        'inputSchema' (a JSON schema object).
    """
    return list(ALL_TOOL_SCHEMAS)
