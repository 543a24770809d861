"""Catalogue of StudentVue web service operations.

Each function here is pure: it returns the ``SoapRequest`` for one operation
and performs no I/O. ``StudentVueClient.send`` turns a request into an HTTP
exchange.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from studentvue_mcp import soap

PXP_SERVICES = "PXPWebServices"
HD_INFO_SERVICES = "HDInfoServices"

# Partner key for the public district directory
DISTRICT_LOOKUP_KEY = "5E4B7859-B805-474B-A833-FDB15D205D40"


@dataclass(frozen=True)
class SoapRequest:
    """One call to the portal web service."""

    service_handle: str
    method_name: str
    params: dict[str, str] = field(default_factory=dict)
    multi_web: bool = False
    param_block: str | None = None  # Replaces params when set
    directory_lookup: bool = False  # Public district directory, partner credentials

    def render_param_block(self) -> str:
        """Return the inner ``<Parms>`` document (unescaped)."""
        if self.param_block is not None:
            return self.param_block
        return soap.render_params(self.params)


def _pxp(
    method_name: str,
    params: dict[str, str],
    *,
    multi_web: bool = False,
) -> SoapRequest:
    return SoapRequest(PXP_SERVICES, method_name, params, multi_web=multi_web)


def _flag(value: bool) -> str:
    return "true" if value else "false"


def student_info() -> SoapRequest:
    return _pxp("StudentInfo", {"ChildIntID": "0"})


def gradebook(report_period: int | None = None) -> SoapRequest:
    params = {"ChildIntID": "0"}
    if report_period is not None:
        params["ReportPeriod"] = str(report_period)
    return _pxp("Gradebook", params)


def attendance() -> SoapRequest:
    return _pxp("Attendance", {"ChildIntID": "0"})


def messages() -> SoapRequest:
    return _pxp("GetPXPMessages", {"childIntID": "0"})


def calendar(date: str) -> SoapRequest:
    """Calendar for the month containing ``date`` (MM/DD/YYYY)."""
    return _pxp("StudentCalendar", {"childIntID": "0", "RequestDate": date})


def class_schedule(term_index: int | None = None) -> SoapRequest:
    params = {"childIntID": "0"}
    if term_index is not None:
        params["TermIndex"] = str(term_index)
    return _pxp("StudentClassList", params)


def school_info() -> SoapRequest:
    return _pxp("StudentSchoolInfo", {"childIntID": "0"})


def list_documents() -> SoapRequest:
    return _pxp("GetStudentDocumentInitialData", {"childIntID": "0"})


def document(document_gu: str) -> SoapRequest:
    """Document content; the payload carries base64 data."""
    return _pxp("GetContentOfAttachedDoc", {"DocumentGU": document_gu})


def list_report_cards() -> SoapRequest:
    return _pxp("GetReportCardInitialData", {"childIntID": "0"})


def report_card(document_gu: str) -> SoapRequest:
    """Report card PDF; the payload carries base64 data."""
    return _pxp("GetReportCardDocumentData", {"DocumentGU": document_gu})


def mark_message_read(message_id: str, message_type: str) -> SoapRequest:
    return SoapRequest(
        PXP_SERVICES,
        "UpdatePXPMessage",
        multi_web=True,
        param_block=soap.render_message_listing(message_id, message_type),
    )


def class_notes() -> SoapRequest:
    return _pxp("StudentHWNotes", {"childIntID": "0"})


def health_info(
    conditions: bool = True,
    visits: bool = True,
    immunizations: bool = True,
) -> SoapRequest:
    return _pxp(
        "StudentHealthInfo",
        {
            "ChildIntID": "0",
            "HealthConditions": _flag(conditions),
            "HealthVisits": _flag(visits),
            "HealthImmunizations": _flag(immunizations),
        },
        multi_web=True,
    )


def message_attachment(attachment_gu: str) -> SoapRequest:
    """Synergy Mail attachment; the payload carries base64 data."""
    return _pxp(
        "SynergyMailGetAttachment",
        {"childIntID": "", "SmAttachmentGU": attachment_gu},
        multi_web=True,
    )


def districts_by_zip(zip_code: str) -> SoapRequest:
    """District directory lookup. Not tied to the configured account."""
    return SoapRequest(
        HD_INFO_SERVICES,
        "GetMatchingDistrictList",
        {"Key": DISTRICT_LOOKUP_KEY, "MatchToDistrictZipCode": zip_code},
        directory_lookup=True,
    )
