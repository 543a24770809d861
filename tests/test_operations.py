"""Tests for the operation catalogue and tool argument handling."""

import pytest

from studentvue_mcp import operations
from studentvue_mcp.operations import DISTRICT_LOOKUP_KEY, SoapRequest
from studentvue_mcp.tools import TOOL_OPERATIONS, ToolValidationError, get_all_tool_schemas
from studentvue_mcp.tools.operations import include_flag, optional_int, require_str


class TestCatalogue:
    @pytest.mark.parametrize(
        "request_, method, params, multi_web",
        [
            (operations.student_info(), "StudentInfo", {"ChildIntID": "0"}, False),
            (operations.gradebook(), "Gradebook", {"ChildIntID": "0"}, False),
            (operations.attendance(), "Attendance", {"ChildIntID": "0"}, False),
            (operations.messages(), "GetPXPMessages", {"childIntID": "0"}, False),
            (
                operations.calendar("09/01/2024"),
                "StudentCalendar",
                {"childIntID": "0", "RequestDate": "09/01/2024"},
                False,
            ),
            (operations.class_schedule(), "StudentClassList", {"childIntID": "0"}, False),
            (operations.school_info(), "StudentSchoolInfo", {"childIntID": "0"}, False),
            (
                operations.list_documents(),
                "GetStudentDocumentInitialData",
                {"childIntID": "0"},
                False,
            ),
            (operations.document("DOC-1"), "GetContentOfAttachedDoc", {"DocumentGU": "DOC-1"}, False),
            (operations.list_report_cards(), "GetReportCardInitialData", {"childIntID": "0"}, False),
            (
                operations.report_card("RC-1"),
                "GetReportCardDocumentData",
                {"DocumentGU": "RC-1"},
                False,
            ),
            (operations.class_notes(), "StudentHWNotes", {"childIntID": "0"}, False),
            (
                operations.message_attachment("ATT-1"),
                "SynergyMailGetAttachment",
                {"childIntID": "", "SmAttachmentGU": "ATT-1"},
                True,
            ),
        ],
    )
    def test_pxp_operations(self, request_: SoapRequest, method, params, multi_web):
        assert request_.service_handle == "PXPWebServices"
        assert request_.method_name == method
        assert request_.params == params
        assert request_.multi_web is multi_web
        assert request_.directory_lookup is False

    def test_gradebook_report_period(self):
        request = operations.gradebook(3)
        assert request.params == {"ChildIntID": "0", "ReportPeriod": "3"}

    def test_class_schedule_term_index(self):
        request = operations.class_schedule(0)
        assert request.params == {"childIntID": "0", "TermIndex": "0"}

    def test_health_info_defaults(self):
        request = operations.health_info()
        assert request.multi_web is True
        assert request.method_name == "StudentHealthInfo"
        assert request.params == {
            "ChildIntID": "0",
            "HealthConditions": "true",
            "HealthVisits": "true",
            "HealthImmunizations": "true",
        }

    def test_health_info_flags(self):
        request = operations.health_info(conditions=False, visits=True, immunizations=False)
        assert request.params["HealthConditions"] == "false"
        assert request.params["HealthVisits"] == "true"
        assert request.params["HealthImmunizations"] == "false"

    def test_mark_message_read_uses_structured_block(self):
        request = operations.mark_message_read("42", "StudentActivity")
        assert request.method_name == "UpdatePXPMessage"
        assert request.multi_web is True
        assert request.params == {}
        assert request.render_param_block() == (
            '<Parms><MessageListing ID="42" Type="StudentActivity" MarkAsRead="true" /></Parms>'
        )

    def test_districts_by_zip(self):
        request = operations.districts_by_zip("90210")
        assert request.service_handle == "HDInfoServices"
        assert request.method_name == "GetMatchingDistrictList"
        assert request.directory_lookup is True
        assert request.multi_web is False
        assert request.params == {"Key": DISTRICT_LOOKUP_KEY, "MatchToDistrictZipCode": "90210"}

    def test_render_param_block_from_params(self):
        assert operations.attendance().render_param_block() == (
            "<Parms><ChildIntID>0</ChildIntID></Parms>"
        )


class TestArgumentHelpers:
    def test_require_str(self):
        assert require_str({"date": "01/02/2024"}, "date") == ("01/02/2024",)

    def test_require_str_missing(self):
        with pytest.raises(ToolValidationError, match="date parameter is required"):
            require_str({}, "date")

    def test_require_str_empty(self):
        with pytest.raises(ToolValidationError, match="document_gu parameter is required"):
            require_str({"document_gu": ""}, "document_gu")

    def test_require_str_pair_message(self):
        with pytest.raises(
            ToolValidationError, match="message_id and message_type parameters are required"
        ):
            require_str({"message_id": "1"}, "message_id", "message_type")

    def test_require_str_number_stringified(self):
        assert require_str({"zip_code": 90210}, "zip_code") == ("90210",)

    def test_require_str_rejects_structures(self):
        with pytest.raises(ToolValidationError, match="zip_code must be a string"):
            require_str({"zip_code": ["90210"]}, "zip_code")

    def test_require_str_rejects_bool(self):
        with pytest.raises(ToolValidationError):
            require_str({"date": True}, "date")

    @pytest.mark.parametrize("value, expected", [(None, None), (2, 2), (2.0, 2), ("4", 4)])
    def test_optional_int(self, value, expected):
        assert optional_int({"report_period": value}, "report_period") == expected

    def test_optional_int_absent(self):
        assert optional_int({}, "term_index") is None

    @pytest.mark.parametrize("value", [1.5, "first", True, [1]])
    def test_optional_int_invalid(self, value):
        with pytest.raises(ToolValidationError) as exc_info:
            optional_int({"report_period": value}, "report_period")
        assert str(exc_info.value) == "report_period must be an integer"

    def test_include_flag(self):
        assert include_flag({}, "health_visits") is True
        assert include_flag({"health_visits": None}, "health_visits") is True
        assert include_flag({"health_visits": True}, "health_visits") is True
        assert include_flag({"health_visits": False}, "health_visits") is False


class TestToolOperations:
    def test_every_schema_has_operation(self):
        names = {schema["name"] for schema in get_all_tool_schemas()}
        assert names == set(TOOL_OPERATIONS)

    def test_build_gradebook_with_period(self):
        request = TOOL_OPERATIONS["get_gradebook"].build({"report_period": 1})
        assert request.params["ReportPeriod"] == "1"

    def test_build_health_info_excludes_visits(self):
        request = TOOL_OPERATIONS["get_student_health_info"].build({"health_visits": False})
        assert request.params["HealthVisits"] == "false"
        assert request.params["HealthConditions"] == "true"

    @pytest.mark.parametrize(
        "tool, message",
        [
            ("get_calendar", "date parameter is required"),
            ("get_document", "document_gu parameter is required"),
            ("get_report_card", "document_gu parameter is required"),
            ("mark_message_read", "message_id and message_type parameters are required"),
            ("get_message_attachment", "attachment_gu parameter is required"),
            ("get_districts_by_zip", "zip_code parameter is required"),
        ],
    )
    def test_required_arguments(self, tool, message):
        with pytest.raises(ToolValidationError, match=message):
            TOOL_OPERATIONS[tool].build({})
