"""HTTP client for the StudentVue PXP SOAP service."""

from __future__ import annotations

import logging
from http.cookiejar import DefaultCookiePolicy
from typing import Dict, Optional

import requests
from requests import Response
from requests.exceptions import RequestException

from studentvue_mcp import operations, soap
from studentvue_mcp.config import StudentVueConfig
from studentvue_mcp.exceptions import TransportError
from studentvue_mcp.operations import HD_INFO_SERVICES, SoapRequest

LOGGER = logging.getLogger(__name__)

USER_AGENT = "StudentVUE/8.0.26"
CONTENT_TYPE = "text/xml; charset=utf-8"

PXP_PATH = "/Service/PXPCommunication.asmx"
HD_INFO_PATH = "/Service/HDInfoCommunication.asmx"

DISTRICT_LOOKUP_URL = "https://support.edupoint.com/Service/HDInfoCommunication.asmx"
DISTRICT_LOOKUP_USER = "EdupointDistrictInfo"
DISTRICT_LOOKUP_PASSWORD = "Edup01nt"


class NoCookiesPolicy(DefaultCookiePolicy):
    """Refuse to store or send cookies so calls share no session state."""

    def set_ok(self, cookie, request):
        return False

    def return_ok(self, cookie, request):
        return False


class StudentVueClient:
    """Thin wrapper around the StudentVue SOAP API for one account.

    Every call is a single POST; results are returned as the unwrapped
    payload text without further parsing.
    """

    def __init__(
        self,
        config: StudentVueConfig,
        session: Optional[requests.Session] = None,
    ):
        self.config = config
        self._session = session or requests.Session()
        self._session.headers["User-Agent"] = USER_AGENT
        self._session.cookies.set_policy(NoCookiesPolicy())

    def __enter__(self) -> StudentVueClient:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._session.close()

    def endpoint_for(self, request: SoapRequest) -> str:
        """Return the service URL a request is posted to."""
        if request.directory_lookup:
            return DISTRICT_LOOKUP_URL
        if request.service_handle == HD_INFO_SERVICES:
            return f"{self.config.portal_url}{HD_INFO_PATH}"
        return f"{self.config.portal_url}{PXP_PATH}"

    def build_envelope(self, request: SoapRequest) -> str:
        """Render the envelope for a request with the right credentials."""
        if request.directory_lookup:
            user_id, password = DISTRICT_LOOKUP_USER, DISTRICT_LOOKUP_PASSWORD
        else:
            user_id, password = self.config.username, self.config.password

        return soap.build_envelope(
            user_id,
            password,
            request.service_handle,
            request.method_name,
            request.render_param_block(),
            multi_web=request.multi_web,
        )

    def send(self, request: SoapRequest) -> str:
        """
        POST a request and return the unwrapped result payload.

        Raises:
            TransportError: Network failure or non-2xx status.
            SoapParseError: Response has no result wrapper.
        """
        url = self.endpoint_for(request)
        headers = {
            "Content-Type": CONTENT_TYPE,
            "SOAPAction": soap.soap_action(request.multi_web),
        }
        LOGGER.debug(
            "POST %s %s.%s (multi_web=%s)",
            url,
            request.service_handle,
            request.method_name,
            request.multi_web,
        )

        try:
            response: Response = self._session.post(
                url,
                data=self.build_envelope(request).encode("utf-8"),
                headers=headers,
                timeout=self.config.timeout,
            )
        except RequestException as exc:
            raise TransportError(f"Request failed: {exc}")

        if not 200 <= response.status_code < 300:
            raise TransportError(
                f"Request failed with status: {response.status_code}",
                status_code=response.status_code,
            )

        payload = soap.parse_response(response.text)
        if soap.is_error_payload(payload):
            LOGGER.warning(
                "%s returned RT_ERROR: %s", request.method_name, payload[:200]
            )
        return payload

    def make_request(
        self,
        service_handle: str,
        method_name: str,
        params: Dict[str, str],
        multi_web: bool = False,
    ) -> str:
        """Send an arbitrary method call with a flat parameter mapping."""
        return self.send(
            SoapRequest(service_handle, method_name, dict(params), multi_web=multi_web)
        )

    def get_student_info(self) -> str:
        return self.send(operations.student_info())

    def get_gradebook(self, report_period: Optional[int] = None) -> str:
        return self.send(operations.gradebook(report_period))

    def get_attendance(self) -> str:
        return self.send(operations.attendance())

    def get_messages(self) -> str:
        return self.send(operations.messages())

    def get_calendar(self, date: str) -> str:
        return self.send(operations.calendar(date))

    def get_class_schedule(self, term_index: Optional[int] = None) -> str:
        return self.send(operations.class_schedule(term_index))

    def get_school_info(self) -> str:
        return self.send(operations.school_info())

    def list_documents(self) -> str:
        return self.send(operations.list_documents())

    def get_document(self, document_gu: str) -> str:
        return self.send(operations.document(document_gu))

    def list_report_cards(self) -> str:
        return self.send(operations.list_report_cards())

    def get_report_card(self, document_gu: str) -> str:
        return self.send(operations.report_card(document_gu))

    def mark_message_read(self, message_id: str, message_type: str) -> str:
        return self.send(operations.mark_message_read(message_id, message_type))

    def get_class_notes(self) -> str:
        return self.send(operations.class_notes())

    def get_student_health_info(
        self,
        health_conditions: bool = True,
        health_visits: bool = True,
        health_immunizations: bool = True,
    ) -> str:
        return self.send(
            operations.health_info(
                health_conditions, health_visits, health_immunizations
            )
        )

    def get_message_attachment(self, attachment_gu: str) -> str:
        return self.send(operations.message_attachment(attachment_gu))

    def get_districts_by_zip(self, zip_code: str) -> str:
        return self.send(operations.districts_by_zip(zip_code))
