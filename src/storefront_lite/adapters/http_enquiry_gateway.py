"""HTTP implementation of EnquiryGateway."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from storefront_lite.domain.enquiry import EnquirySubmission
from storefront_lite.domain.errors import EnquirySubmissionError
from storefront_lite.infra.config import DEFAULT_HTTP_TIMEOUT_SECONDS
from storefront_lite.payloads.enquiry import EnquiryPayloadMapper
from storefront_lite.ports.enquiry_gateway import EnquiryGateway

logger = logging.getLogger(__name__)


class HttpEnquiryGateway(EnquiryGateway):
    """
    Submits enquiries to the user service.

    - POST {base_url}/user/{submitter_id}/query with a camelCase JSON body
    - Returns the decoded response envelope
    - Transport errors and non-2xx answers become EnquirySubmissionError
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    async def submit(self, submission: EnquirySubmission) -> Any:
        url = f"{self._base_url}/user/{submission.submitter_id}/query"
        body = EnquiryPayloadMapper.to_request_body(submission)

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds, transport=self._transport
            ) as client:
                response = await client.post(url, json=body)
                response.raise_for_status()
                return response.json() if response.content else {}
        except httpx.HTTPStatusError as exc:
            logger.info(
                "Enquiry service rejected submission",
                extra={"status_code": exc.response.status_code, "product_id": submission.product_id},
            )
            raise EnquirySubmissionError(
                "Enquiry service rejected the submission",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.RequestError as exc:
            logger.warning(
                "Enquiry service unreachable",
                extra={"error": str(exc), "product_id": submission.product_id},
            )
            raise EnquirySubmissionError("Enquiry service unreachable") from exc
