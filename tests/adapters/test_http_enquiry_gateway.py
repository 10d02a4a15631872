"""Test suite for HttpEnquiryGateway, using httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from storefront_lite.adapters.http_enquiry_gateway import HttpEnquiryGateway
from storefront_lite.domain.enquiry import EnquirySubmission
from storefront_lite.domain.errors import EnquirySubmissionError


@pytest.fixture()
def submission() -> EnquirySubmission:
    return EnquirySubmission(
        submitter_id="u1",
        product_id="p1",
        product_name="Widget",
        name="Ada",
        email="ada@example.com",
        phone_number="555-0100",
        quantity=2,
    )


@pytest.mark.asyncio
async def test_posts_camel_case_body_to_user_query(submission: EnquirySubmission) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(201, json={"success": True, "data": {"_id": "q1"}})

    gateway = HttpEnquiryGateway("https://shop.test/api", transport=httpx.MockTransport(handler))

    envelope = await gateway.submit(submission)

    assert envelope == {"success": True, "data": {"_id": "q1"}}
    request = seen[0]
    assert request.method == "POST"
    assert request.url.path == "/api/user/u1/query"
    assert json.loads(request.content) == {
        "id": "p1",
        "product": "Widget",
        "name": "Ada",
        "email": "ada@example.com",
        "phoneNumber": "555-0100",
        "quantity": 2,
    }


@pytest.mark.asyncio
async def test_empty_body_is_an_empty_envelope(submission: EnquirySubmission) -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(204))
    gateway = HttpEnquiryGateway("https://shop.test/api", transport=transport)

    assert await gateway.submit(submission) == {}


@pytest.mark.asyncio
async def test_rejection_becomes_submission_error(submission: EnquirySubmission) -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(400, json={"success": False}))
    gateway = HttpEnquiryGateway("https://shop.test/api", transport=transport)

    with pytest.raises(EnquirySubmissionError) as exc_info:
        await gateway.submit(submission)

    assert exc_info.value.context["status_code"] == 400


@pytest.mark.asyncio
async def test_unreachable_service_becomes_submission_error(
    submission: EnquirySubmission,
) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    gateway = HttpEnquiryGateway("https://shop.test/api", transport=httpx.MockTransport(handler))

    with pytest.raises(EnquirySubmissionError):
        await gateway.submit(submission)
