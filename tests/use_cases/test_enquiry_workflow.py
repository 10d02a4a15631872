"""
Test suite for the enquiry modal workflow.

Verifies:
- State transitions CLOSED → OPEN → SUBMITTING → CLOSED/OPEN
- Exact collaborator call and notifications on success/failure
- Draft retained on failure, discarded on close
- Stale results are dropped after close/reopen
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable
from unittest.mock import AsyncMock, Mock

import pytest

from storefront_lite.adapters.in_memory_notifier import InMemoryNotifier
from storefront_lite.domain.enquiry import EMPTY_DRAFT, EnquiryState, EnquirySubmission
from storefront_lite.domain.errors import (
    EnquiryStateError,
    EnquirySubmissionError,
    ValidationError,
)
from storefront_lite.domain.notification import Notification, NotificationLevel
from storefront_lite.domain.product import Product
from storefront_lite.ports.enquiry_gateway import EnquiryGateway
from storefront_lite.use_cases.enquiry_workflow import EnquiryWorkflow


@pytest.fixture()
def gateway() -> Mock:
    mock = Mock(spec=EnquiryGateway)
    mock.submit = AsyncMock(return_value={"success": True, "data": {"_id": "q9"}})
    return mock


@pytest.fixture()
def notifier() -> InMemoryNotifier:
    return InMemoryNotifier()


@pytest.fixture()
def workflow(gateway: Mock, notifier: InMemoryNotifier) -> EnquiryWorkflow:
    return EnquiryWorkflow(submitter_id="u1", enquiry_gateway=gateway, notifier=notifier)


@pytest.fixture()
def widget(make_product: Callable[..., Product]) -> Product:
    return make_product("p1", name="Widget")


def _fill(workflow: EnquiryWorkflow) -> None:
    workflow.change_field("name", "Ada")
    workflow.change_field("email", "ada@example.com")
    workflow.change_field("phone_number", "555-0100")
    workflow.change_field("quantity", "2")


# ==============================================================================
# Open / edit / close
# ==============================================================================


def test_starts_closed(workflow: EnquiryWorkflow) -> None:
    assert workflow.state is EnquiryState.CLOSED
    assert workflow.draft == EMPTY_DRAFT
    assert workflow.is_open is False


def test_open_captures_product(workflow: EnquiryWorkflow, widget: Product) -> None:
    draft = workflow.open(widget)

    assert workflow.state is EnquiryState.OPEN
    assert draft.product_id == "p1"
    assert draft.product_name == "Widget"
    assert draft.name == ""


def test_open_twice_is_rejected(workflow: EnquiryWorkflow, widget: Product) -> None:
    workflow.open(widget)

    with pytest.raises(EnquiryStateError):
        workflow.open(widget)


def test_change_field_requires_open(workflow: EnquiryWorkflow) -> None:
    with pytest.raises(EnquiryStateError):
        workflow.change_field("name", "Ada")


def test_change_field_replaces_draft(workflow: EnquiryWorkflow, widget: Product) -> None:
    workflow.open(widget)
    before = workflow.draft

    workflow.change_field("email", "ada@example.com")

    assert workflow.draft is not before
    assert before.email == ""
    assert workflow.draft.email == "ada@example.com"


def test_close_discards_draft_regardless_of_edits(
    workflow: EnquiryWorkflow, widget: Product
) -> None:
    workflow.open(widget)
    _fill(workflow)

    workflow.close()

    assert workflow.state is EnquiryState.CLOSED
    assert workflow.draft == EMPTY_DRAFT


def test_close_is_idempotent(workflow: EnquiryWorkflow, widget: Product) -> None:
    workflow.open(widget)
    workflow.close()
    workflow.close()

    assert workflow.state is EnquiryState.CLOSED
    assert workflow.draft == EMPTY_DRAFT


# ==============================================================================
# Submission
# ==============================================================================


@pytest.mark.asyncio
async def test_submit_success(
    workflow: EnquiryWorkflow, widget: Product, gateway: Mock, notifier: InMemoryNotifier
) -> None:
    workflow.open(widget)
    _fill(workflow)

    receipt = await workflow.submit()

    gateway.submit.assert_awaited_once_with(
        EnquirySubmission(
            submitter_id="u1",
            product_id="p1",
            product_name="Widget",
            name="Ada",
            email="ada@example.com",
            phone_number="555-0100",
            quantity=2,
        )
    )
    assert receipt is not None
    assert receipt.id == "q9"
    assert workflow.state is EnquiryState.CLOSED
    assert workflow.draft == EMPTY_DRAFT
    assert notifier.drain() == [
        Notification.success("Query submitted successfully", path="/user/query/q9")
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        {"success": False},
        {},
        {"success": True},
        {"success": True, "data": {}},
        None,
        "ok",
    ],
)
async def test_submit_rejected_keeps_modal_open(
    workflow: EnquiryWorkflow,
    widget: Product,
    gateway: Mock,
    notifier: InMemoryNotifier,
    response: Any,
) -> None:
    gateway.submit.return_value = response
    workflow.open(widget)
    _fill(workflow)
    draft = workflow.draft

    receipt = await workflow.submit()

    assert receipt is None
    assert workflow.state is EnquiryState.OPEN
    assert workflow.draft == draft
    notifications = notifier.drain()
    assert len(notifications) == 1
    assert notifications[0].level is NotificationLevel.ERROR
    assert notifications[0].path is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [EnquirySubmissionError("Enquiry service unreachable"), ConnectionError("reset")],
)
async def test_submit_transport_failure_keeps_modal_open(
    workflow: EnquiryWorkflow,
    widget: Product,
    gateway: Mock,
    notifier: InMemoryNotifier,
    error: Exception,
) -> None:
    gateway.submit.side_effect = error
    workflow.open(widget)
    _fill(workflow)

    receipt = await workflow.submit()

    assert receipt is None
    assert workflow.state is EnquiryState.OPEN
    assert workflow.draft.name == "Ada"
    assert [n.message for n in notifier.drain()] == ["Error submitting enquiry"]


@pytest.mark.asyncio
async def test_retry_after_failure(
    workflow: EnquiryWorkflow, widget: Product, gateway: Mock
) -> None:
    gateway.submit.side_effect = [
        {"success": False},
        {"success": True, "data": {"id": "q10"}},
    ]
    workflow.open(widget)
    _fill(workflow)

    assert await workflow.submit() is None
    receipt = await workflow.submit()

    assert receipt is not None
    assert receipt.path == "/user/query/q10"
    assert gateway.submit.await_count == 2


@pytest.mark.asyncio
async def test_submit_with_missing_fields_never_calls_gateway(
    workflow: EnquiryWorkflow, widget: Product, gateway: Mock, notifier: InMemoryNotifier
) -> None:
    workflow.open(widget)
    workflow.change_field("name", "Ada")

    with pytest.raises(ValidationError):
        await workflow.submit()

    gateway.submit.assert_not_called()
    assert workflow.state is EnquiryState.OPEN
    assert notifier.pending == ()


@pytest.mark.asyncio
async def test_submit_when_closed_is_rejected(workflow: EnquiryWorkflow) -> None:
    with pytest.raises(EnquiryStateError):
        await workflow.submit()


# ==============================================================================
# Stale results
# ==============================================================================


@pytest.mark.asyncio
async def test_result_after_close_is_discarded(
    workflow: EnquiryWorkflow,
    widget: Product,
    gateway: Mock,
    notifier: InMemoryNotifier,
    make_product: Callable[..., Product],
) -> None:
    release = asyncio.Event()

    async def slow_submit(submission: EnquirySubmission) -> dict[str, Any]:
        await release.wait()
        return {"success": True, "data": {"_id": "late"}}

    gateway.submit.side_effect = slow_submit
    workflow.open(widget)
    _fill(workflow)

    task = asyncio.create_task(workflow.submit())
    await asyncio.sleep(0)
    assert workflow.state is EnquiryState.SUBMITTING

    workflow.close()
    workflow.open(make_product("p3", name="Gadget"))
    release.set()
    receipt = await task

    assert receipt is None
    assert workflow.state is EnquiryState.OPEN
    assert workflow.draft.product_id == "p3"
    assert notifier.pending == ()


@pytest.mark.asyncio
async def test_failure_after_close_is_discarded(
    workflow: EnquiryWorkflow, widget: Product, gateway: Mock, notifier: InMemoryNotifier
) -> None:
    release = asyncio.Event()

    async def failing_submit(submission: EnquirySubmission) -> dict[str, Any]:
        await release.wait()
        return {"success": False}

    gateway.submit.side_effect = failing_submit
    workflow.open(widget)
    _fill(workflow)

    task = asyncio.create_task(workflow.submit())
    await asyncio.sleep(0)
    workflow.close()
    release.set()

    assert await task is None
    assert workflow.state is EnquiryState.CLOSED
    assert notifier.pending == ()
