from __future__ import annotations

import logging

from storefront_lite.domain.enquiry import (
    EMPTY_DRAFT,
    EnquiryDraft,
    EnquiryReceipt,
    EnquiryState,
)
from storefront_lite.domain.errors import EnquiryStateError, EnquirySubmissionError
from storefront_lite.domain.notification import Notification
from storefront_lite.domain.product import Product
from storefront_lite.payloads.enquiry import EnquiryPayloadMapper
from storefront_lite.ports.enquiry_gateway import EnquiryGateway
from storefront_lite.ports.notifier import Notifier

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Query submitted successfully"
FAILURE_MESSAGE = "Error submitting enquiry"


class EnquiryWorkflow:
    """
    Product enquiry modal: visibility, form draft and submission.

    State machine:
        CLOSED --open--> OPEN --submit--> SUBMITTING --success--> CLOSED
                          ^                    |
                          +------failure-------+
        OPEN / SUBMITTING --close--> CLOSED

    Every open, close and submit advances a request token. A submission result
    is applied only while its token is still current, so a response that
    arrives after the shopper closed (or closed and reopened) the modal is
    dropped instead of clobbering the newer state.
    """

    def __init__(
        self,
        submitter_id: str,
        enquiry_gateway: EnquiryGateway,
        notifier: Notifier,
    ) -> None:
        """
        Initialize workflow with dependencies.

        Args:
            submitter_id: Identifier of the authenticated shopper
            enquiry_gateway: Enquiry collaborator
            notifier: Sink for user-facing notifications
        """
        self._submitter_id = submitter_id
        self._gateway = enquiry_gateway
        self._notifier = notifier
        self._state = EnquiryState.CLOSED
        self._draft = EMPTY_DRAFT
        self._token = 0

    @property
    def state(self) -> EnquiryState:
        return self._state

    @property
    def draft(self) -> EnquiryDraft:
        return self._draft

    @property
    def is_open(self) -> bool:
        return self._state is not EnquiryState.CLOSED

    def open(self, product: Product) -> EnquiryDraft:
        """
        Open the modal for a product with an empty form.

        Raises:
            EnquiryStateError: If an enquiry is already open
        """
        if self._state is not EnquiryState.CLOSED:
            raise EnquiryStateError(
                "An enquiry is already open",
                state=self._state.value,
                product_id=self._draft.product_id,
            )

        self._token += 1
        self._draft = EnquiryDraft.for_product(product.id, product.name)
        self._state = EnquiryState.OPEN
        return self._draft

    def change_field(self, field: str, value: str | int | None) -> EnquiryDraft:
        """
        Replace one form field.

        Raises:
            EnquiryStateError: If the modal is not open for editing
            ValidationError: If the field is not editable
        """
        if self._state is not EnquiryState.OPEN:
            raise EnquiryStateError("Enquiry is not open for editing", state=self._state.value)

        self._draft = self._draft.with_field(field, value)
        return self._draft

    def close(self) -> None:
        """Discard the draft and close the modal. Closing a closed modal is a no-op."""
        if self._state is EnquiryState.CLOSED:
            return

        if self._state is EnquiryState.SUBMITTING:
            logger.info(
                "Enquiry closed while submission in flight",
                extra={"product_id": self._draft.product_id, "token": self._token},
            )

        self._token += 1
        self._state = EnquiryState.CLOSED
        self._draft = EMPTY_DRAFT

    async def submit(self) -> EnquiryReceipt | None:
        """
        Submit the current draft to the enquiry collaborator.

        Returns:
            The receipt on success, None when the submission failed or its
            result was discarded as stale

        Raises:
            EnquiryStateError: If the modal is not open
            ValidationError: If required fields are missing; state stays OPEN
        """
        if self._state is not EnquiryState.OPEN:
            raise EnquiryStateError("Enquiry is not open", state=self._state.value)

        submission = self._draft.to_submission(self._submitter_id)

        self._token += 1
        token = self._token
        self._state = EnquiryState.SUBMITTING

        try:
            payload = await self._gateway.submit(submission)
            receipt = EnquiryPayloadMapper.to_receipt(payload)
        except EnquirySubmissionError as exc:
            logger.info(
                "Enquiry submission rejected",
                extra={"reason": exc.message, "product_id": submission.product_id},
            )
            self._fail(token)
            return None
        except Exception:
            logger.exception(
                "Enquiry submission failed",
                extra={"product_id": submission.product_id},
            )
            self._fail(token)
            return None

        if token != self._token:
            logger.info(
                "Discarding stale enquiry result",
                extra={"receipt_id": receipt.id, "product_id": submission.product_id},
            )
            return None

        self._state = EnquiryState.CLOSED
        self._draft = EMPTY_DRAFT
        self._notifier.notify(Notification.success(SUCCESS_MESSAGE, path=receipt.path))
        return receipt

    def _fail(self, token: int) -> None:
        if token != self._token:
            logger.info("Discarding stale enquiry failure", extra={"token": token})
            return

        # Draft is kept so the shopper can retry
        self._state = EnquiryState.OPEN
        self._notifier.notify(Notification.error(FAILURE_MESSAGE))
