from __future__ import annotations

from storefront_lite.domain.enquiry import EnquiryDraft, EnquiryReceipt, EnquiryState
from storefront_lite.entrypoints.http.dtos.enquiry import (
    EnquiryDraftResponseDTO,
    EnquirySubmitResponseDTO,
)


class EnquiryMapper:
    """Maps enquiry workflow state to REST DTOs."""

    @staticmethod
    def to_draft_response(state: EnquiryState, draft: EnquiryDraft) -> EnquiryDraftResponseDTO:
        return EnquiryDraftResponseDTO(
            state=state.value,
            product_id=draft.product_id,
            product_name=draft.product_name,
            name=draft.name,
            email=draft.email,
            phone_number=draft.phone_number,
            quantity=draft.quantity,
        )

    @staticmethod
    def to_submit_response(
        receipt: EnquiryReceipt | None,
        state: EnquiryState,
        draft: EnquiryDraft,
    ) -> EnquirySubmitResponseDTO:
        """
        Converts a submission outcome to the REST response.

        A missing receipt means the submission failed (or was discarded) and the
        draft is echoed back for a retry.
        """
        return EnquirySubmitResponseDTO(
            submitted=receipt is not None,
            receipt_id=receipt.id if receipt else None,
            path=receipt.path if receipt else None,
            enquiry=EnquiryMapper.to_draft_response(state, draft),
        )
