from fastapi import APIRouter, Depends

from storefront_lite.entrypoints.http.dependencies import get_shopper_session
from storefront_lite.entrypoints.http.dtos.enquiry import (
    EnquiryDraftResponseDTO,
    EnquiryFieldUpdateDTO,
    EnquirySubmitResponseDTO,
    OpenEnquiryRequestDTO,
)
from storefront_lite.entrypoints.http.mappers.enquiry_mapper import EnquiryMapper
from storefront_lite.entrypoints.http.view_registry import ShopperSession


router = APIRouter(prefix="/enquiry", tags=["Enquiry"])


def _draft_response(session: ShopperSession) -> EnquiryDraftResponseDTO:
    view = session.view
    return EnquiryMapper.to_draft_response(view.enquiry_state, view.enquiry_draft)


@router.get("", response_model=EnquiryDraftResponseDTO, summary="Current enquiry modal state")
async def get_enquiry(
    session: ShopperSession = Depends(get_shopper_session),
) -> EnquiryDraftResponseDTO:
    return _draft_response(session)


@router.post(
    "",
    response_model=EnquiryDraftResponseDTO,
    summary="Open the enquiry modal for a product",
    responses={
        404: {"description": "Product is not in the loaded catalog"},
        409: {"description": "An enquiry is already open"},
    },
)
async def open_enquiry(
    payload: OpenEnquiryRequestDTO,
    session: ShopperSession = Depends(get_shopper_session),
) -> EnquiryDraftResponseDTO:
    session.view.open_enquiry(payload.product_id)
    return _draft_response(session)


@router.patch(
    "",
    response_model=EnquiryDraftResponseDTO,
    summary="Edit one enquiry form field",
    responses={409: {"description": "No enquiry is open"}},
)
async def change_enquiry_field(
    payload: EnquiryFieldUpdateDTO,
    session: ShopperSession = Depends(get_shopper_session),
) -> EnquiryDraftResponseDTO:
    session.view.change_enquiry_field(payload.field, payload.value)
    return _draft_response(session)


@router.post(
    "/submit",
    response_model=EnquirySubmitResponseDTO,
    summary="Submit the enquiry",
    description="""
    Submit the open enquiry to the enquiry service.

    - Missing required fields → 422, modal stays open
    - Rejected or failed submission → `submitted: false`, modal stays open with
      the draft intact and an error notification is queued
    - Success → modal closes and a success notification links to
      `/user/query/{receipt_id}`
    """,
)
async def submit_enquiry(
    session: ShopperSession = Depends(get_shopper_session),
) -> EnquirySubmitResponseDTO:
    receipt = await session.view.submit_enquiry()
    view = session.view
    return EnquiryMapper.to_submit_response(receipt, view.enquiry_state, view.enquiry_draft)


@router.delete("", response_model=EnquiryDraftResponseDTO, summary="Close the enquiry modal")
async def close_enquiry(
    session: ShopperSession = Depends(get_shopper_session),
) -> EnquiryDraftResponseDTO:
    session.view.close_enquiry()
    return _draft_response(session)
