"""Wire records for the enquiry collaborator."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from storefront_lite.domain.enquiry import EnquiryReceipt, EnquirySubmission
from storefront_lite.domain.errors import EnquirySubmissionError


class EnquiryRequestDTO(BaseModel):
    """Request body expected by the enquiry collaborator."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    product: str
    name: str
    email: str
    phone_number: str = Field(serialization_alias="phoneNumber")
    quantity: int


class EnquiryReceiptDataDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = Field(validation_alias=AliasChoices("_id", "id"), min_length=1)


class EnquiryResponseDTO(BaseModel):
    model_config = ConfigDict(extra="ignore")

    success: bool = False
    data: EnquiryReceiptDataDTO | None = None
    message: str | None = None


class EnquiryPayloadMapper:
    """Maps between enquiry domain objects and the collaborator's wire format."""

    @staticmethod
    def to_request_body(submission: EnquirySubmission) -> dict[str, Any]:
        """
        Builds the JSON body for an enquiry submission.

        Args:
            submission: Validated domain submission

        Returns:
            camelCase JSON body
        """
        dto = EnquiryRequestDTO(
            id=submission.product_id,
            product=submission.product_name,
            name=submission.name,
            email=submission.email,
            phone_number=submission.phone_number,
            quantity=submission.quantity,
        )
        return dto.model_dump(by_alias=True)

    @staticmethod
    def to_receipt(payload: Any) -> EnquiryReceipt:
        """
        Extracts the receipt from a response envelope.

        Args:
            payload: Raw response envelope

        Returns:
            EnquiryReceipt carrying the server-assigned id

        Raises:
            EnquirySubmissionError: If the envelope is not success-flagged or carries no id
        """
        if not isinstance(payload, dict):
            raise EnquirySubmissionError(
                "Enquiry response is not an object",
                payload_type=type(payload).__name__,
            )

        try:
            response = EnquiryResponseDTO.model_validate(payload)
        except PydanticValidationError as exc:
            raise EnquirySubmissionError(
                "Enquiry response is malformed", error_count=exc.error_count()
            ) from exc

        if not response.success:
            raise EnquirySubmissionError(response.message or "Enquiry was rejected")
        if response.data is None:
            raise EnquirySubmissionError("Enquiry response carries no receipt")

        return EnquiryReceipt(id=response.data.id)
