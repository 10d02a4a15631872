from pydantic import BaseModel, ConfigDict, Field


class OpenEnquiryRequestDTO(BaseModel):
    product_id: str = Field(min_length=1, examples=["p1"])


class EnquiryFieldUpdateDTO(BaseModel):
    """Single form field edit, sent as the shopper types."""

    field: str = Field(
        description="One of: name, email, phone_number, quantity",
        examples=["email"],
    )
    value: str | int | None = Field(default=None, examples=["ada@example.com"])

    model_config = ConfigDict(
        json_schema_extra={"example": {"field": "email", "value": "ada@example.com"}}
    )


class EnquiryDraftResponseDTO(BaseModel):
    state: str
    product_id: str
    product_name: str
    name: str
    email: str
    phone_number: str
    quantity: str | int | None


class EnquirySubmitResponseDTO(BaseModel):
    submitted: bool
    receipt_id: str | None = None
    path: str | None = Field(default=None, description="Follow-up link to the stored enquiry")
    enquiry: EnquiryDraftResponseDTO
