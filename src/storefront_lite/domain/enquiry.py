from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from storefront_lite.domain.errors import ValidationError
from storefront_lite.domain.navigation import query_path


class EnquiryState(str, Enum):
    CLOSED = "closed"
    OPEN = "open"
    SUBMITTING = "submitting"


EDITABLE_FIELDS = ("name", "email", "phone_number", "quantity")


@dataclass(frozen=True, slots=True)
class EnquiryDraft:
    """
    In-progress enquiry form.

    Value type: every edit returns a new draft, the previous one is never mutated.
    Quantity keeps whatever the form supplied until the draft is submitted.
    """

    product_id: str = ""
    product_name: str = ""
    name: str = ""
    email: str = ""
    phone_number: str = ""
    quantity: str | int | None = None

    @classmethod
    def for_product(cls, product_id: str, product_name: str) -> EnquiryDraft:
        return cls(product_id=product_id, product_name=product_name)

    def with_field(self, field: str, value: str | int | None) -> EnquiryDraft:
        """
        Return a copy of the draft with one form field replaced.

        Raises:
            ValidationError: If the field is not an editable enquiry field
        """
        if field not in EDITABLE_FIELDS:
            raise ValidationError(
                errors=[
                    {
                        "field": field,
                        "message": f"Must be one of {list(EDITABLE_FIELDS)}",
                        "code": "UNKNOWN_FIELD",
                    }
                ]
            )
        if field != "quantity" and value is not None and not isinstance(value, str):
            value = str(value)
        return replace(self, **{field: value})

    def to_submission(self, submitter_id: str) -> EnquirySubmission:
        """
        Validate required fields and build the submission.

        Only presence is checked for email and phone number; their format is
        the enquiry collaborator's concern.

        Raises:
            ValidationError: If any required field is missing or quantity is invalid
        """
        errors: list[dict[str, str]] = []

        for field in ("product_id", "name", "email", "phone_number"):
            if not (getattr(self, field) or "").strip():
                errors.append({"field": field, "message": "Required", "code": "REQUIRED"})

        quantity = _parse_quantity(self.quantity)
        if quantity is None:
            errors.append(
                {
                    "field": "quantity",
                    "message": "Must be a positive integer",
                    "code": "INVALID_QUANTITY",
                }
            )

        if errors or quantity is None:
            raise ValidationError(errors=errors)

        return EnquirySubmission(
            submitter_id=submitter_id,
            product_id=self.product_id,
            product_name=self.product_name,
            name=self.name.strip(),
            email=self.email.strip(),
            phone_number=self.phone_number.strip(),
            quantity=quantity,
        )


EMPTY_DRAFT = EnquiryDraft()


def _parse_quantity(value: str | int | None) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        quantity = value
    elif isinstance(value, str):
        try:
            quantity = int(value.strip())
        except ValueError:
            return None
    else:
        return None
    return quantity if quantity > 0 else None


@dataclass(frozen=True, slots=True)
class EnquirySubmission:
    submitter_id: str
    product_id: str
    product_name: str
    name: str
    email: str
    phone_number: str
    quantity: int


@dataclass(frozen=True, slots=True)
class EnquiryReceipt:
    id: str

    @property
    def path(self) -> str:
        return query_path(self.id)
