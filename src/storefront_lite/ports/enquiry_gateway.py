from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from storefront_lite.domain.enquiry import EnquirySubmission


class EnquiryGateway(ABC):
    """
    Port for the enquiry collaborator.

    The returned envelope is expected to look like
    ``{"success": true, "data": {"_id": "..."}}``. Anything else is a rejection.
    """

    @abstractmethod
    async def submit(self, submission: EnquirySubmission) -> Any:
        """
        Persist a product enquiry on behalf of the submitter.

        Args:
            submission: Validated enquiry, keyed by submission.submitter_id

        Returns:
            Raw response envelope
        """
        ...
