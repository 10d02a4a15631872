from __future__ import annotations

from typing import Any
from uuid import uuid4

from storefront_lite.domain.enquiry import EnquirySubmission
from storefront_lite.ports.enquiry_gateway import EnquiryGateway


class InMemoryEnquiryGateway(EnquiryGateway):
    """
    Canonical contract implementation for tests and local runs.

    - Stores submissions in arrival order
    - Answers with the collaborator's success envelope and a fresh id
    """

    def __init__(self) -> None:
        self.submissions: list[EnquirySubmission] = []

    async def submit(self, submission: EnquirySubmission) -> Any:
        self.submissions.append(submission)
        return {"success": True, "data": {"_id": uuid4().hex}}
