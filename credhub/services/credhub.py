from __future__ import annotations

import logging

import httpx

from credhub.core.errors import InvalidRequestError
from credhub.support.write_request import WriteRequest

DATA_PATH = "/api/v1/data"


logger = logging.getLogger(__name__)


class CredHubClient:
    """Prepares CredHub data API calls.

    Requests are built against the wrapped client's base_url and headers
    but never sent; the caller owns sending and response handling.
    """

    def __init__(self, http: httpx.AsyncClient):
        self.http = http  # base_url=settings.CREDHUB_API_URL

    def build_write(self, request: WriteRequest) -> httpx.Request:
        if not isinstance(request, WriteRequest):
            raise InvalidRequestError(f"expected a WriteRequest, got {type(request).__name__}")
        payload = request.to_payload()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "PUT %s name=%s type=%s overwrite=%s permissions=%d",
                DATA_PATH,
                request.name,
                request.type,
                request.overwrite,
                len(request.additional_permissions),
            )
        return self.http.build_request("PUT", DATA_PATH, json=payload)
