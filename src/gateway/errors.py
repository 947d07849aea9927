"""Domain-specific exceptions for gateway operations.

These exceptions carry the HTTP status they map to, so the API layer can
translate them without knowing which collaborator raised them.
"""

from __future__ import annotations


class GatewayError(Exception):
    status_code: int = 500
    default_detail: str = "Gateway error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.default_detail)
        self.detail = detail or self.default_detail


class ValidationError(GatewayError):
    status_code = 400
    default_detail = "Invalid request."


class CredentialSigningError(GatewayError):
    status_code = 500
    default_detail = "Access token signing failed."


class UpstreamError(GatewayError):
    status_code = 500
    default_detail = "Upstream service request failed."
