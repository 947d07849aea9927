from __future__ import annotations

import jwt
import pytest

from gateway.credentials import CapabilityGrant, CredentialIssuer, SigningConfig
from gateway.errors import CredentialSigningError

SECRET = "unit-test-signing-secret-0123456789abcdef"


def _signing_config(**overrides) -> SigningConfig:
    values = {
        "account_sid": "AC123",
        "api_key_sid": "SK123",
        "api_key_secret": SECRET,
        "outgoing_application_sid": "AP123",
        "ttl_seconds": 600,
    }
    values.update(overrides)
    return SigningConfig(**values)


def _claims(token: str) -> dict:
    return jwt.decode(token, SECRET, algorithms=["HS256"])


@pytest.mark.parametrize("identity", ["bob", "web-1", "+15551234567"])
def test_issued_token_allows_both_directions(identity):
    credential = CredentialIssuer(_signing_config()).issue(identity)

    assert credential.identity == identity
    assert credential.grant == CapabilityGrant()
    assert credential.grant.outbound_allowed is True
    assert credential.grant.inbound_allowed is True

    claims = _claims(credential.token)
    assert claims["iss"] == "SK123"
    assert claims["sub"] == "AC123"
    voice = claims["grants"]["voice"]
    assert voice["incoming"] == {"allow": True}
    assert voice["outgoing"]["application_sid"] == "AP123"


def test_token_carries_exactly_one_capability():
    credential = CredentialIssuer(_signing_config()).issue("alice")
    grants = _claims(credential.token)["grants"]
    assert grants["identity"] == "alice"
    assert set(grants) - {"identity"} == {"voice"}


def test_token_expiry_follows_ttl():
    credential = CredentialIssuer(_signing_config(ttl_seconds=600)).issue("alice")
    claims = jwt.decode(
        credential.token,
        SECRET,
        algorithms=["HS256"],
        options={"verify_exp": False},
    )
    assert "exp" in claims


@pytest.mark.parametrize(
    "field",
    ["account_sid", "api_key_sid", "api_key_secret", "outgoing_application_sid"],
)
def test_missing_signing_material_raises(field):
    issuer = CredentialIssuer(_signing_config(**{field: None}))
    with pytest.raises(CredentialSigningError) as excinfo:
        issuer.issue("bob")
    assert field in excinfo.value.detail


def test_token_signed_with_other_secret_fails_verification():
    credential = CredentialIssuer(_signing_config()).issue("bob")
    with pytest.raises(jwt.InvalidSignatureError):
        jwt.decode(credential.token, "another-signing-secret-0123456789abcdef", algorithms=["HS256"])


def test_signing_backend_failure_is_wrapped(monkeypatch):
    import gateway.credentials as credentials

    def _boom(self, *args, **kwargs):
        raise ValueError("bad key material")

    monkeypatch.setattr(credentials.AccessToken, "to_jwt", _boom)

    with pytest.raises(CredentialSigningError) as excinfo:
        CredentialIssuer(_signing_config()).issue("bob")
    assert excinfo.value.detail == "bad key material"
    assert excinfo.value.status_code == 500
