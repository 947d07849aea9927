"""Call destination resolution and session credential issuance.

Two request flows are built from these parts:

- call setup: ``resolve_destination`` -> ``build_dial_instruction`` -> ``render_twiml``
- session bootstrap: ``IdentityAllocator.allocate`` -> ``CredentialIssuer.issue``
"""
