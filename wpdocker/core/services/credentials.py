"""Database password generation."""

from __future__ import annotations

import secrets

from wpdocker.core.models.setup import ALPHANUMERIC, CredentialSettings, Credentials


def generate_credential(length: int = 24, alphabet: str = ALPHANUMERIC) -> str:
    """Return *length* characters drawn uniformly from *alphabet*.

    Each character is an independent ``secrets.choice`` draw, so the
    result is always exactly *length* long and never biased towards part
    of the alphabet.
    """
    if length < 1:
        raise ValueError(f"Credential length must be positive, got {length}")
    if not alphabet:
        raise ValueError("Credential alphabet must not be empty")
    return "".join(secrets.choice(alphabet) for _ in range(length))


def generate_credentials(settings: CredentialSettings | None = None) -> Credentials:
    """Generate the root and application database passwords."""
    settings = settings or CredentialSettings()
    return Credentials(
        db_root_password=generate_credential(settings.length, settings.alphabet),
        db_password=generate_credential(settings.length, settings.alphabet),
    )
