"""
Domain models — Pydantic types for the scaffold.

All models are re-exported here for convenient access:

    from wpdocker.core.models import SetupConfig, Credentials, GeneratedFile
"""

from wpdocker.core.models.setup import (
    ALPHANUMERIC,
    CredentialSettings,
    Credentials,
    DatabaseSettings,
    NginxSettings,
    PhpSettings,
    SetupConfig,
    WordPressSettings,
)
from wpdocker.core.models.template import GeneratedFile
from wpdocker.core.models.tool import ToolCheck

__all__ = [
    # setup.py
    "ALPHANUMERIC",
    "CredentialSettings",
    "Credentials",
    "DatabaseSettings",
    # template.py
    "GeneratedFile",
    "NginxSettings",
    "PhpSettings",
    "SetupConfig",
    # tool.py
    "ToolCheck",
    "WordPressSettings",
]
