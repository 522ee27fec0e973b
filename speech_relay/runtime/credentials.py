"""Credential file resolution for the speech client."""

from __future__ import annotations

import os
import logging
from pathlib import Path

from speech_relay.errors import CredentialsError
from speech_relay.state.settings import CredentialsSettings
from speech_relay.config.secrets import ENV_GOOGLE_APPLICATION_CREDENTIALS

logger = logging.getLogger(__name__)


def resolve_credentials_path(settings: CredentialsSettings) -> Path:
    """Return the service-account file to use, preferring the environment variable.

    When only the fallback file exists it is exported as
    GOOGLE_APPLICATION_CREDENTIALS so google-auth picks up the same file.
    """
    if settings.credentials_path is not None:
        if not settings.credentials_path.is_file():
            raise CredentialsError(
                f"{ENV_GOOGLE_APPLICATION_CREDENTIALS} points at a missing file: {settings.credentials_path}"
            )
        logger.info("credentials: using %s from %s", settings.credentials_path, ENV_GOOGLE_APPLICATION_CREDENTIALS)
        return settings.credentials_path

    logger.info("credentials: %s not set; trying %s", ENV_GOOGLE_APPLICATION_CREDENTIALS, settings.fallback_path)
    fallback = settings.fallback_path.resolve()
    if not fallback.is_file():
        raise CredentialsError(
            f"no credentials found: set {ENV_GOOGLE_APPLICATION_CREDENTIALS} or place the key file at {fallback}"
        )
    os.environ[ENV_GOOGLE_APPLICATION_CREDENTIALS] = str(fallback)
    logger.info("credentials: using fallback file %s", fallback)
    return fallback


__all__ = ["resolve_credentials_path"]
