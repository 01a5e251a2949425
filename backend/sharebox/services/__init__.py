"""Business logic services: built once per application."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sharebox.config import Settings
    from sharebox.services.credential_store import CredentialStore
    from sharebox.services.file_registry import FileRegistry
    from sharebox.services.sharing import SharingService
    from sharebox.services.upload_store import UploadStore

logger = logging.getLogger(__name__)


@dataclass
class Services:
    """Process-wide service objects, handed to request handlers via app.state."""

    credentials: CredentialStore
    registry: FileRegistry
    uploads: UploadStore
    sharing: SharingService


def build_services(settings: Settings) -> Services:
    """Create and wire up all service objects."""
    from sharebox.services.credential_store import CredentialStore
    from sharebox.services.file_registry import FileRegistry
    from sharebox.services.sharing import SharingService
    from sharebox.services.upload_store import UploadStore

    credentials = CredentialStore(settings.users_file)
    registry = FileRegistry(admin_email=settings.admin_email)
    uploads = UploadStore(settings.upload_dir)
    sharing = SharingService(credentials, registry, uploads)

    logger.info(
        "Services initialized (users: %s, uploads: %s)",
        credentials.path, uploads.root,
    )
    return Services(
        credentials=credentials,
        registry=registry,
        uploads=uploads,
        sharing=sharing,
    )
