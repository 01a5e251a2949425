"""Raw blob download: served outside the API prefix."""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

from sharebox.api.deps import get_sharing_service
from sharebox.services.sharing import SharingService

router = APIRouter()


@router.get("/{filename}")
async def download_upload(
    filename: str,
    email: Optional[str] = None,
    sharing: SharingService = Depends(get_sharing_service),
):
    """Stream a registered blob by storage key.

    Public files are served to anyone; private files only when ``email`` is
    the owner. Unknown keys and blobs with no record give 404.
    """
    record, path = sharing.open_upload(filename, email)
    return FileResponse(path, media_type=record.mime_type)
