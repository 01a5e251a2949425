"""File API routes: upload, listing, privacy, deletion."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from sharebox.api.deps import get_app_settings, get_sharing_service
from sharebox.config import Settings
from sharebox.schemas.files import (
    ClearAllRequest,
    ClearAllResponse,
    FileActionRequest,
    FileDetailResponse,
    FileItem,
    FileListResponse,
    MessageResponse,
)
from sharebox.services.sharing import SharingService

logger = logging.getLogger(__name__)
router = APIRouter()

CHUNK_SIZE = 64 * 1024  # 64 KB


def _too_large(limit: int) -> HTTPException:
    return HTTPException(
        status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        f"File exceeds the {limit} byte upload limit",
    )


async def _read_limited(file: UploadFile, limit: int) -> bytes:
    """Read an upload in chunks, stopping as soon as it passes the limit (0 = no limit)."""
    if limit and file.size is not None and file.size > limit:
        raise _too_large(limit)

    chunks: list[bytes] = []
    total = 0
    while chunk := await file.read(CHUNK_SIZE):
        total += len(chunk)
        if limit and total > limit:
            raise _too_large(limit)
        chunks.append(chunk)
    return b"".join(chunks)


@router.post("/upload", response_model=FileDetailResponse)
async def upload_file(
    file: Optional[UploadFile] = File(None),
    owner: Optional[str] = Form(None),
    sharing: SharingService = Depends(get_sharing_service),
    settings: Settings = Depends(get_app_settings),
):
    """Store an upload for a registered owner. New files start private."""
    if file is None or not file.filename or not owner:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "File and owner are required")

    data = await _read_limited(file, settings.max_upload_bytes)

    record = sharing.upload(owner, data, file.filename, file.content_type)
    return FileDetailResponse(
        message="File uploaded successfully", file=FileItem.from_record(record)
    )


@router.get("/files", response_model=FileListResponse)
async def list_files(
    email: Optional[str] = None,
    sharing: SharingService = Depends(get_sharing_service),
):
    """Public files plus the requester's own private files."""
    records = sharing.list_files(email)
    return FileListResponse(files=[FileItem.from_record(r) for r in records])


@router.post("/togglePrivacy", response_model=FileDetailResponse)
async def toggle_privacy(
    body: FileActionRequest,
    sharing: SharingService = Depends(get_sharing_service),
):
    record = sharing.toggle_privacy(body.filename, body.owner)
    visibility = "public" if record.is_public else "private"
    return FileDetailResponse(
        message=f"File privacy changed to {visibility}", file=FileItem.from_record(record)
    )


@router.post("/deleteFile", response_model=MessageResponse)
async def delete_file(
    body: FileActionRequest,
    sharing: SharingService = Depends(get_sharing_service),
):
    sharing.delete_file(body.filename, body.owner)
    return MessageResponse(message="File deleted successfully")


@router.post("/clearAll", response_model=ClearAllResponse)
async def clear_all(
    body: ClearAllRequest,
    sharing: SharingService = Depends(get_sharing_service),
):
    """Admin only: removes every file regardless of owner."""
    removed = sharing.clear_all(body.email)
    return ClearAllResponse(message="All files have been cleared", removed=len(removed))
