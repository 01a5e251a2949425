"""File schemas: field names match the web client's JSON."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from sharebox.models.file_record import FileRecord


class FileItem(BaseModel):
    """File metadata for listing."""

    model_config = ConfigDict(populate_by_name=True)

    filename: str  # storage key
    originalname: str
    owner: str
    type: str
    public: bool = False
    size: int = 0
    uploaded_at: datetime | None = Field(default=None, alias="uploadedAt")

    @classmethod
    def from_record(cls, record: FileRecord) -> "FileItem":
        return cls(
            filename=record.storage_key,
            originalname=record.original_name,
            owner=record.owner,
            type=record.mime_type,
            public=record.is_public,
            size=record.size_bytes,
            uploaded_at=record.uploaded_at,
        )


class FileListResponse(BaseModel):
    files: list[FileItem]


class FileDetailResponse(BaseModel):
    message: str
    file: FileItem


class FileActionRequest(BaseModel):
    """Body of togglePrivacy / deleteFile: the acting owner and the file."""

    filename: str
    owner: str


class ClearAllRequest(BaseModel):
    email: str


class MessageResponse(BaseModel):
    message: str


class ClearAllResponse(MessageResponse):
    removed: int
