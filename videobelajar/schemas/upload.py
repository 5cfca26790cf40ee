"""Response schema for the upload endpoint."""

from pydantic import BaseModel, Field


class UploadedFile(BaseModel):
    """Where an uploaded file was stored."""

    filename: str = Field(..., description="Stored file name ({millis}-{random}-{original}).")
    path: str = Field(..., description="Path of the stored file on the server.")
