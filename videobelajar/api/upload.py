"""Upload endpoint: store one multipart file under UPLOAD_DIR, served back from /upload."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from videobelajar.core.config import Settings, get_settings
from videobelajar.schemas import ApiResponse, UploadedFile, ok
from videobelajar.services.uploads import store_upload

router = APIRouter()


@router.post("", response_model=ApiResponse[UploadedFile], response_model_exclude_unset=True)
def upload_file(
    settings: Annotated[Settings, Depends(get_settings)],
    file: Annotated[UploadFile | None, File()] = None,
) -> dict:
    """
    Accept a single file in the multipart field `file`.

    The file is stored as {epoch millis}-{random}-{original name}; content type
    and size are not checked.
    """
    if file is None or not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded",
        )
    filename, path = store_upload(file.file, file.filename, settings.UPLOAD_DIR)
    return ok("File uploaded successfully", data=UploadedFile(filename=filename, path=path))
