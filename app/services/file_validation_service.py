import os
from typing import Optional
from fastapi import UploadFile, HTTPException, status

from app.config.file_config import MAX_DOCUMENT_SIZE

class FileValidationService:
    @staticmethod
    def validate_file_present(file: Optional[UploadFile]) -> None:

        if file is None or not file.filename:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="No file uploaded"
            )

    @staticmethod
    def validate_file_size(file: UploadFile, max_size: int = MAX_DOCUMENT_SIZE) -> int:

        # Check file size
        file.file.seek(0, os.SEEK_END)
        file_size = file.file.tell()
        file.file.seek(0)  # Reset file pointer

        if file_size > max_size:
            max_size_mb = max_size / (1024 * 1024)
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"File size exceeds maximum limit of {max_size_mb:g}MB"
            )
        return file_size

    @staticmethod
    def validate_file(file: Optional[UploadFile]) -> int:

        FileValidationService.validate_file_present(file)

        return FileValidationService.validate_file_size(file)
