import os
from dotenv import load_dotenv

load_dotenv()

# MIME types with a dedicated extraction rule
PLAIN_TEXT_MIME_TYPE = "text/plain"
PDF_MIME_TYPE = "application/pdf"

# Used when the upload does not declare a content type
DEFAULT_MIME_TYPE = "application/octet-stream"

# File size limits (in bytes)
MAX_DOCUMENT_SIZE = int(os.getenv("MAX_DOCUMENT_SIZE", 10 * 1024 * 1024))  # 10MB for documents

# Stored as content when no text could be extracted
PDF_PLACEHOLDER_CONTENT = "PDF content extraction not implemented - file uploaded successfully"
UNSUPPORTED_PLACEHOLDER_CONTENT = (
    "File uploaded successfully - content extraction not supported for this file type"
)

# Random bytes behind each share code (token_urlsafe output is ~1.3x longer)
SHARE_CODE_BYTES = int(os.getenv("SHARE_CODE_BYTES", 9))
SHARE_CODE_MAX_ATTEMPTS = 5
