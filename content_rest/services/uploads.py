# content_rest/services/uploads.py
"""
Transport-agnostic view of a content item data upload.

The HTTP layer extracts an UploadSubmission from the raw request before the
gateway is called, so the gateway never sees framework request objects.
"""
import logging
from dataclasses import dataclass, field
from typing import BinaryIO, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class UploadPart:
    """A single file part of a multipart request."""
    field_name: str
    filename: Optional[str] = None
    content_type: Optional[str] = None
    file: Optional[BinaryIO] = None

    def open(self) -> Optional[BinaryIO]:
        """
        Return the part's content as a readable binary stream.

        Returns:
            The stream positioned at its start, or None when the part has no
            content or it can no longer be read (e.g. already closed).
        """
        if self.file is None:
            return None
        # SpooledTemporaryFile only grew readable() in Python 3.11
        readable = getattr(self.file, "readable", None)
        seekable = getattr(self.file, "seekable", None)
        try:
            if self.file.closed or (readable is not None and not readable()):
                return None
            if seekable is None or seekable():
                self.file.seek(0)
        except (OSError, ValueError) as e:
            logger.warning(f"Upload part '{self.field_name}' cannot be opened: {e}")
            return None
        return self.file


@dataclass
class UploadSubmission:
    """The file parts of a save request, in the order they were received."""
    is_multipart: bool
    parts: List[UploadPart] = field(default_factory=list)

    def first_part(self) -> Optional[UploadPart]:
        # Only the first file part is used; any others are ignored.
        return self.parts[0] if self.parts else None
