"""Attachment entity schema."""

from typing import ClassVar, Optional, Tuple

from pydantic import Field

from pivotal.platform.entities._base import WireEntity


class Attachment(WireEntity):
    """A file attached to a story.

    ``data`` holds the file content for uploads and is never part of a wire document.
    Uploads are sent as multipart form data; ``exclude_on_submit`` applies when the
    attachment is written as a document.
    """

    wire_root: ClassVar[str] = "attachment"
    wire_list_root: ClassVar[str] = "attachments"
    exclude_on_submit: ClassVar[Tuple[str, ...]] = ("id", "status")

    id: Optional[int] = Field(None, description="The id of the attachment.")
    filename: Optional[str] = Field(None, description="Name of the uploaded file.")
    description: Optional[str] = Field(None, description="Description of the attachment.")
    status: Optional[str] = Field(None, description="Upload status reported by the service.")
    url: Optional[str] = Field(None, description="Download URL of the attachment.")
    data: Optional[bytes] = Field(None, exclude=True, description="File content to upload.")
