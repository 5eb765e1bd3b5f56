"""CRUD operations for attachments."""

from pivotal.core.exceptions import PivotalException
from pivotal.crud._base import CRUDBase, story_path
from pivotal.platform.entities import Attachment, Story, UserToken
from pivotal.platform.http_client import PivotalHttpClient


class CRUDAttachment(CRUDBase[Attachment]):
    """Uploads files to stories."""

    def upload(
        self, client: PivotalHttpClient, user: UserToken, story: Story, attachment: Attachment
    ) -> Attachment:
        """Upload an attachment's data to a story.

        Args:
            client: Transport
            user: Token of the requesting user
            story: The story to attach the file to
            attachment: Attachment holding ``filename`` and ``data``

        Returns:
            The attachment as reported by the service (``status`` shows the upload state)

        Raises:
            PivotalException: If the attachment has no data
        """
        if attachment.data is None:
            raise PivotalException("Attachment has no data to upload")
        document = client.upload(
            f"{story_path(story)}/attachments",
            attachment.filename or "attachment",
            attachment.data,
            token=user.api_token,
        )
        uploaded = self._from_document(document)
        self.logger.debug(f"Uploaded attachment {uploaded.id} with status {uploaded.status}")
        return uploaded


# Singleton instance
attachment = CRUDAttachment(Attachment)
