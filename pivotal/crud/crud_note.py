"""CRUD operations for notes."""

from typing import List

from pivotal.core.shared_models import ServiceMethod
from pivotal.crud._base import CRUDBase, story_path
from pivotal.platform.entities import Note, Story, UserToken
from pivotal.platform.http_client import PivotalHttpClient


class CRUDNote(CRUDBase[Note]):
    """CRUD operations for the notes (comments) of a story."""

    def get_multi(self, client: PivotalHttpClient, user: UserToken, story: Story) -> List[Note]:
        """Get the notes of a story."""
        return self._get_list(client, user, f"{story_path(story)}/notes")

    def create(self, client: PivotalHttpClient, user: UserToken, story: Story, note: Note) -> Note:
        """Add a note to a story.

        Returns:
            The created note, including its id and ``noted_at`` timestamp
        """
        return self._submit(client, user, f"{story_path(story)}/notes", note, ServiceMethod.POST)


# Singleton instance
note = CRUDNote(Note)
