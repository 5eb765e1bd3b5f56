"""CRUD operations for stories."""

from typing import List, Optional

from pivotal.core.fetch_cache_service import fetch_cache_service
from pivotal.core.shared_models import ServiceMethod
from pivotal.crud._base import CRUDBase, story_path
from pivotal.crud.crud_task import task
from pivotal.platform.entities import Story, Task, UserToken
from pivotal.platform.http_client import PivotalHttpClient
from pivotal.platform.utils.filter_utils import filter_to_params
from pivotal.schemas.fetch_options import FetchOptions


class CRUDStory(CRUDBase[Story]):
    """CRUD operations for stories."""

    def get_multi(
        self,
        client: PivotalHttpClient,
        user: UserToken,
        project_id: int,
        story_filter: Optional[str] = None,
    ) -> List[Story]:
        """Get the stories of a project.

        Args:
            client: Transport
            user: Token of the requesting user
            project_id: The project to read
            story_filter: Optional filter built with ``pivotal.platform.utils.filter_utils``

        Returns:
            The matching stories
        """
        return self._get_list(
            client, user, f"/projects/{project_id}/stories", params=filter_to_params(story_filter)
        )

    def get(
        self, client: PivotalHttpClient, user: UserToken, project_id: int, story_id: int
    ) -> Story:
        """Get a single story."""
        return self._get_one(client, user, f"/projects/{project_id}/stories/{story_id}")

    def create(
        self, client: PivotalHttpClient, user: UserToken, project_id: int, story: Story
    ) -> Story:
        """Add a story to a project and return the story as stored by the service."""
        return self._submit(
            client, user, f"/projects/{project_id}/stories", story, ServiceMethod.POST
        )

    def update(self, client: PivotalHttpClient, user: UserToken, story: Story) -> Story:
        """Submit changes to a story and return the updated story as a new instance."""
        return self._submit(client, user, story_path(story), story, ServiceMethod.PUT)

    def update_in_place(self, client: PivotalHttpClient, user: UserToken, story: Story) -> Story:
        """Submit changes to a story and overwrite every field of ``story`` with the response.

        Returns:
            The same ``story`` instance
        """
        return self._submit_in_place(client, user, story_path(story), story, ServiceMethod.PUT)

    def delete(self, client: PivotalHttpClient, user: UserToken, story: Story) -> Story:
        """Delete a story.

        Returns:
            The deleted story as reported by the service
        """
        return self._submit(client, user, story_path(story), story, ServiceMethod.DELETE)

    def load_tasks(self, client: PivotalHttpClient, user: UserToken, story: Story) -> List[Task]:
        """Fetch the tasks of a story and store them as its cached tasks."""
        tasks = task.get_multi(client, user, story)
        story._task_cache.replace(tasks)
        return tasks

    def fetch_tasks(
        self,
        client: PivotalHttpClient,
        user: UserToken,
        story: Story,
        options: Optional[FetchOptions] = None,
    ) -> List[Task]:
        """Get the tasks of a story, honoring the cache options."""
        return fetch_cache_service.fetch(
            story._task_cache, options, lambda: task.get_multi(client, user, story)
        )


# Singleton instance
story = CRUDStory(Story)
