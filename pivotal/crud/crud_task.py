"""CRUD operations for tasks."""

from typing import List

from pivotal.core.exceptions import PivotalException
from pivotal.core.shared_models import ServiceMethod
from pivotal.crud._base import CRUDBase, story_path
from pivotal.platform.entities import Story, Task, UserToken
from pivotal.platform.http_client import PivotalHttpClient


def _task_path(story: Story, task: Task) -> str:
    if task.id is None:
        raise PivotalException("Task must have an id to be addressed")
    return f"{story_path(story)}/tasks/{task.id}"


class CRUDTask(CRUDBase[Task]):
    """CRUD operations for the tasks of a story."""

    def get_multi(self, client: PivotalHttpClient, user: UserToken, story: Story) -> List[Task]:
        """Get the tasks of a story."""
        return self._get_list(client, user, f"{story_path(story)}/tasks")

    def create(self, client: PivotalHttpClient, user: UserToken, story: Story, task: Task) -> Task:
        """Add a task to a story and return the task as stored by the service."""
        return self._submit(client, user, f"{story_path(story)}/tasks", task, ServiceMethod.POST)

    def update(self, client: PivotalHttpClient, user: UserToken, story: Story, task: Task) -> Task:
        """Submit changes to a task and return the updated task as a new instance."""
        return self._submit(client, user, _task_path(story, task), task, ServiceMethod.PUT)

    def update_in_place(
        self, client: PivotalHttpClient, user: UserToken, story: Story, task: Task
    ) -> Task:
        """Submit changes to a task and overwrite every field of ``task`` with the response."""
        return self._submit_in_place(
            client, user, _task_path(story, task), task, ServiceMethod.PUT
        )

    def delete(self, client: PivotalHttpClient, user: UserToken, story: Story, task: Task) -> Task:
        """Delete a task and return it as reported by the service."""
        return self._submit(client, user, _task_path(story, task), task, ServiceMethod.DELETE)

    def delete_by_id(
        self,
        client: PivotalHttpClient,
        user: UserToken,
        project_id: int,
        story_id: int,
        task_id: int,
    ) -> Task:
        """Delete a task without a task instance and return it as reported by the service."""
        document = client.submit(
            f"/projects/{project_id}/stories/{story_id}/tasks/{task_id}",
            "",
            ServiceMethod.DELETE,
            token=user.api_token,
        )
        return self._from_document(document)


# Singleton instance
task = CRUDTask(Task)
