"""CRUD operations for projects and their stories."""

from typing import List, Optional

from pivotal.core.fetch_cache_service import fetch_cache_service
from pivotal.core.shared_models import ServiceMethod, StoryType
from pivotal.crud._base import CRUDBase
from pivotal.crud.crud_story import story
from pivotal.platform.entities import Project, Story, UserToken
from pivotal.platform.http_client import PivotalHttpClient
from pivotal.platform.utils.filter_utils import build_story_type_filter
from pivotal.schemas.fetch_options import FetchOptions


class CRUDProject(CRUDBase[Project]):
    """CRUD operations for projects.

    Story accessors keep the project's story cache. A refresh always fetches every
    story of the project; the typed accessors (``fetch_bugs`` and friends) filter
    the cached stories locally and use a request-side type filter for live fetches.
    """

    def get_multi(self, client: PivotalHttpClient, user: UserToken) -> List[Project]:
        """Get every project visible to the user."""
        return self._get_list(client, user, "/projects")

    def get(
        self,
        client: PivotalHttpClient,
        user: UserToken,
        project_id: int,
        load_stories: bool = False,
    ) -> Project:
        """Get a single project.

        Args:
            client: Transport
            user: Token of the requesting user
            project_id: The project to read
            load_stories: Also fetch the project's stories into its story cache

        Returns:
            The project
        """
        project = self._get_one(client, user, f"/projects/{project_id}")
        if load_stories:
            self.load_stories(client, user, project)
        return project

    def create(self, client: PivotalHttpClient, user: UserToken, project: Project) -> Project:
        """Add a project owned by the user and return it as stored by the service."""
        return self._submit(client, user, "/projects", project, ServiceMethod.POST)

    def load_projects(self, client: PivotalHttpClient, user: UserToken) -> List[Project]:
        """Fetch every project visible to the user and store them on the token."""
        projects = self.get_multi(client, user)
        user._project_cache.replace(projects)
        return projects

    def load_stories(
        self, client: PivotalHttpClient, user: UserToken, project: Project
    ) -> List[Story]:
        """Fetch every story of the project and store them as its cached stories."""
        stories = story.get_multi(client, user, project.id)
        project._story_cache.replace(stories)
        return stories

    def fetch_stories(
        self,
        client: PivotalHttpClient,
        user: UserToken,
        project: Project,
        options: Optional[FetchOptions] = None,
    ) -> List[Story]:
        """Get every story of the project, honoring the cache options."""
        return fetch_cache_service.fetch(
            project._story_cache, options, lambda: story.get_multi(client, user, project.id)
        )

    def _fetch_typed(
        self,
        client: PivotalHttpClient,
        user: UserToken,
        project: Project,
        story_type: StoryType,
        options: Optional[FetchOptions],
    ) -> List[Story]:
        return fetch_cache_service.fetch(
            project._story_cache,
            options,
            fetch_all=lambda: story.get_multi(client, user, project.id),
            fetch_live=lambda: story.get_multi(
                client, user, project.id, build_story_type_filter(story_type)
            ),
            cached_filter=lambda cached: cached.type == story_type,
        )

    def fetch_bugs(
        self,
        client: PivotalHttpClient,
        user: UserToken,
        project: Project,
        options: Optional[FetchOptions] = None,
    ) -> List[Story]:
        """Get the bugs of the project."""
        return self._fetch_typed(client, user, project, StoryType.BUG, options)

    def fetch_chores(
        self,
        client: PivotalHttpClient,
        user: UserToken,
        project: Project,
        options: Optional[FetchOptions] = None,
    ) -> List[Story]:
        """Get the chores of the project."""
        return self._fetch_typed(client, user, project, StoryType.CHORE, options)

    def fetch_features(
        self,
        client: PivotalHttpClient,
        user: UserToken,
        project: Project,
        options: Optional[FetchOptions] = None,
    ) -> List[Story]:
        """Get the features of the project."""
        return self._fetch_typed(client, user, project, StoryType.FEATURE, options)

    def fetch_releases(
        self,
        client: PivotalHttpClient,
        user: UserToken,
        project: Project,
        options: Optional[FetchOptions] = None,
    ) -> List[Story]:
        """Get the releases of the project."""
        return self._fetch_typed(client, user, project, StoryType.RELEASE, options)


# Singleton instance
project = CRUDProject(Project)
