"""CRUD operations for iterations."""

from typing import Dict, List, Optional

from pivotal.core.shared_models import IterationGroup
from pivotal.crud._base import CRUDBase
from pivotal.platform.entities import Iteration, UserToken
from pivotal.platform.http_client import PivotalHttpClient


class CRUDIteration(CRUDBase[Iteration]):
    """Reads iterations. Iterations cannot be written."""

    def get_multi(
        self,
        client: PivotalHttpClient,
        user: UserToken,
        project_id: int,
        group: IterationGroup = IterationGroup.ALL,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Iteration]:
        """Get the iterations of a project with their stories.

        Args:
            client: Transport
            user: Token of the requesting user
            project_id: The project to read
            group: Iteration group; ``ALL`` and ``UNKNOWN`` request every iteration
            limit: Maximum number of iterations to return
            offset: Number of iterations to skip

        Returns:
            The iterations
        """
        path = f"/projects/{project_id}/iterations"
        if group not in (IterationGroup.ALL, IterationGroup.UNKNOWN):
            path = f"{path}/{IterationGroup(group).value}"
        params: Dict[str, int] = {}
        if limit is not None:
            params["limit"] = limit
        if offset is not None:
            params["offset"] = offset
        return self._get_list(client, user, path, params=params or None)


# Singleton instance
iteration = CRUDIteration(Iteration)
