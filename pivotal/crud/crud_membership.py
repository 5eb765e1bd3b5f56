"""CRUD operations for project memberships."""

from typing import List

from pivotal.core.exceptions import PivotalException
from pivotal.core.shared_models import ServiceMethod
from pivotal.crud._base import CRUDBase
from pivotal.platform.entities import Membership, UserToken
from pivotal.platform.http_client import PivotalHttpClient


class CRUDMembership(CRUDBase[Membership]):
    """CRUD operations for the memberships of a project."""

    def get_multi(
        self, client: PivotalHttpClient, user: UserToken, project_id: int
    ) -> List[Membership]:
        """Get the memberships of a project."""
        return self._get_list(client, user, f"/projects/{project_id}/memberships")

    def create(
        self, client: PivotalHttpClient, user: UserToken, project_id: int, membership: Membership
    ) -> Membership:
        """Add a person to a project and return the membership as stored by the service."""
        return self._submit(
            client, user, f"/projects/{project_id}/memberships", membership, ServiceMethod.POST
        )

    def delete(
        self, client: PivotalHttpClient, user: UserToken, project_id: int, membership: Membership
    ) -> Membership:
        """Remove a membership and return it as reported by the service."""
        if membership.id is None:
            raise PivotalException("Membership must have an id to be addressed")
        return self._submit(
            client,
            user,
            f"/projects/{project_id}/memberships/{membership.id}",
            membership,
            ServiceMethod.DELETE,
        )


# Singleton instance
membership = CRUDMembership(Membership)
