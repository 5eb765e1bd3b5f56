"""Base class for entity operations against the tracker service."""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pivotal.core.exceptions import PivotalException
from pivotal.core.logging import logger
from pivotal.core.shared_models import ServiceMethod
from pivotal.platform.converters.xml_converter import xml_converter
from pivotal.platform.converters.xml_sanitizer import clean_for_submission
from pivotal.platform.entities import Story, UserToken
from pivotal.platform.entities._base import WireEntity
from pivotal.platform.http_client import PivotalHttpClient

EntityType = TypeVar("EntityType", bound=WireEntity)


class CRUDBase(Generic[EntityType]):
    """Reads and writes one entity type.

    Writes serialize the instance, sanitize the document with the type's exclusion
    list and root, submit it, and deserialize the response into a new instance.
    """

    def __init__(self, entity_cls: Type[EntityType]):
        """Initialize the CRUD object.

        Args:
            entity_cls: The entity class handled by this object
        """
        self.entity_cls = entity_cls
        self.logger = logger.with_context(component="crud", entity=entity_cls.__name__)

    def _get_one(
        self,
        client: PivotalHttpClient,
        user: UserToken,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> EntityType:
        document = client.fetch(path, params=params, token=user.api_token)
        return self._from_document(document)

    def _get_list(
        self,
        client: PivotalHttpClient,
        user: UserToken,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> List[EntityType]:
        document = client.fetch(path, params=params, token=user.api_token)
        entities = xml_converter.from_list_document(document, self.entity_cls)
        self.logger.debug(f"Fetched {len(entities)} entities from {path}")
        return entities

    def _submit(
        self,
        client: PivotalHttpClient,
        user: UserToken,
        path: str,
        entity: EntityType,
        method: ServiceMethod,
    ) -> EntityType:
        payload = clean_for_submission(
            xml_converter.to_document(entity), entity.wire_root, entity.exclude_on_submit
        )
        document = client.submit(path, payload, method, token=user.api_token)
        return self._from_document(document)

    def _submit_in_place(
        self,
        client: PivotalHttpClient,
        user: UserToken,
        path: str,
        entity: EntityType,
        method: ServiceMethod,
    ) -> EntityType:
        updated = self._submit(client, user, path, entity, method)
        entity.copy_fields_from(updated)
        return entity

    def _from_document(self, document) -> EntityType:
        return xml_converter.from_document(document, self.entity_cls)


def story_path(story: Story) -> str:
    """Return the service path of a persisted story.

    Raises:
        PivotalException: If the story has no project id or id yet
    """
    if story.project_id is None or story.id is None:
        raise PivotalException("Story must have a project_id and id to be addressed")
    return f"/projects/{story.project_id}/stories/{story.id}"
