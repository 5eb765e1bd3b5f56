"""Tests for converting entities to and from XML documents."""

from datetime import datetime

import pytest

from pivotal.core.exceptions import WireDocumentError
from pivotal.core.shared_models import StoryState, StoryType
from pivotal.platform.converters.xml_converter import NIL_ATTRIBUTE, xml_converter
from pivotal.platform.entities import Iteration, Membership, Person, Project, Story


def test_to_document_writes_fields_in_order():
    """Test that every field becomes a child element in declaration order."""
    document = xml_converter.to_document(Story(id=5, name="Fix", labels="ui,api"))

    assert document.tag == "story"
    assert [child.tag for child in document] == [
        "project_id",
        "id",
        "story_type",
        "name",
        "description",
        "requested_by",
        "owned_by",
        "labels",
        "estimate",
        "url",
        "current_state",
        "created_at",
        "accepted_at",
    ]
    assert document.find("id").text == "5"
    assert document.find("labels").text == "ui,api"
    assert document.find("story_type").text == "feature"


def test_to_document_writes_null_markers():
    """Test that absent values are written as nil markers."""
    document = xml_converter.to_document(Story(name="Fix"))

    assert document.find("estimate").get(NIL_ATTRIBUTE) == "true"
    assert document.find("created_at").get(NIL_ATTRIBUTE) == "true"
    assert document.find("name").get(NIL_ATTRIBUTE) is None


def test_to_document_uses_raw_view_and_aliases():
    """Test that synchronized fields use their raw view and aliases name the tag."""
    project = Project(name="Tracker", is_public=True, labels="a,b")
    project.label_values = ["x", "y"]

    document = xml_converter.to_document(project)

    assert document.find("labels").text == "x,y"
    assert document.find("public").text == "true"
    assert document.find("is_public") is None


def test_to_document_nests_entities():
    """Test that nested entities are written as child elements."""
    membership = Membership(person=Person(email="ada@example.com", name="Ada"), role="Owner")

    document = xml_converter.to_document(membership)

    assert document.find("person/email").text == "ada@example.com"
    assert document.find("person/initials").get(NIL_ATTRIBUTE) == "true"
    assert document.find("role").text == "Owner"


def test_from_document_reads_story(story_xml):
    """Test that a story document populates every known field."""
    story = xml_converter.from_document(xml_converter.parse(story_xml), Story)

    assert story.id == 42
    assert story.project_id == 7
    assert story.type == StoryType.BUG
    assert story.state == StoryState.STARTED
    assert story.estimate == 2
    assert story.description is None
    assert story.requested_by == "Ada"
    assert story.label_values == ["ui", "api"]
    assert story.labels.raw == "ui,api"
    assert story.creation_date == datetime(2024, 1, 15, 2, 30, 0)
    assert story.accepted_date == datetime.min


def test_from_document_rejects_wrong_root(story_xml):
    """Test that a document with another root is rejected."""
    with pytest.raises(WireDocumentError):
        xml_converter.from_document(xml_converter.parse(story_xml), Project)


def test_from_list_document(stories_xml):
    """Test that a plural container yields every entity."""
    stories = xml_converter.from_list_document(xml_converter.parse(stories_xml), Story)

    assert [story.id for story in stories] == [1, 2]
    assert [story.type for story in stories] == [StoryType.BUG, StoryType.CHORE]


def test_from_list_document_rejects_single_root(story_xml):
    """Test that a single-entity document is not a list."""
    with pytest.raises(WireDocumentError):
        xml_converter.from_list_document(xml_converter.parse(story_xml), Story)


def test_from_document_reads_nested_lists():
    """Test that iterations carry their stories."""
    iterations = xml_converter.from_list_document(
        xml_converter.parse(
            """<iterations type="array">
  <iteration>
    <id type="integer">1</id>
    <number type="integer">3</number>
    <start type="datetime">2024/01/01 00:00:00 UTC</start>
    <finish type="datetime">2024/01/15 00:00:00 UTC</finish>
    <stories type="array">
      <story><id type="integer">1</id><estimate type="integer">3</estimate></story>
      <story><id type="integer">2</id><story_type>chore</story_type></story>
      <story><id type="integer">3</id><estimate type="integer">2</estimate></story>
    </stories>
  </iteration>
</iterations>"""
        ),
        Iteration,
    )

    assert len(iterations) == 1
    iteration = iterations[0]
    assert iteration.number == 3
    assert iteration.start_date == datetime(2024, 1, 1)
    assert [story.id for story in iteration.stories] == [1, 2, 3]
    assert iteration.calculate_velocity() == 5.0


def test_from_document_reads_nested_entity():
    """Test that memberships carry their person."""
    membership = xml_converter.from_document(
        xml_converter.parse(
            "<membership><id>4</id><person><email>ada@example.com</email>"
            "<name>Ada</name><initials>AL</initials></person><role>Member</role></membership>"
        ),
        Membership,
    )

    assert membership.id == 4
    assert membership.person.initials == "AL"
    assert membership.role == "Member"


def test_from_document_reads_booleans():
    """Test that boolean text values parse."""
    project = xml_converter.from_document(
        xml_converter.parse("<project><id>1</id><public>true</public></project>"), Project
    )

    assert project.is_public is True
