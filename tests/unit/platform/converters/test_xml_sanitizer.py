"""Tests for preparing serialized documents for submission."""

import pytest
from lxml import etree

from pivotal.core.exceptions import DocumentRootNotFoundError
from pivotal.platform.converters.wire_fields import WireTimestamp
from pivotal.platform.converters.xml_converter import xml_converter
from pivotal.platform.converters.xml_sanitizer import clean_for_submission
from pivotal.platform.entities import Attachment, Membership, Note, Person, Story, Task


def _child_tags(markup: str, path: str = "."):
    root = etree.fromstring(markup)
    node = root if path == "." else root.find(path)
    return [child.tag for child in node]


def test_excluded_fields_never_submitted():
    """Test that excluded fields are removed whether or not they are populated."""
    task = Task(
        id=10,
        description="Write tests",
        created_at=WireTimestamp("2024/02/01 09:00:00 UTC"),
    )

    markup = clean_for_submission(
        xml_converter.to_document(task), "task", ["id", "created_at"], drop_attributed=False
    )
    tags = _child_tags(markup)

    assert "id" not in tags
    assert "created_at" not in tags
    assert "description" in tags


def test_excluded_fields_removed_when_unset():
    """Test that unset excluded fields (null markers) are removed too."""
    markup = clean_for_submission(
        xml_converter.to_document(Task(description="x")),
        "task",
        ["id", "created_at"],
        drop_attributed=False,
    )
    tags = _child_tags(markup)

    assert "id" not in tags
    assert "created_at" not in tags


def test_absent_excluded_node_is_ignored():
    """Test that excluding a node that does not exist is not an error."""
    document = etree.fromstring("<note><text>hi</text></note>")

    markup = clean_for_submission(document, "note", ["id", "noted_at"])

    assert markup == "<note><text>hi</text></note>"


def test_attributed_children_removed_in_order():
    """Test that every attributed child is dropped and the rest keep their order."""
    document = etree.fromstring(
        '<task><a>1</a><b x="1"/><c>3</c><d y="2">4</d><e>5</e></task>'
    )

    markup = clean_for_submission(document, "task", [])

    assert _child_tags(markup) == ["a", "c", "e"]


def test_consecutive_attributed_children_all_removed():
    """Test that adjacent attributed children are all removed."""
    document = etree.fromstring('<task><a x="1"/><b y="1"/><c z="1"/><d>4</d></task>')

    markup = clean_for_submission(document, "task", [])

    assert markup == "<task><d>4</d></task>"


def test_attributed_children_kept_when_disabled():
    """Test that attribute dropping can be turned off."""
    document = etree.fromstring('<task><a x="1"/><b>2</b></task>')

    markup = clean_for_submission(document, "task", [], drop_attributed=False)

    assert _child_tags(markup) == ["a", "b"]


def test_root_attributes_and_namespaces_stripped():
    """Test that the root loses its attributes and unused namespace declarations."""
    document = xml_converter.to_document(Story(name="Fix"))

    markup = clean_for_submission(document, "story", Story.exclude_on_submit)

    assert markup == "<story><story_type>feature</story_type><name>Fix</name></story>"


def test_root_attributes_removed():
    """Test that plain root attributes are removed."""
    document = etree.fromstring('<note foo="bar"><text>hi</text></note>')

    assert clean_for_submission(document, "note", []) == "<note><text>hi</text></note>"


def test_root_path_accepts_slashes():
    """Test that a path written with slashes locates the root."""
    document = xml_converter.to_document(Note(text="hello", author="Ada"))

    markup = clean_for_submission(document, "//note/", Note.exclude_on_submit)

    assert markup == "<note><text>hello</text><author>Ada</author></note>"


def test_nested_root_returns_whole_document():
    """Test that a nested root is cleaned and the whole document is returned."""
    document = etree.fromstring("<envelope><story><id>1</id><name>x</name></story></envelope>")

    markup = clean_for_submission(document, "story", ["id"])

    assert markup == "<envelope><story><name>x</name></story></envelope>"


def test_missing_root_raises():
    """Test that a missing root is a fatal error."""
    with pytest.raises(DocumentRootNotFoundError):
        clean_for_submission(etree.fromstring("<task/>"), "story", [])


def test_input_document_not_modified():
    """Test that the caller's document is left intact."""
    document = etree.fromstring('<task><id>1</id><a x="1"/></task>')

    clean_for_submission(document, "task", ["id"])

    assert [child.tag for child in document] == ["id", "a"]


def test_accepts_element_tree():
    """Test that an element tree is accepted."""
    tree = etree.ElementTree(etree.fromstring("<note><text>hi</text></note>"))

    assert clean_for_submission(tree, "note", []) == "<note><text>hi</text></note>"


def test_nested_null_markers_removed():
    """Test that null markers inside nested entities are removed with their namespace."""
    membership = Membership(person=Person(email="ada@example.com", name="Ada"), role="Member")

    markup = clean_for_submission(
        xml_converter.to_document(membership), "membership", Membership.exclude_on_submit
    )

    assert markup == (
        "<membership><person><email>ada@example.com</email><name>Ada</name></person>"
        "<role>Member</role></membership>"
    )


def test_nested_attributed_children_removed_in_order():
    """Test that deeper attributed elements are dropped and siblings keep their order."""
    document = etree.fromstring(
        '<story><a><b x="1"/><c>2</c><d y="1"/><e>4</e></a><f z="1"/><g>6</g></story>'
    )

    markup = clean_for_submission(document, "story", [])

    assert markup == "<story><a><c>2</c><e>4</e></a><g>6</g></story>"


def test_attachment_excluded_fields_never_submitted():
    """Test that an attachment document drops its id and status."""
    attachment = Attachment(
        id=3,
        filename="log.txt",
        description="Build log",
        status="Pending",
        url="https://tracker.test/resource/3",
        data=b"contents",
    )

    markup = clean_for_submission(
        xml_converter.to_document(attachment), "attachment", Attachment.exclude_on_submit
    )

    assert markup == (
        "<attachment><filename>log.txt</filename><description>Build log</description>"
        "<url>https://tracker.test/resource/3</url></attachment>"
    )
