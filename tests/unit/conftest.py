"""Unit test conftest for setting up test environment."""

import os

# Set environment before importing any pivotal modules so Settings picks it up
os.environ.setdefault("PIVOTAL_BASE_URL", "https://tracker.test/services/v3")
os.environ.setdefault("PIVOTAL_MAX_ATTEMPTS", "1")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from unittest.mock import MagicMock  # noqa: E402

import pytest  # noqa: E402

from pivotal.platform.entities import UserToken  # noqa: E402
from pivotal.platform.http_client import PivotalHttpClient  # noqa: E402

XSI = 'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"'


@pytest.fixture
def user():
    """Create a test user token."""
    return UserToken(guid="tok-123", id=99)


@pytest.fixture
def mock_client():
    """Create a mock transport."""
    return MagicMock(spec=PivotalHttpClient)


@pytest.fixture
def story_xml():
    """A story document as returned by the service."""
    return f"""<?xml version="1.0" encoding="UTF-8"?>
<story {XSI}>
  <id type="integer">42</id>
  <project_id type="integer">7</project_id>
  <story_type>bug</story_type>
  <url>https://tracker.test/story/show/42</url>
  <estimate type="integer">2</estimate>
  <current_state>started</current_state>
  <description xsi:nil="true"/>
  <name>Crash on save</name>
  <requested_by>Ada</requested_by>
  <labels>ui,api</labels>
  <created_at type="datetime">2024/01/15 02:30:00 UTC</created_at>
  <unknown_tag>ignored</unknown_tag>
</story>"""


@pytest.fixture
def stories_xml():
    """A story list document with a bug and a chore."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<stories type="array" count="2">
  <story>
    <id type="integer">1</id>
    <project_id type="integer">7</project_id>
    <story_type>bug</story_type>
    <name>Broken link</name>
  </story>
  <story>
    <id type="integer">2</id>
    <project_id type="integer">7</project_id>
    <story_type>chore</story_type>
    <name>Upgrade build</name>
  </story>
</stories>"""


@pytest.fixture
def tasks_xml():
    """A task list document."""
    return """<tasks type="array" count="2">
  <task>
    <id type="integer">10</id>
    <description>Write tests</description>
    <position>1</position>
    <complete>false</complete>
    <created_at type="datetime">2024/02/01 09:00:00 UTC</created_at>
  </task>
  <task>
    <id type="integer">11</id>
    <description>Ship it</description>
    <position>2</position>
    <complete>true</complete>
    <created_at type="datetime">2024/02/01 10:00:00 UTC</created_at>
  </task>
</tasks>"""
