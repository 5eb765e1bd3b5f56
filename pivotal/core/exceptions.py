"""Exceptions raised by the Pivotal client.

Transport failures are not wrapped: httpx and lxml errors reach the caller unchanged.
"""


class PivotalException(Exception):
    """Base exception for the Pivotal client."""

    pass


class StoryTypeParseError(PivotalException):
    """Raised when a story type string is not one of the known story types."""

    def __init__(self, value: object):
        """Initialize story type parse error.

        Args:
            value: The raw value that failed to parse
        """
        self.value = value
        super().__init__(f"Unrecognized story type: {value!r}")


class DocumentRootNotFoundError(PivotalException):
    """Raised when the entity root node cannot be located in a serialized document."""

    def __init__(self, root_path: str):
        """Initialize root not found error.

        Args:
            root_path: The path that was searched for
        """
        self.root_path = root_path
        super().__init__(f"Root node '{root_path}' not found in document")


class WireDocumentError(PivotalException):
    """Raised when a response document does not have the expected shape."""

    pass
