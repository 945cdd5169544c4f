"""Exception classes for content conversion."""


class ContentError(Exception):
    """Base content conversion exception."""

    def __init__(self, message: str, mode: str | None = None):
        self.message = message
        self.mode = mode
        super().__init__(message)


class InvalidParseMode(ContentError):
    """Parse mode is neither HTML nor Markdown."""

    pass


class DomParseFailure(ContentError):
    """Sanitized HTML could not be parsed into a document with a body."""

    pass


class EmptyContent(ContentError):
    """Nothing renderable was left after sanitization."""

    pass


class UnsupportedTagError(ContentError):
    """A tag outside the vocabulary reached the tree converter."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Tag <{tag}> is not supported by Telegraph")
