"""Library exceptions."""


class Notion2HtmlError(Exception):
    """Base notion2html error."""


class ExportLoadError(Notion2HtmlError):
    """An export file could not be read or does not look like a block table."""


class BlockNotFound(Notion2HtmlError):
    """The requested root block is missing or has nothing to render."""
