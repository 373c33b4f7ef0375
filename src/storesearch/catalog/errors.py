class ParseError(Exception):
    """Generic parsing failure."""


class ItemParseError(ParseError):
    """A single catalog item lacks a field its shape requires."""
