"""
Message templates for Beacon.

A template is plain text with typed placeholders:

    {user}    the acting user, "Title (username)" or just "username"
    {type}    a human name for a document's type
    {title}   a document's title, or its slug
    {string}  a string, or a list of strings joined with ", "

Every placeholder except {user} consumes the next positional argument.
"""

import re
from collections.abc import Set
from typing import Any

from beacon.core import Actor, get_field
from beacon.doctypes import DocumentTypes

PLACEHOLDER_PATTERN = re.compile(r"(\{(?:user|type|title|string)\})")

ANONYMOUS = "Anonymous"
UNDEFINED = "Undefined"
UNKNOWN = "Unknown"
SHARED_DOCUMENT = "shared document"
PAGE = "page"


class TemplateFormatter:
    """Renders message templates against an actor and positional arguments."""

    def __init__(self, types: DocumentTypes | None = None) -> None:
        self.types = types or DocumentTypes()

    def format(self, actor: Actor | None, template: str, *args: Any) -> str:
        """
        Render a template.

        Missing arguments and fields fall back to fixed literals, so
        this never raises for incomplete data.

        Args:
            actor: The acting user, or None for system events
            template: Template text
            *args: Values for the argument-consuming placeholders, in order

        Returns:
            The rendered text
        """
        output = []
        remaining = iter(args)
        missing = object()

        for part in PLACEHOLDER_PATTERN.split(template):
            if part == "{user}":
                output.append(self.user(actor))
                continue

            if part not in ("{type}", "{title}", "{string}"):
                output.append(part)
                continue

            arg = next(remaining, missing)
            if arg is missing:
                output.append(UNDEFINED)
            elif part == "{type}":
                output.append(self.type_name(arg))
            elif part == "{title}":
                output.append(self.title(arg))
            else:
                output.append(self.string(arg))

        return "".join(output)

    def user(self, actor: Actor | None) -> str:
        username = (actor and actor.username) or ANONYMOUS
        if actor and actor.title:
            return f"{actor.title} ({username})"
        return username

    def type_name(self, doc: Any) -> str:
        type_name = get_field(doc, "type")
        if not type_name:
            return UNDEFINED
        type_name = str(type_name)
        if self.types.is_global(type_name):
            return SHARED_DOCUMENT
        label = self.types.label(type_name)
        if label:
            return label
        if self.types.is_page(doc):
            return PAGE
        return type_name

    @staticmethod
    def title(doc: Any) -> str:
        value = get_field(doc, "title") or get_field(doc, "slug")
        return str(value) if value else UNKNOWN

    @staticmethod
    def string(value: Any) -> str:
        if isinstance(value, (list, tuple, Set)):
            return ", ".join(str(item) for item in value)
        return str(value)
