"""
Document type metadata used when describing documents in messages.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from beacon.config import Config
from beacon.core import get_field


class DocumentTypes:
    """
    Lookup of display labels and page-ness for document types.

    A document counts as a page if its type is listed as a page type or
    its slug is a URL path (starts with "/").
    """

    def __init__(
        self,
        labels: Mapping[str, str] | None = None,
        page_types: Iterable[str] = (),
        global_type: str = "global"
    ) -> None:
        self.labels = dict(labels or {})
        self.page_types = set(page_types)
        self.global_type = global_type

    @classmethod
    def from_config(cls, config: Config) -> "DocumentTypes":
        labels = {
            name: type_config.label
            for name, type_config in config.document_types.items()
            if type_config.label
        }
        page_types = [
            name for name, type_config in config.document_types.items() if type_config.page
        ]
        return cls(labels, page_types, config.global_type)

    def label(self, type_name: str) -> str | None:
        return self.labels.get(type_name)

    def is_global(self, type_name: str) -> bool:
        return type_name == self.global_type

    def is_page(self, doc: Any) -> bool:
        type_name = get_field(doc, "type")
        if type_name is not None and str(type_name) in self.page_types:
            return True
        slug = get_field(doc, "slug")
        return isinstance(slug, str) and slug.startswith("/")
