"""
Standard notifications for content workflow events.

The workflow emits these events with the request context followed by a
payload describing what moved between locales. Locale names are reported
in their live form ("en" rather than "en-draft").
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from beacon.core import RequestContext, get_field

if TYPE_CHECKING:
    from beacon.dispatcher import NotificationDispatcher

DRAFT_SUFFIX = "-draft"

AFTER_COMMIT = "workflow:afterCommit"
AFTER_EXPORT = "workflow:afterExport"
AFTER_FORCE_EXPORT = "workflow:afterForceExport"
AFTER_FORCE_EXPORT_WIDGET = "workflow:afterForceExportWidget"


def liveify(locale: str | Sequence[str] | None) -> Any:
    """Turn a draft locale name, or a list of them, into the live name."""
    if locale is None:
        return None
    if isinstance(locale, str):
        return locale[:-len(DRAFT_SUFFIX)] if locale.endswith(DRAFT_SUFFIX) else locale
    return [liveify(name) for name in locale]


def widget_label(widget: Any) -> str:
    """Human name for a widget: its label, else its type without a vendor prefix."""
    label = get_field(widget, "label")
    if label:
        return label
    widget_type = get_field(widget, "type") or "unknown"
    return widget_type.rsplit(":", 1)[-1].replace("-", " ").title()


def on_commit(_context: RequestContext | None, commit: Any) -> list[Any]:
    doc = get_field(commit, "from")
    return [
        "{user} committed the {type} {title} in {string}",
        doc, doc, liveify(get_field(doc, "workflowLocale"))
    ]


def on_export(_context: RequestContext | None, exported: Any) -> list[Any]:
    doc = get_field(exported, "from")
    return [
        "{user} exported the {type} {title} from {string} to {string}",
        doc, doc, liveify(get_field(doc, "workflowLocale")), liveify(get_field(exported, "toLocales"))
    ]


def on_force_export(_context: RequestContext | None, exported: Any) -> list[Any]:
    doc = get_field(exported, "from")
    return [
        "{user} force-exported the {type} {title} from {string} to {string}",
        doc, doc, liveify(get_field(doc, "workflowLocale")), liveify(get_field(exported, "toLocales"))
    ]


def on_force_export_widget(_context: RequestContext | None, exported: Any) -> list[Any]:
    doc = get_field(exported, "from")
    return [
        "{user} force-exported a {string} widget on the {type} {title} from {string} to {string}",
        widget_label(get_field(exported, "widget")),
        doc, doc, liveify(get_field(doc, "workflowLocale")), liveify(get_field(exported, "toLocales"))
    ]


STANDARD_LISTENERS = {
    AFTER_COMMIT: on_commit,
    AFTER_EXPORT: on_export,
    AFTER_FORCE_EXPORT: on_force_export,
    AFTER_FORCE_EXPORT_WIDGET: on_force_export_widget,
}


def add_standard_event_listeners(dispatcher: "NotificationDispatcher") -> None:
    """Bind the content workflow events to their notifications."""
    for event_name, map_fn in STANDARD_LISTENERS.items():
        dispatcher.notify_on(event_name, map_fn)
