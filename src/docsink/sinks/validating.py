#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docsink/sinks/validating.py
"""Strict wrapper checking the sink calling contract.

XhtmlSink trusts its producer. ValidatingSink sits in front of any sink with
the same event interface, tracks the open constructs and raises
EventOrderError as soon as an event breaks the contract:

- end events must close the most recently opened construct of their kind,
  and section/title ends must repeat the level of their start;
- table events must follow ``table -> table_rows -> table_row -> cell``;
- list items must be inside a list of the matching kind;
- figure captions must be inside a figure, and a legacy figure must not
  receive attribute-style graphics or captions; graphics outside a figure
  are a plain image;
- closing the sink with constructs still open is an error.

For valid event streams the output is identical to the wrapped sink's.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from docsink.exceptions import EventOrderError
from docsink.options.base import UNSET
from docsink.sinks.types import FigureMode

logger = logging.getLogger(__name__)

# event -> (construct it opens, constructs allowed directly around it; None = anywhere)
_OPEN_EVENTS: dict[str, tuple[str, tuple[str, ...] | None]] = {
    "section": ("section", None),
    "section_title": ("section_title", None),
    "unordered_list": ("unordered_list", None),
    "list_item": ("list_item", ("unordered_list",)),
    "numbered_list": ("numbered_list", None),
    "numbered_list_item": ("numbered_list_item", ("numbered_list",)),
    "definition_list": ("definition_list", None),
    "defined_term": ("defined_term", ("definition_list",)),
    "definition": ("definition", ("definition_list",)),
    "paragraph": ("paragraph", None),
    "verbatim": ("verbatim", None),
    "table_rows": ("table_rows", ("table",)),
    "table_row": ("table_row", ("table_rows",)),
    "table_cell": ("table_cell", ("table_row",)),
    "table_header_cell": ("table_header_cell", ("table_row",)),
    "table_caption": ("table_caption", ("table", "table_rows")),
    "link": ("link", None),
    "anchor": ("anchor", None),
    "italic": ("italic", None),
    "bold": ("bold", None),
    "monospaced": ("monospaced", None),
    "head": ("head", None),
}

# event -> construct it closes
_CLOSE_EVENTS: dict[str, str] = {
    "section_end": "section",
    "section_title_end": "section_title",
    "unordered_list_end": "unordered_list",
    "list_item_end": "list_item",
    "numbered_list_end": "numbered_list",
    "numbered_list_item_end": "numbered_list_item",
    "definition_list_end": "definition_list",
    "defined_term_end": "defined_term",
    "definition_end": "definition",
    "paragraph_end": "paragraph",
    "verbatim_end": "verbatim",
    "table_end": "table",
    "table_rows_end": "table_rows",
    "table_row_end": "table_row",
    "table_cell_end": "table_cell",
    "table_header_cell_end": "table_header_cell",
    "table_caption_end": "table_caption",
    "figure_end": "figure",
    "figure_caption_end": "figure_caption",
    "link_end": "link",
    "anchor_end": "anchor",
    "italic_end": "italic",
    "bold_end": "bold",
    "monospaced_end": "monospaced",
    "head_end": "head",
}

# Events opened and closed with a level argument that must match
_LEVELED = frozenset({"section", "section_title"})


def _level_argument(args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
    return args[0] if args else kwargs.get("level")


@dataclass
class _OpenConstruct:
    name: str
    level: int | None = None
    mode: FigureMode | None = None


class ValidatingSink:
    """Check the event order before forwarding events to a sink.

    Parameters
    ----------
    sink : object
        The sink receiving the events, typically an XhtmlSink

    Examples
    --------
        >>> from docsink import ValidatingSink, XhtmlSink
        >>> sink = ValidatingSink(XhtmlSink())
        >>> sink.table_row()
        Traceback (most recent call last):
        ...
        docsink.exceptions.EventOrderError: Unexpected sink event 'table_row'; expected inside table_rows

    """

    def __init__(self, sink: Any):
        """Wrap a sink."""
        self.sink = sink
        self._open: list[_OpenConstruct] = []

    @property
    def open_constructs(self) -> list[str]:
        """Names of the currently open constructs, outermost first."""
        return [construct.name for construct in self._open]

    def _top(self) -> _OpenConstruct | None:
        return self._open[-1] if self._open else None

    def _require_parent(self, event: str, parents: tuple[str, ...]) -> None:
        top = self._top()
        if top is None or top.name not in parents:
            raise EventOrderError(event, expected=f"inside {' or '.join(parents)}")

    def _push(self, event: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        construct, parents = _OPEN_EVENTS[event]
        if parents is not None:
            self._require_parent(event, parents)
        level = _level_argument(args, kwargs) if event in _LEVELED else None
        self._open.append(_OpenConstruct(construct, level=level))

    def _pop(self, event: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        construct = _CLOSE_EVENTS[event]
        top = self._top()
        if top is None:
            raise EventOrderError(event, message=f"Unexpected sink event '{event}'; {construct} is not open")
        if top.name != construct:
            raise EventOrderError(event, expected=f"{top.name} to be closed first")
        level = _level_argument(args, kwargs) if construct in _LEVELED else None
        if level is not None and level != top.level:
            raise EventOrderError(event, expected=f"level {top.level}")
        self._open.pop()

    def __getattr__(self, name: str) -> Any:
        attribute = getattr(self.sink, name)
        if name in _OPEN_EVENTS:
            return self._checked(name, attribute, self._push)
        if name in _CLOSE_EVENTS:
            return self._checked(name, attribute, self._pop)
        return attribute

    def _checked(self, event: str, method: Callable[..., Any], check: Callable[[str, tuple[Any, ...], dict[str, Any]], None]) -> Any:
        def forward(*args: Any, **kwargs: Any) -> Any:
            check(event, args, kwargs)
            return method(*args, **kwargs)

        return forward

    # ------------------------------------------------------------------
    # Events needing more than open/close bookkeeping
    # ------------------------------------------------------------------

    def table(self, attributes: Any = None) -> None:
        top = self._top()
        if top is not None and top.name == "table":
            raise EventOrderError("table", expected="table_rows before another table")
        self._open.append(_OpenConstruct("table"))
        self.sink.table(attributes)

    def figure(self, attributes: Any = UNSET) -> None:
        mode = FigureMode.LEGACY if attributes is UNSET else FigureMode.CURRENT
        self._open.append(_OpenConstruct("figure", mode=mode))
        if attributes is UNSET:
            self.sink.figure()
        else:
            self.sink.figure(attributes)

    def _check_legacy_mixing(self, event: str, attributes: Any) -> None:
        top = self._top()
        if top is not None and top.mode is FigureMode.LEGACY and attributes is not UNSET:
            raise EventOrderError(
                event, message=f"Sink event '{event}' with attributes cannot be mixed into a legacy figure"
            )

    def figure_graphics(self, src: str, attributes: Any = UNSET) -> None:
        self._check_legacy_mixing("figure_graphics", attributes)
        if attributes is UNSET:
            self.sink.figure_graphics(src)
        else:
            self.sink.figure_graphics(src, attributes)

    def figure_caption(self, attributes: Any = UNSET) -> None:
        self._require_parent("figure_caption", ("figure",))
        self._check_legacy_mixing("figure_caption", attributes)
        self._open.append(_OpenConstruct("figure_caption"))
        if attributes is UNSET:
            self.sink.figure_caption()
        else:
            self.sink.figure_caption(attributes)

    def close(self) -> None:
        """Close the wrapped sink, then fail if any construct was left open."""
        unclosed = self.open_constructs
        self.sink.close()
        if unclosed:
            logger.debug("Sink closed with open constructs: %s", unclosed)
            raise EventOrderError("close", expected=f"{', '.join(reversed(unclosed))} to be closed first")

    def __enter__(self) -> ValidatingSink:
        return self

    def __exit__(self, exc_type: Any, exc_value: Any, traceback: Any) -> None:
        if exc_type is None:
            self.close()
        else:
            self.sink.close()
