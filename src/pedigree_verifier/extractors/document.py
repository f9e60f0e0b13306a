"""Labeled document tree over registry HTML.

The registry publishes everything as tables of label/value rows. This module
wraps BeautifulSoup with the few accessors the extractors need: rows, cells,
cell text, the first hyperlink of a cell, and nested tables.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Collection, Iterator

from bs4 import BeautifulSoup, Tag

from ..errors import DocumentParseError

ID_PATTERN = re.compile(r"id=(\d+)")


def extract_id(href: str | None) -> str | None:
    """Return the numeric ``id=`` query value embedded in a link, if any."""
    if not href:
        return None
    match = ID_PATTERN.search(href)
    return match.group(1) if match else None


@dataclass(frozen=True)
class Cell:
    """A table cell with its trimmed text and first hyperlink."""

    text: str
    href: str | None = None
    link_text: str | None = None

    @classmethod
    def from_tag(cls, tag: Tag) -> Cell:
        link = tag.find("a")
        href = link.get("href") if link else None
        return cls(
            text=tag.get_text().strip(),
            href=href if isinstance(href, str) else None,
            link_text=link.get_text().strip() if link else None,
        )

    @property
    def linked_id(self) -> str | None:
        return extract_id(self.href)


@dataclass(frozen=True)
class Row:
    """A table row holding its own cells (not those of nested tables)."""

    cells: tuple[Cell, ...]
    text: str
    table_header: str = ""

    @classmethod
    def from_tag(cls, tag: Tag, table_header: str = "") -> Row:
        cells = tuple(Cell.from_tag(td) for td in tag.find_all("td", recursive=False))
        return cls(cells=cells, text=tag.get_text(), table_header=table_header)

    def cell_text(self, index: int) -> str:
        """Text of the cell at ``index``, or an empty string when absent."""
        return self.cells[index].text if index < len(self.cells) else ""


class LabeledTable:
    """A single table element, restricted to its own rows."""

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    def _own_rows(self) -> list[Tag]:
        return [tr for tr in self._tag.find_all("tr") if tr.find_parent("table") is self._tag]

    @property
    def header_text(self) -> str:
        rows = self._own_rows()
        return rows[0].get_text() if rows else ""

    def rows(self) -> list[Row]:
        return [Row.from_tag(tr) for tr in self._own_rows()]


class LabeledDocument:
    """Best-effort tree of table rows parsed from registry markup."""

    def __init__(self, soup: BeautifulSoup) -> None:
        self._soup = soup

    @classmethod
    def from_html(cls, markup: str | bytes) -> LabeledDocument:
        """Parse markup into a document tree.

        Unexpected structure never raises; only input that is not markup does.

        Raises:
            DocumentParseError: If ``markup`` is not ``str`` or ``bytes``.
        """
        if not isinstance(markup, (str, bytes)):
            raise DocumentParseError(
                f"Expected HTML markup as str or bytes, got {type(markup).__name__}"
            )
        return cls(BeautifulSoup(markup, "html.parser"))

    def rows(self) -> Iterator[Row]:
        """Every table row in document order, nested tables included.

        Each row carries the header text of the table it belongs to.
        """
        headers: dict[int, str] = {}
        for tr in self._soup.find_all("tr"):
            table = tr.find_parent("table")
            if table is None:
                yield Row.from_tag(tr)
                continue
            if id(table) not in headers:
                headers[id(table)] = LabeledTable(table).header_text
            yield Row.from_tag(tr, table_header=headers[id(table)])

    def find_cell(self, text: str) -> Tag | None:
        """First cell whose trimmed text equals ``text`` exactly."""
        for td in self._soup.find_all("td"):
            if td.get_text().strip() == text:
                return td
        return None

    def has_cell_text(self, text: str) -> bool:
        return self.find_cell(text) is not None

    def nested_tables(
        self,
        after: Tag | None = None,
        stop_at: Collection[str] = (),
    ) -> list[LabeledTable]:
        """Tables nested inside another table.

        Args:
            after: When given, only tables that follow this element in
                document order are returned.
            stop_at: Cell texts that end the scan; tables after the first
                such cell are not returned.
        """
        start = after.find_all_next if after is not None else self._soup.find_all
        tables = []
        for tag in start(["td", "table"]):
            if tag.name == "td":
                if tag.get_text().strip() in stop_at:
                    break
                continue
            if tag.find_parent("table") is not None:
                tables.append(LabeledTable(tag))
        return tables
