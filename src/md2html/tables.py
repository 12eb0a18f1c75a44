#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/tables.py
"""Pipe table rendering.

The block transformer detects a table as a header line, a separator line and
any following pipe-containing lines, then hands the three parts to
:func:`parse_table`.
"""

from __future__ import annotations

from md2html.constants import TableAlignment


def parse_table_alignment(separator: str) -> list[TableAlignment | None]:
    """Derive per-column alignment from a table separator line.

    Parameters
    ----------
    separator : str
        Separator line such as ``|:--|:-:|--:|``

    Returns
    -------
    list
        One entry per column: ``"left"``, ``"right"``, ``"center"`` or None

    Examples
    --------
        >>> parse_table_alignment("|:--|:-:|--:|---|")
        ['left', 'center', 'right', None]

    """
    alignments: list[TableAlignment | None] = []
    for part in (p.strip() for p in separator.split("|")):
        if not part:
            continue
        left = part.startswith(":")
        right = part.endswith(":")
        if left and right:
            alignments.append("center")
        elif left:
            alignments.append("left")
        elif right:
            alignments.append("right")
        else:
            alignments.append(None)
    return alignments


def _split_header(header: str) -> list[str]:
    return [cell for cell in (c.strip() for c in header.split("|")) if cell]


def _split_rows(rows: str, width: int) -> list[list[str]]:
    body = []
    for line in rows.strip().split("\n"):
        if "|" not in line:
            continue
        cells = [c.strip() for c in line.split("|")[1:-1]]
        body.append([cells[i] if i < len(cells) else "" for i in range(width)])
    return body


def _align_attr(alignments: list[TableAlignment | None], index: int) -> str:
    if index < len(alignments) and alignments[index]:
        return f' align="{alignments[index]}"'
    return ""


def parse_table(header: str, separator: str, rows: str) -> str:
    """Render a detected pipe table as HTML.

    Parameters
    ----------
    header : str
        Header line; empty cells (including those produced by outer pipes) are dropped
    separator : str
        Separator line holding the column alignments
    rows : str
        Body lines, newline separated. Lines without ``|`` are ignored.

    Returns
    -------
    str
        ``<table>`` markup. ``<tbody>`` is only emitted when there is at least
        one body row; rows are padded or truncated to the header width.

    """
    columns = _split_header(header)
    alignments = parse_table_alignment(separator)
    body = _split_rows(rows, len(columns))

    out = ["<table>", "<thead><tr>"]
    out.extend(f"<th{_align_attr(alignments, i)}>{cell}</th>" for i, cell in enumerate(columns))
    out.append("</tr></thead>")

    if body:
        out.append("<tbody>")
        for row in body:
            out.append("<tr>")
            out.extend(f"<td{_align_attr(alignments, j)}>{cell}</td>" for j, cell in enumerate(row))
            out.append("</tr>")
        out.append("</tbody>")

    out.append("</table>")
    return "".join(out)
