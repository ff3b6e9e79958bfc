"""CSV and PDF reports of the component inventory."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

CSV_HEADER = "ID,Nombre,Tipo,Cantidad,Ubicacion,Fecha de compra"
PDF_HEADERS = ("ID", "Nombre", "Tipo", "Cantidad", "Ubicación", "Fecha de compra")

PAGE_WIDTH = 595
PAGE_HEIGHT = 842
MARGIN = 40
FONT_SIZE = 9
ROW_HEIGHT = 16
TEXT_INSET = 3
COLUMN_PADDING = 12
_BASELINE_OFFSET = 5

_HELVETICA_WIDTHS = dict(
    zip(
        range(32, 127),
        (
            278, 278, 355, 556, 556, 889, 667, 191, 333, 333, 389, 584, 278, 333, 278, 278,
            556, 556, 556, 556, 556, 556, 556, 556, 556, 556, 278, 278, 584, 584, 584, 556,
            1015, 667, 667, 722, 722, 667, 611, 778, 722, 278, 500, 667, 556, 833, 722, 778,
            667, 778, 722, 667, 611, 722, 667, 944, 667, 667, 611, 278, 278, 278, 469, 556,
            333, 556, 556, 500, 556, 556, 278, 556, 556, 222, 222, 500, 222, 833, 556, 556,
            556, 556, 333, 500, 278, 556, 500, 722, 500, 500, 500, 334, 260, 334, 584,
        ),
    )
)
_DEFAULT_GLYPH_WIDTH = 556


def _quote(field: str) -> str:
    return '"' + field.replace('"', '""') + '"'


def csv_text(rows: Iterable[Sequence[str]]) -> str:
    """Return the CSV report: a byte-order mark, the header and every field quoted."""
    lines = [CSV_HEADER]
    lines.extend(",".join(_quote(field) for field in row) for row in rows)
    return "\ufeff" + "".join(line + "\n" for line in lines)


def write_csv(path: str | os.PathLike[str], rows: Iterable[Sequence[str]]) -> None:
    """Write the CSV report to a file in UTF-8."""
    with open(path, "w", encoding="utf-8", newline="") as stream:
        stream.write(csv_text(rows))


def column_widths(
    rows: Iterable[Sequence[str]], measure: Callable[[str], float]
) -> list[float]:
    """Width of each report column: the widest header or cell plus padding."""
    widths = [measure(header) for header in PDF_HEADERS]
    for row in rows:
        for column, cell in enumerate(row[: len(widths)]):
            widths[column] = max(widths[column], measure(cell))
    return [width + COLUMN_PADDING for width in widths]


def _text_width(text: str) -> float:
    units = sum(_HELVETICA_WIDTHS.get(ord(char), _DEFAULT_GLYPH_WIDTH) for char in text)
    return units * FONT_SIZE / 1000


def _number(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _pdf_string(text: str) -> str:
    parts = []
    for byte in text.encode("cp1252", errors="replace"):
        if byte in b"\\()":
            parts.append("\\" + chr(byte))
        elif 32 <= byte < 127:
            parts.append(chr(byte))
        else:
            parts.append(f"\\{byte:03o}")
    return "(" + "".join(parts) + ")"


def _line(x1: float, y1: float, x2: float, y2: float) -> str:
    return (
        f"{_number(x1)} {_number(PAGE_HEIGHT - y1)} m "
        f"{_number(x2)} {_number(PAGE_HEIGHT - y2)} l S"
    )


def _text(font: str, x: float, y: float, text: str) -> str:
    return (
        f"BT /{font} {FONT_SIZE} Tf {_number(x)} {_number(PAGE_HEIGHT - y)} Td "
        f"{_pdf_string(text)} Tj ET"
    )


def _page_content(
    chunk: Sequence[Sequence[str]], xs: Sequence[float], right: float
) -> bytes:
    ops = ["0.5 w"]
    top = MARGIN
    bottom = MARGIN + (len(chunk) + 1) * ROW_HEIGHT
    for x in [*xs, right]:
        ops.append(_line(x, top, x, bottom))
    header_baseline = MARGIN + ROW_HEIGHT - _BASELINE_OFFSET
    for x, header in zip(xs, PDF_HEADERS):
        ops.append(_text("F2", x + TEXT_INSET, header_baseline, header))
    ops.append(_line(xs[0], MARGIN + ROW_HEIGHT, right, MARGIN + ROW_HEIGHT))
    for position, row in enumerate(chunk, start=2):
        baseline = MARGIN + position * ROW_HEIGHT - _BASELINE_OFFSET
        for x, cell in zip(xs, row):
            ops.append(_text("F1", x + TEXT_INSET, baseline, cell))
    return "\n".join(ops).encode("ascii")


def _paginate(rows: Sequence[Sequence[str]]) -> list[Sequence[Sequence[str]]]:
    per_page = (PAGE_HEIGHT - 2 * MARGIN) // ROW_HEIGHT - 1
    pages = [rows[start : start + per_page] for start in range(0, len(rows), per_page)]
    return pages or [[]]


def _assemble(contents: list[bytes]) -> bytes:
    first_page = 5
    kids = " ".join(f"{first_page + 2 * i} 0 R" for i in range(len(contents)))
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(contents)} >>".encode("ascii"),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica /Encoding /WinAnsiEncoding >>",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica-Bold "
        b"/Encoding /WinAnsiEncoding >>",
    ]
    for i, content in enumerate(contents):
        content_ref = first_page + 2 * i + 1
        objects.append(
            (
                f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 {PAGE_WIDTH} {PAGE_HEIGHT}] "
                "/Resources << /Font << /F1 3 0 R /F2 4 0 R >> >> "
                f"/Contents {content_ref} 0 R >>"
            ).encode("ascii")
        )
        objects.append(
            f"<< /Length {len(content)} >>\nstream\n".encode("ascii")
            + content
            + b"\nendstream"
        )

    out = bytearray(b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode("ascii") + body + b"\nendobj\n"
    xref_position = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode("ascii")
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode("ascii")
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_position}\n%%EOF\n"
    ).encode("ascii")
    return bytes(out)


def write_pdf(path: str | os.PathLike[str], rows: Iterable[Sequence[str]]) -> None:
    """Write the report as an A4 PDF table, repeating the header on every page."""
    rows = [list(row) for row in rows]
    widths = column_widths(rows, _text_width)
    xs = [float(MARGIN)]
    for width in widths[:-1]:
        xs.append(xs[-1] + width)
    right = xs[-1] + widths[-1]
    contents = [_page_content(chunk, xs, right) for chunk in _paginate(rows)]
    Path(path).write_bytes(_assemble(contents))