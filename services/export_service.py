"""
Checklist export.

Lays a checklist out as a paginated document: a header with the destination,
its type and the progress, then one block per category with a checkbox-style
marker per item. Positions are vertical offsets on an A4-sized page, so page
breaks happen where a printed version would break.
"""

import re
from typing import List

from pydantic import BaseModel

from schemas.checklist_schema import Destination, get_destination_type_label
from services.checklist_builder import group_by_category

PAGE_TOP = 20
CONTENT_TOP = 50
HEADING_LIMIT = 270
PAGE_LIMIT = 280
FOOTER_Y = 287

HEADING_STEP = 10
ITEM_STEP = 7
CATEGORY_GAP = 5

DONE_MARKER = "[✓]"
PENDING_MARKER = "[ ]"
FOOTER_TEXT = "Gerado por Trip Prep Navigator"


class DocumentLine(BaseModel):
    y: int
    font_size: int
    indent: int = 0
    text: str


class DocumentPage(BaseModel):
    lines: List[DocumentLine] = []


class ChecklistDocument(BaseModel):
    title: str
    pages: List[DocumentPage]

    def to_text(self) -> str:
        """Plain-text rendering, one form feed between pages."""
        rendered_pages = []
        for page in self.pages:
            lines = sorted(page.lines, key=lambda line: line.y)
            rendered_pages.append("\n".join(" " * line.indent + line.text for line in lines))
        return "\n\f\n".join(rendered_pages) + "\n"


def export_filename(destination_name: str, extension: str = "txt") -> str:
    slug = re.sub(r"\s+", "-", destination_name.lower())
    return f"checklist-{slug}.{extension}"


def render_checklist_document(destination: Destination, progress: int) -> ChecklistDocument:
    title = f"Checklist de viagem: {destination.name}"
    pages = [DocumentPage()]

    def write(y: int, font_size: int, text: str, indent: int = 0):
        pages[-1].lines.append(DocumentLine(y=y, font_size=font_size, indent=indent, text=text))

    write(PAGE_TOP, 20, title)
    write(PAGE_TOP + 10, 12, f"Tipo: {get_destination_type_label(destination.type)}")
    write(PAGE_TOP + 20, 12, f"Progresso: {progress}% concluído")

    y = CONTENT_TOP
    for category, items in group_by_category(destination.items).items():
        if y > HEADING_LIMIT:
            pages.append(DocumentPage())
            y = PAGE_TOP

        write(y, 14, category)
        y += HEADING_STEP

        for item in items:
            marker = DONE_MARKER if item.done else PENDING_MARKER
            write(y, 11, f"{marker} {item.name}", indent=2)
            y += ITEM_STEP
            if y > PAGE_LIMIT:
                pages.append(DocumentPage())
                y = PAGE_TOP

        y += CATEGORY_GAP

    write(FOOTER_Y, 9, FOOTER_TEXT)
    return ChecklistDocument(title=title, pages=pages)
