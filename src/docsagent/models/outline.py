"""Outline models.

The outline is the contract between the planning phase and the section phase: its section
order is the document's table of contents and does not change after planning.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

DocFormat = Literal[
    "report",
    "article",
    "thesis",
    "research_paper",
    "proposal",
    "meeting_notes",
    "legal",
    "technical_docs",
    "case_study",
    "white_paper",
    "policy",
    "general",
]

SectionType = Literal["intro", "body", "conclusion", "appendix", "abstract", "references"]


class PageSetup(BaseModel):
    page_size: Literal["A4", "LETTER"] = "LETTER"
    orientation: Literal["portrait", "landscape"] = "portrait"
    margin_top_inches: float = 1
    margin_bottom_inches: float = 1
    margin_left_inches: float = 1
    margin_right_inches: float = 1
    columns: int = 1


class DefaultStyle(BaseModel):
    font_family: str = "Arial"
    font_size_pt: float = 11
    line_spacing: float = 1.15
    text_color: str = "#000000"
    paragraph_spacing_after_pt: float = 10


class DocumentOptions(BaseModel):
    include_table_of_contents: bool = False
    include_page_numbers: bool = False
    page_number_alignment: Literal["LEFT", "CENTER", "RIGHT"] = "CENTER"
    include_header: bool = False
    header_text: str | None = None
    include_footer: bool = False
    footer_text: str | None = None


class SectionDescriptor(BaseModel):
    """One planned section. Immutable once planned."""

    model_config = ConfigDict(frozen=True)

    section_id: str = Field(min_length=1)
    title: str
    type: SectionType
    depth: int = Field(ge=1, le=3)
    # Guidance for the section writer; never rendered.
    description: str = ""


class DocumentMeta(BaseModel):
    """Document-level fields shared by every section of one generation."""

    title: str
    format: DocFormat = "general"
    page_setup: PageSetup = Field(default_factory=PageSetup)
    default_style: DefaultStyle = Field(default_factory=DefaultStyle)
    options: DocumentOptions = Field(default_factory=DocumentOptions)


class Outline(DocumentMeta):
    """A planned long-form document."""

    sections: list[SectionDescriptor]

    def document_meta(self) -> DocumentMeta:
        return DocumentMeta.model_validate(self.model_dump(exclude={"sections"}))
