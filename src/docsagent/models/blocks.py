"""Content block models.

A block is one typed unit of document content. The union below is closed: every variant is
selected by its ``type`` tag and rejects fields that belong to another variant. Generated
sections keep their blocks as plain dicts so a slightly off-shape block never costs a whole
section; :func:`parse_block` gives the typed view when a caller wants one.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

Alignment = Literal["LEFT", "CENTER", "RIGHT"]
TextAlignment = Literal["LEFT", "CENTER", "RIGHT", "JUSTIFIED"]


class _Strict(BaseModel):
    model_config = ConfigDict(extra="forbid")


class InlineStyle(_Strict):
    """Character-range styling inside a content string."""

    start_index: int
    end_index: int
    bold: bool | None = None
    italic: bool | None = None
    underline: bool | None = None
    strikethrough: bool | None = None
    font_color: str | None = None
    highlight_color: str | None = None
    font_size_pt: float | None = None
    link_url: str | None = None


class _BlockBase(_Strict):
    block_id: str


class MainHeadingBlock(_BlockBase):
    type: Literal["main_heading"]
    content: str
    font_family: str | None = None
    font_size_pt: float | None = None
    font_color: str | None = None
    bold: bool = True
    italic: bool = False
    underline: bool = False
    alignment: TextAlignment = "LEFT"
    spacing_before_pt: float | None = None
    spacing_after_pt: float | None = None


class SubHeadingBlock(_BlockBase):
    type: Literal["sub_heading"]
    content: str
    level: int | str = 1
    font_family: str | None = None
    font_size_pt: float | None = None
    font_color: str | None = None
    bold: bool = True
    italic: bool = False
    underline: bool = False
    alignment: TextAlignment = "LEFT"
    spacing_before_pt: float | None = None
    spacing_after_pt: float | None = None


class ParagraphBlock(_BlockBase):
    type: Literal["paragraph"]
    content: str
    font_family: str | None = None
    font_size_pt: float | None = None
    font_color: str | None = None
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    alignment: TextAlignment = "LEFT"
    line_spacing: float | None = None
    first_line_indent: bool = False
    highlight_color: str | None = None
    spacing_before_pt: float | None = None
    spacing_after_pt: float | None = None
    inline_styles: list[InlineStyle] = Field(default_factory=list)


class ListItem(_Strict):
    content: str
    indent_level: int = Field(default=0, ge=0, le=2)
    bold: bool = False
    italic: bool = False
    font_color: str | None = None
    inline_styles: list[InlineStyle] = Field(default_factory=list)


class BulletListBlock(_BlockBase):
    type: Literal["bullet_list"]
    items: list[ListItem] = Field(default_factory=list)
    bullet_style: Literal["DISC", "CIRCLE", "SQUARE", "ARROW", "CHECKMARK"] = "DISC"
    font_family: str | None = None
    font_size_pt: float | None = None
    spacing_before_pt: float | None = None
    spacing_after_pt: float | None = None


class NumberedListBlock(_BlockBase):
    type: Literal["numbered_list"]
    items: list[ListItem] = Field(default_factory=list)
    numbering_style: Literal["DECIMAL", "ALPHA_LOWER", "ALPHA_UPPER", "ROMAN_LOWER", "ROMAN_UPPER"] = "DECIMAL"
    font_family: str | None = None
    font_size_pt: float | None = None
    spacing_before_pt: float | None = None
    spacing_after_pt: float | None = None


class TableCell(_Strict):
    content: str
    bold: bool = False
    italic: bool = False
    font_color: str | None = None
    bg_color: str | None = None
    alignment: Alignment | None = None
    vertical_alignment: Literal["TOP", "MIDDLE", "BOTTOM"] | None = None
    colspan: int = Field(default=1, ge=1)
    rowspan: int = Field(default=1, ge=1)
    inline_styles: list[InlineStyle] = Field(default_factory=list)


class TableHeaderStyle(_Strict):
    bg_color: str | None = None
    font_color: str | None = None
    bold: bool = True
    alignment: Alignment | None = None


class TableBlock(_BlockBase):
    type: Literal["table"]
    cells: list[list[TableCell]]
    caption: str | None = None
    has_header_row: bool = True
    has_header_column: bool = False
    border_color: str | None = None
    border_width_pt: float | None = None
    alignment: Alignment | None = None
    column_widths_percent: list[float] = Field(default_factory=list)
    stripe_rows: bool = False
    stripe_color: str | None = None
    header_style: TableHeaderStyle | None = None


class CalloutBlock(_BlockBase):
    type: Literal["callout"]
    content: str
    style: Literal["info", "warning", "tip", "important", "success", "quote", "danger"] = "info"
    title: str | None = None
    bg_color: str | None = None
    border_color: str | None = None
    border_side: Literal["left", "all"] = "left"
    font_color: str | None = None
    bold: bool = False
    italic: bool = False
    icon: str | None = None


class CodeBlock(_BlockBase):
    type: Literal["code_block"]
    content: str
    language: str | None = None
    show_line_numbers: bool = False
    font_family: str | None = None
    font_size_pt: float | None = None
    bg_color: str | None = None
    font_color: str | None = None
    caption: str | None = None


class BlockquoteBlock(_BlockBase):
    type: Literal["blockquote"]
    content: str
    attribution: str | None = None
    font_family: str | None = None
    font_size_pt: float | None = None
    font_color: str | None = None
    italic: bool = True
    border_color: str | None = None
    indent_left_inches: float | None = None
    spacing_before_pt: float | None = None
    spacing_after_pt: float | None = None


class ImageBlock(_BlockBase):
    type: Literal["image"]
    alt_text: str
    source: Literal["url", "upload"] = "url"
    url: str | None = None
    caption: str | None = None
    width_percent: float = Field(default=100, gt=0, le=100)
    alignment: Alignment = "CENTER"
    border: bool = False
    border_color: str | None = None


class HorizontalRuleBlock(_BlockBase):
    type: Literal["horizontal_rule"]
    style: Literal["solid", "dashed", "dotted", "double"] = "solid"
    color: str | None = None
    thickness_pt: float | None = None
    width_percent: float | None = None
    spacing_before_pt: float | None = None
    spacing_after_pt: float | None = None


class PageBreakBlock(_BlockBase):
    type: Literal["page_break"]


class SpacerBlock(_BlockBase):
    type: Literal["spacer"]
    height_pt: float = 24


class TableOfContentsBlock(_BlockBase):
    type: Literal["table_of_contents"]
    title: str = "Table of Contents"
    include_levels: list[int] = Field(default_factory=lambda: [1, 2, 3])
    show_page_numbers: bool = True
    font_family: str | None = None


class EquationBlock(_BlockBase):
    type: Literal["equation"]
    content: str
    display_mode: bool = True
    alignment: Alignment = "CENTER"
    caption: str | None = None


class KeyValueItem(_Strict):
    key: str
    value: str
    key_bold: bool = True
    key_color: str | None = None
    value_color: str | None = None


class KeyValueBlock(_BlockBase):
    type: Literal["key_value"]
    items: list[KeyValueItem] = Field(default_factory=list)
    layout: Literal["vertical", "horizontal", "two_column"] = "vertical"
    font_family: str | None = None
    font_size_pt: float | None = None


class FootnoteBlock(_BlockBase):
    type: Literal["footnote"]
    footnote_id: str
    content: str
    font_size_pt: float | None = None
    italic: bool = False


class CitationEntry(_Strict):
    id: str
    content: str


class CitationBlock(_BlockBase):
    type: Literal["citation"]
    entries: list[CitationEntry] = Field(default_factory=list)
    citation_style: Literal["APA", "MLA", "Chicago", "Harvard", "IEEE", "inline"] = "APA"
    heading: str | None = None
    font_size_pt: float | None = None
    hanging_indent: bool = True


class Column(_Strict):
    column_index: int = Field(ge=0)
    blocks: list["Block"] = Field(default_factory=list)


class ColumnsBlock(_BlockBase):
    type: Literal["columns"]
    columns_content: list[Column] = Field(default_factory=list)
    num_columns: int = Field(default=2, ge=2, le=3)
    gap_inches: float | None = None
    column_widths_percent: list[float] = Field(default_factory=list)


Block = Annotated[
    Union[
        MainHeadingBlock,
        SubHeadingBlock,
        ParagraphBlock,
        BulletListBlock,
        NumberedListBlock,
        TableBlock,
        CalloutBlock,
        CodeBlock,
        BlockquoteBlock,
        ImageBlock,
        HorizontalRuleBlock,
        PageBreakBlock,
        SpacerBlock,
        TableOfContentsBlock,
        EquationBlock,
        KeyValueBlock,
        FootnoteBlock,
        CitationBlock,
        ColumnsBlock,
    ],
    Field(discriminator="type"),
]

Column.model_rebuild()
ColumnsBlock.model_rebuild()

BLOCK_TYPES: frozenset[str] = frozenset(
    {
        "main_heading",
        "sub_heading",
        "paragraph",
        "bullet_list",
        "numbered_list",
        "table",
        "callout",
        "code_block",
        "blockquote",
        "image",
        "horizontal_rule",
        "page_break",
        "spacer",
        "table_of_contents",
        "equation",
        "key_value",
        "footnote",
        "citation",
        "columns",
    }
)

_BLOCK_ADAPTER: TypeAdapter[Block] = TypeAdapter(Block)


def parse_block(raw: dict[str, Any]) -> Block:
    """Validate a raw block payload into its typed variant.

    Raises:
        pydantic.ValidationError: Unknown type, missing fields or foreign fields.
    """

    return _BLOCK_ADAPTER.validate_python(raw)
