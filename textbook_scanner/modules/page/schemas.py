"""Pydantic schemas for page entities."""

from typing import Annotated, Optional

from pydantic import AfterValidator, AnyUrl, Field, TypeAdapter, ValidationError

from ..common.schemas import CamelModel, JSONValue, TimestampSchema

_any_url = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    # Validated as a URL but stored exactly as sent; AnyUrl would add a trailing slash to bare hosts.
    try:
        _any_url.validate_python(value)
    except ValidationError:
        raise ValueError("must be a valid URL") from None
    return value


ImageUrl = Annotated[str, Field(max_length=2048), AfterValidator(_check_url)]


class PageSave(CamelModel):
    """Input for savePage.

    With ``id`` the page is replaced wholesale; without it a new page is added.
    """

    id: Optional[int] = Field(default=None, description="Existing page to replace")
    document_id: int
    page_number: Optional[Annotated[int, Field(gt=0)]] = None
    image_url: Optional[ImageUrl] = None
    ocr_text: Optional[str] = None
    ocr_blocks: Optional[JSONValue] = None


class PageDelete(CamelModel):
    """Input for deletePage."""

    id: int
    document_id: int


class PageRead(TimestampSchema):
    id: int
    document_id: int
    page_number: int
    image_url: Optional[str] = None
    ocr_text: Optional[str] = None
    ocr_blocks: Optional[JSONValue] = None


class PageResponse(CamelModel):
    page: PageRead
