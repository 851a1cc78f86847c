from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional, List

Category = str


class Rating(BaseModel):
    model_config = ConfigDict(frozen=True)

    rate: float
    count: int


class Product(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    price: float
    description: str = ""
    category: Category
    image: str = ""
    rating: Rating


class PageResult(BaseModel):
    items: List[Product]
    total_pages: int = Field(ge=1)
    current_page: int
    total_items: int = Field(ge=0)


class PageMeta(BaseModel):
    title: str
    description: str
    image: Optional[str] = None
    keywords: str = ""


class PageData(BaseModel):
    """What a page loader hands to the rendering layer."""

    data: Any = None
    meta: Optional[PageMeta] = None
