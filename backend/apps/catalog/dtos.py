from dataclasses import dataclass
from typing import Optional


@dataclass
class CategoryDTO:
    id: Optional[int]
    name: str


@dataclass
class ProductDTO:
    id: Optional[int]
    name: str
    price: Optional[float]
    stock: int
    category_id: Optional[int]
