from dataclasses import dataclass, field
from typing import List

TEXT_FIELDS = ("name", "description", "material", "size", "category", "slug")

@dataclass
class AdditionalInfoItem:
    title: str
    description: str

@dataclass
class Product:
    id: str
    name: str
    description: str = ""
    material: str = ""
    size: str = ""
    category: str = ""
    tags: List[str] = field(default_factory=list)
    price: float = 0.0
    additional_info: List[AdditionalInfoItem] = field(default_factory=list)
    slug: str = ""
    quantity: int = 0

    def __post_init__(self) -> None:
        # absent values become empty so scorers never see None
        for name in TEXT_FIELDS:
            if getattr(self, name) is None:
                setattr(self, name, "")
        if self.tags is None:
            self.tags = []
        elif isinstance(self.tags, str):
            self.tags = [self.tags]
        else:
            self.tags = [str(t) for t in self.tags if t]
        self.price = float(self.price) if self.price is not None else 0.0
        if self.additional_info is None:
            self.additional_info = []
        if self.quantity is None:
            self.quantity = 0

@dataclass
class ScoredCandidate:
    product: Product
    score: float

@dataclass
class CategoryWithTags:
    category: str
    tags: List[str]
