from dataclasses import dataclass

ALL_CATEGORY = "All"


@dataclass(frozen=True, slots=True)
class Item:
    id: int
    name: str
    price: int
    category: str
    description: str = ""
    image: str = ""
