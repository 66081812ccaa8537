from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CartLine:
    id: int
    quantity: int


@dataclass(frozen=True, slots=True)
class Cart:
    lines: tuple[CartLine, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.lines)

    def get(self, id: int) -> CartLine | None:
        for line in self.lines:
            if line.id == id:
                return line
        return None


@dataclass(frozen=True, slots=True)
class CartSummary:
    total_items: int
    total_price: int


EMPTY_CART = Cart()
