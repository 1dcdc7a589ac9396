# app/domain/errors.py


class ProductNotFound(LookupError):
    def __init__(self, product_id: int):
        super().__init__("Product not found")
        self.product_id = product_id


class InvalidParameter(ValueError):
    """Raw request value that does not parse as an integer."""

    def __init__(self, name: str, raw: str):
        super().__init__(f"Invalid {name}: {raw!r}")
        self.name = name
        self.raw = raw
