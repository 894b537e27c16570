import logging
from datetime import UTC, datetime
from typing import Any

from sqlmodel import Session, select

from inventory.errors import ErrorCode, NotFoundError, ValidationError
from inventory.models.product import Product

logger = logging.getLogger(__name__)

PRODUCT_FIELDS = ("name", "price", "quantity", "description")


def _missing(value: Any) -> bool:
    # 0 is a real price/quantity; only absent values and blank strings are missing
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


class ProductService:
    def __init__(self, session: Session):
        self.session = session

    def _save(self, product: Product) -> Product:
        self.session.add(product)
        self.session.commit()
        self.session.refresh(product)
        return product

    def list_products(self) -> list[Product]:
        return list(self.session.exec(select(Product).order_by(Product.id)).all())

    def get_product(self, product_id: int) -> Product:
        product = self.session.get(Product, product_id)
        if not product:
            raise NotFoundError("Product not found.", ErrorCode.PRODUCT_NOT_FOUND)
        return product

    def create_product(
        self,
        name: str | None,
        price: float | None,
        quantity: int | None,
        description: str | None,
    ) -> Product:
        if any(_missing(v) for v in (name, price, quantity, description)):
            raise ValidationError("All fields are required.")

        product = self._save(
            Product(
                name=name.strip(),
                price=price,
                quantity=quantity,
                description=description,
            )
        )
        logger.info("Created product id=%s (%s)", product.id, product.name)
        return product

    def update_product(self, product_id: int, fields: dict[str, Any]) -> Product:
        """Overwrite only the supplied fields; anything not given stays as stored."""
        changes = {
            key: value
            for key, value in fields.items()
            if key in PRODUCT_FIELDS and value is not None
        }
        if not changes:
            raise ValidationError("At least one field is required to update.")
        if "name" in changes:
            if _missing(changes["name"]):
                raise ValidationError("Product name cannot be empty.")
            changes["name"] = changes["name"].strip()

        product = self.get_product(product_id)
        for key, value in changes.items():
            setattr(product, key, value)
        product.updated_at = datetime.now(UTC)
        product = self._save(product)
        logger.info("Updated product id=%s fields=%s", product.id, sorted(changes))
        return product

    def delete_product(self, product_id: int) -> None:
        product = self.get_product(product_id)
        self.session.delete(product)
        self.session.commit()
        logger.info("Deleted product id=%s", product_id)
