from inventory.models.product import Product
from inventory.models.user import Role, User

__all__ = [
    "Product",
    "Role",
    "User",
]
