"""ORM models exposed for easy imports."""

from .customer import Customer
from .invoice import Invoice
from .revenue import Revenue

__all__ = [
    "Customer",
    "Invoice",
    "Revenue",
]
