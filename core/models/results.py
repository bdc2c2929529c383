# =============================================================================
# core/models/results.py - Pipeline Result Types
# =============================================================================
# Pipelines in core/ never issue redirects themselves. They return one of
# these values and the HTTP layer decides where the browser goes:
#
#   Found(product)      -> 200 with the product
#   NotFound(id)        -> redirect to the product listing
#   Unauthenticated()   -> redirect to the home route
#   Created(product)    -> redirect to the admin product listing
#   ActionMessage(msg)  -> {"message": msg} back to the form
# =============================================================================

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .product import Product

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    """A lookup that produced a value."""
    value: T


@dataclass(frozen=True)
class NotFound:
    """A lookup that matched nothing."""
    key: str


@dataclass(frozen=True)
class Unauthenticated:
    """The caller has no resolved identity."""


@dataclass(frozen=True)
class Created:
    """The create pipeline persisted a product."""
    product: Product


@dataclass(frozen=True)
class ActionMessage:
    """A message returned to the submitting form."""
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"message": self.message}


ProductLookup = Union[Found[Product], NotFound]
CreateProductResult = Union[Created, Unauthenticated, ActionMessage]
