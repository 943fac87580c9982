"""
WhatsApp order message schema.

Sent when a user places an order from a catalog. Quantities and prices keep
the representation the platform used (number or numeric string).
"""

from typing import Literal

from pydantic import Field

from wacloud.schemas.core.base_model import InboundModel
from wacloud.schemas.whatsapp.base_models import BaseInboundMessage
from wacloud.schemas.whatsapp.validators import NumberLike, number_value


class ProductItem(InboundModel):
    """One line of an order."""

    product_retailer_id: str = Field(..., description="Product retailer ID")
    quantity: NumberLike = Field(..., description="Ordered quantity")
    item_price: NumberLike = Field(..., description="Unit price")
    currency: str = Field(..., description="ISO 4217 currency code")

    @property
    def line_total(self) -> float:
        return number_value(self.quantity) * number_value(self.item_price)


class OrderContent(InboundModel):
    """Order message content."""

    catalog_id: str = Field(..., description="Catalog the products belong to")
    product_items: list[ProductItem] = Field(..., description="Ordered products")
    text: str | None = Field(None, description="Text sent along with the order")


class WhatsAppOrderMessage(BaseInboundMessage):
    """WhatsApp order message model."""

    type: Literal["order"] = Field(..., description="Message type, always 'order'")
    order: OrderContent = Field(..., description="Order content")

    @property
    def total(self) -> float:
        """Sum of quantity times price over all items."""
        return sum(item.line_total for item in self.order.product_items)
