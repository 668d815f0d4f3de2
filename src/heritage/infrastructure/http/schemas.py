"""Pydantic request/response schemas for the storefront REST API.

These are external contracts (anti-corruption layer): every payload that
crosses the wire is validated here and turned into domain objects, so a
malformed record fails immediately instead of leaking missing fields into
the cart.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from heritage.domain.model.order import DEFAULT_STATUS, Order, OrderItemRef, OrderRequest
from heritage.domain.model.product import Category, Product
from heritage.domain.model.session import AdminUser, Session
from heritage.domain.model.value_objects import Money


class CamelModel(BaseModel):
    """Base for payloads the backend writes in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------
class ProductSchema(CamelModel):
    id: int
    name: str
    description: str = ""
    price: int = Field(ge=0, description="Price in cents")
    category: str = ""
    era: str = ""
    condition: str = ""
    material: str = ""
    images: list[str] = Field(default_factory=list)
    is_featured: bool = False

    def to_domain(self) -> Product:
        return Product(
            id=self.id,
            name=self.name,
            price=Money(self.price),
            category=self.category,
            era=self.era,
            condition=self.condition,
            material=self.material,
            description=self.description,
            images=tuple(self.images),
            is_featured=self.is_featured,
        )


class CategorySchema(BaseModel):
    id: int
    name: str
    image: str | None = None

    def to_domain(self) -> Category:
        return Category(id=self.id, name=self.name, image=self.image or "")


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class OrderItemSchema(CamelModel):
    product_id: int
    quantity: int = Field(ge=1)


class InsertOrderSchema(CamelModel):
    customer_name: str = Field(min_length=1)
    customer_email: EmailStr
    address: str = Field(min_length=1)
    items: list[OrderItemSchema] = Field(min_length=1)
    total: int = Field(ge=0)

    @staticmethod
    def from_domain(request: OrderRequest) -> InsertOrderSchema:
        return InsertOrderSchema(
            customer_name=request.customer_name,
            customer_email=request.customer_email,
            address=request.address,
            items=[
                OrderItemSchema(product_id=item.product_id, quantity=item.quantity)
                for item in request.items
            ],
            total=request.total.cents,
        )


class OrderSchema(CamelModel):
    id: int
    customer_name: str
    customer_email: str
    address: str
    items: list[OrderItemSchema]
    total: int = Field(ge=0)
    status: str = DEFAULT_STATUS
    created_at: datetime | None = None

    def to_domain(self) -> Order:
        created_at = self.created_at or datetime.now(timezone.utc)
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Order(
            id=self.id,
            customer_name=self.customer_name,
            customer_email=self.customer_email,
            address=self.address,
            items=tuple(
                OrderItemRef(product_id=item.product_id, quantity=item.quantity)
                for item in self.items
            ),
            total=Money(self.total),
            status=self.status,
            created_at=created_at.astimezone(timezone.utc),
        )


class ErrorSchema(BaseModel):
    """4xx body: the first validation error and the field path it concerns."""

    message: str
    field: str | None = None


# ---------------------------------------------------------------------------
# Admin session
# ---------------------------------------------------------------------------
class AdminUserSchema(BaseModel):
    id: int
    username: str
    email: str = ""
    is_admin: bool = False
    is_staff: bool = False

    def to_domain(self) -> AdminUser:
        return AdminUser(
            id=self.id,
            username=self.username,
            email=self.email,
            is_admin=self.is_admin,
            is_staff=self.is_staff,
        )


class TokensSchema(BaseModel):
    access: str
    refresh: str


class LoginResponseSchema(BaseModel):
    success: bool
    user: AdminUserSchema
    tokens: TokensSchema

    def to_domain(self) -> Session:
        return Session(
            user=self.user.to_domain(),
            access=self.tokens.access,
            refresh=self.tokens.refresh,
        )


class RefreshResponseSchema(BaseModel):
    access: str


class SessionRecord(BaseModel):
    """On-disk form of a stored Session."""

    user: AdminUserSchema
    tokens: TokensSchema

    @staticmethod
    def from_domain(session: Session) -> SessionRecord:
        user = session.user
        return SessionRecord(
            user=AdminUserSchema(
                id=user.id,
                username=user.username,
                email=user.email,
                is_admin=user.is_admin,
                is_staff=user.is_staff,
            ),
            tokens=TokensSchema(access=session.access, refresh=session.refresh),
        )

    def to_domain(self) -> Session:
        return Session(
            user=self.user.to_domain(),
            access=self.tokens.access,
            refresh=self.tokens.refresh,
        )
