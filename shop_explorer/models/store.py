"""Store credential model."""

from sqlalchemy import BigInteger, Text
from sqlalchemy.orm import Mapped, mapped_column

from shop_explorer.models.base import Base, CreatedAtMixin


class Store(Base, CreatedAtMixin):
    """A connected Shopify store and its Admin API credentials."""

    __tablename__ = "stores"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=True)

    store_name: Mapped[str] = mapped_column(Text, nullable=False)
    shopify_domain: Mapped[str] = mapped_column(Text, nullable=False, unique=True)

    # Secret; never serialized into API responses
    api_access_token: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Store {self.store_name} ({self.shopify_domain})>"
