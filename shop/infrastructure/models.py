from sqlalchemy import CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from .database import Base


class ProductRecord(Base):
    __tablename__ = "products"
    __table_args__ = (CheckConstraint("count >= 0", name="ck_products_count_non_negative"),)

    name: Mapped[str] = mapped_column(String(255), primary_key=True)
    count: Mapped[int] = mapped_column(default=0)
