from sqlalchemy import Column, Integer, Numeric, DateTime, ForeignKey, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from splitledger.core.enums import SplitMethod
from splitledger.db.session import Base

class Expense(Base):
    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, index=True)
    total_amount = Column(Numeric(12, 2), nullable=False)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    split_method = Column(
        Enum(
            SplitMethod,
            name="split_method",
            values_callable=lambda e: [m.value for m in e],
        ),
        nullable=False,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    creator = relationship("User")

    participants = relationship(
        "ExpenseParticipant",
        back_populates="expense",
        cascade="all, delete-orphan",
        order_by="ExpenseParticipant.position",
    )
