from sqlalchemy import Column, Integer, Numeric, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from splitledger.db.session import Base

class ExpenseParticipant(Base):
    __tablename__ = "expense_participants"
    __table_args__ = (
        UniqueConstraint("expense_id", "user_id", name="uq_expense_participant_user"),
    )

    id = Column(Integer, primary_key=True)
    expense_id = Column(Integer, ForeignKey("expenses.id", ondelete="CASCADE"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    amount_owed = Column(Numeric(12, 2), nullable=False)
    # only set for percentage splits
    percentage_owed = Column(Numeric(7, 4), nullable=True)

    expense = relationship("Expense", back_populates="participants")
    user = relationship("User")
