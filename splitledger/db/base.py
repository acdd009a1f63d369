# Import every model so Base.metadata and relationship() strings see them
from splitledger.db.session import Base  # noqa: F401
from splitledger.models.user import User  # noqa: F401
from splitledger.models.counter import Counter  # noqa: F401
from splitledger.models.expense import Expense  # noqa: F401
from splitledger.models.expense_participant import ExpenseParticipant  # noqa: F401
