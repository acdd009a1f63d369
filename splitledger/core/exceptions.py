"""
Error kinds raised by the ledger core and services.

Every error carries the HTTP status the API answers with; the handler
registered in main.py renders them as

    {"message": ..., "error": <class name>, "details": {...}}
"""


class LedgerError(Exception):
    status_code = 500

    def __init__(self, message: str, **details):
        super().__init__(message)
        self.message = message
        self.details = details

    @property
    def kind(self) -> str:
        return type(self).__name__


# -----------------------------------
# Validation (caller-correctable)
# -----------------------------------
class ValidationFailed(LedgerError):
    status_code = 400


class SplitError(ValidationFailed):
    pass


class EmptyParticipantList(SplitError):
    def __init__(self):
        super().__init__("At least one participant is required", field="participants")


class InvalidSplitMethod(SplitError):
    def __init__(self, value):
        super().__init__(
            f"Invalid split method: {value!r}",
            field="split_method",
            allowed=["equal", "exact", "percentage"],
        )


class InvalidAmount(SplitError):
    def __init__(self, value):
        super().__init__(
            "Total amount must be a non-negative number",
            field="total_amount",
            value=str(value),
        )


class UnknownParticipant(SplitError):
    def __init__(self, user_ids):
        super().__init__(
            "One or more participants do not exist",
            field="participants",
            user_ids=list(user_ids),
        )


class DuplicateParticipant(SplitError):
    def __init__(self, user_ids):
        super().__init__(
            "Duplicate users found in participants",
            field="participants",
            user_ids=list(user_ids),
        )


class PercentageMismatch(SplitError):
    def __init__(self, total_percentage, reason: str | None = None):
        super().__init__(
            reason or "Percentages must add up to 100%",
            field="participants.percentage_owed",
            total_percentage=str(total_percentage) if total_percentage is not None else None,
        )


class AmountMismatch(SplitError):
    def __init__(self, total_owed, total_amount, reason: str | None = None):
        super().__init__(
            reason or "Amounts must add up to total expense",
            field="participants.amount",
            total_owed=str(total_owed) if total_owed is not None else None,
            total_amount=str(total_amount),
        )


class DuplicateEmail(ValidationFailed):
    status_code = 409

    def __init__(self, email: str):
        super().__init__("User already exists", field="email", email=email)


# -----------------------------------
# Not found
# -----------------------------------
class NotFound(LedgerError):
    status_code = 404


class UserNotFound(NotFound):
    def __init__(self, user_id):
        super().__init__("User not found", user_id=user_id)


class ExpenseNotFound(NotFound):
    def __init__(self, expense_id):
        super().__init__("Expense not found", expense_id=expense_id)


class NoExpensesFound(NotFound):
    def __init__(self, user_id):
        super().__init__("No expenses found for this user.", user_id=user_id)
