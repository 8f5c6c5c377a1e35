"""Rules over contact value objects (email, phone number)."""

from .base import BaseBusinessRule
from ..value_objects import Email, PhoneNumber


class EmailMustBeBusinessEmailRule(BaseBusinessRule):
    def __init__(self, email: Email, operation: str):
        self._email = email
        self._operation = operation

    def is_broken(self) -> bool:
        return not self._email.is_business_email()

    @property
    def message(self) -> str:
        return f"Email must be a business email for {self._operation}. Current email: {self._email.value}"


class EmailMustNotBeDisposableRule(BaseBusinessRule):
    def __init__(self, email: Email, operation: str):
        self._email = email
        self._operation = operation

    def is_broken(self) -> bool:
        return self._email.is_disposable_email()

    @property
    def message(self) -> str:
        return f"Cannot use disposable email for {self._operation}. Email domain: {self._email.get_domain()}"


class PhoneNumberMustBeMobileRule(BaseBusinessRule):
    def __init__(self, phone_number: PhoneNumber, operation: str):
        self._phone_number = phone_number
        self._operation = operation

    def is_broken(self) -> bool:
        return not self._phone_number.is_mobile()

    @property
    def message(self) -> str:
        return f"Phone number must be mobile for {self._operation}. Current number: {self._phone_number.value}"


class PhoneNumberMustBeFromTehranRule(BaseBusinessRule):
    """Local services are only offered to Tehran-area numbers."""

    def __init__(self, phone_number: PhoneNumber, operation: str):
        self._phone_number = phone_number
        self._operation = operation

    def is_broken(self) -> bool:
        return not self._phone_number.is_tehran_number()

    @property
    def message(self) -> str:
        return (
            f"Phone number must be from Tehran for {self._operation}. "
            f"Current number: {self._phone_number.value}, Area code: {self._phone_number.get_area_code()}"
        )
