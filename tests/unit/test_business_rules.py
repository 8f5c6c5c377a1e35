"""Tests for the business rule engine."""

import pytest

from backend_domain.core.exceptions import BusinessRuleViolationError
from backend_domain.core.rules import (
    BaseBusinessRule,
    BusinessRule,
    BusinessRuleValidator,
    CompositeBusinessRule,
    EmailMustBeBusinessEmailRule,
    EmailMustNotBeDisposableRule,
    PhoneNumberMustBeFromTehranRule,
    PhoneNumberMustBeMobileRule,
)
from backend_domain.core.value_objects import Email, PhoneNumber


class StaticRule(BaseBusinessRule):
    """Rule with a fixed outcome, counting evaluations."""

    def __init__(self, broken: bool, message: str):
        self._broken = broken
        self._message = message
        self.evaluations = 0

    def is_broken(self) -> bool:
        self.evaluations += 1
        return self._broken

    @property
    def message(self) -> str:
        return self._message


class TestBaseBusinessRule:
    """Test evaluation and enforcement of single rules."""

    def test_satisfied_rule_validates(self):
        rule = StaticRule(False, "never shown")
        assert rule.is_satisfied()
        rule.validate()

    def test_broken_rule_raises_with_message(self):
        """Test validate raises carrying the rule message."""
        rule = StaticRule(True, "Customer must be active")
        assert not rule.is_satisfied()
        with pytest.raises(BusinessRuleViolationError) as exc_info:
            rule.validate()
        assert exc_info.value.message == "Customer must be active"
        assert exc_info.value.broken_rules == ["Customer must be active"]

    @pytest.mark.asyncio
    async def test_validate_async(self):
        with pytest.raises(BusinessRuleViolationError):
            await StaticRule(True, "broken").validate_async()
        await StaticRule(False, "fine").validate_async()

    def test_satisfies_protocol(self):
        assert isinstance(StaticRule(False, "x"), BusinessRule)


class TestCompositeBusinessRule:
    """Test composite rule counting and messages."""

    def test_broken_when_any_child_broken(self):
        """Test broken count equals number of broken children."""
        composite = CompositeBusinessRule(
            [StaticRule(False, "a"), StaticRule(True, "b"), StaticRule(True, "c")],
            summary_message="Checks failed",
        )
        assert composite.is_broken()
        assert composite.has_broken_rules
        assert composite.total_rules == 3
        assert composite.broken_rules_count == 2
        assert [rule.message for rule in composite.broken_rules] == ["b", "c"]
        assert composite.message == "Checks failed: b; c"

    def test_not_broken_when_all_children_pass(self):
        """Test message is empty when nothing is broken."""
        composite = CompositeBusinessRule.of(StaticRule(False, "a"), StaticRule(False, "b"))
        assert not composite.is_broken()
        assert composite.broken_rules_count == 0
        assert composite.message == ""
        composite.validate()

    def test_default_summary_message(self):
        composite = CompositeBusinessRule.of(StaticRule(True, "a"))
        assert composite.message == "One or more business rules are broken: a"

    def test_empty_composite_is_not_broken(self):
        composite = CompositeBusinessRule([])
        assert not composite.is_broken()
        assert composite.total_rules == 0

    def test_validate_reports_every_broken_child(self):
        composite = CompositeBusinessRule.of(
            StaticRule(True, "a"), StaticRule(True, "b"), summary_message="Failed"
        )
        with pytest.raises(BusinessRuleViolationError) as exc_info:
            composite.validate()
        assert exc_info.value.message == "Failed: a; b"
        assert exc_info.value.broken_rules == ["a", "b"]

    def test_summary_message_is_keyword_only(self):
        with pytest.raises(TypeError):
            CompositeBusinessRule([StaticRule(True, "a")], "summary")


class TestBusinessRuleValidator:
    """Test aggregated validation."""

    def test_evaluates_every_rule(self):
        """Test no short-circuit after the first broken rule."""
        first, second, third = StaticRule(True, "first"), StaticRule(False, "second"), StaticRule(True, "third")
        with pytest.raises(BusinessRuleViolationError) as exc_info:
            BusinessRuleValidator.validate(first, second, third)

        assert exc_info.value.message == "first; third"
        assert exc_info.value.broken_rules == ["first", "third"]
        assert exc_info.value.details["broken_rules"] == ["first", "third"]
        assert first.evaluations == second.evaluations == third.evaluations == 1

    def test_accepts_iterables(self):
        rules = [StaticRule(True, "a"), StaticRule(False, "b")]
        assert BusinessRuleValidator.get_broken_rule_messages(rules, StaticRule(True, "c")) == ["a", "c"]

    def test_are_valid_does_not_raise(self):
        assert BusinessRuleValidator.are_valid(StaticRule(False, "a"), [StaticRule(False, "b")])
        assert not BusinessRuleValidator.are_valid(StaticRule(True, "a"))

    def test_validate_passes_when_nothing_broken(self):
        BusinessRuleValidator.validate([StaticRule(False, "a")])
        BusinessRuleValidator.validate()

    @pytest.mark.asyncio
    async def test_validate_async(self):
        with pytest.raises(BusinessRuleViolationError):
            await BusinessRuleValidator.validate_async([StaticRule(True, "a")])


class TestContactRules:
    """Test email and phone number rules."""

    def test_business_email_rule(self):
        rule = EmailMustBeBusinessEmailRule(Email("me@gmail.com"), "business account")
        assert rule.is_broken()
        assert rule.message == "Email must be a business email for business account. Current email: me@gmail.com"
        assert not EmailMustBeBusinessEmailRule(Email("me@acme.io"), "x").is_broken()

    def test_disposable_email_rule(self):
        rule = EmailMustNotBeDisposableRule(Email("x@tempmail.org"), "email notification")
        assert rule.is_broken()
        assert rule.message == "Cannot use disposable email for email notification. Email domain: tempmail.org"

    def test_mobile_rule(self):
        rule = PhoneNumberMustBeMobileRule(PhoneNumber("02188776655"), "SMS notification")
        assert rule.is_broken()
        assert rule.message == "Phone number must be mobile for SMS notification. Current number: +982188776655"
        assert not PhoneNumberMustBeMobileRule(PhoneNumber("09121234567"), "x").is_broken()

    def test_tehran_rule(self):
        assert not PhoneNumberMustBeFromTehranRule(PhoneNumber("02188776655"), "local service").is_broken()
        rule = PhoneNumberMustBeFromTehranRule(PhoneNumber("07132223344"), "local service")
        assert rule.is_broken()
        assert rule.message == (
            "Phone number must be from Tehran for local service. "
            "Current number: +987132223344, Area code: 71"
        )
