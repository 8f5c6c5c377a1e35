"""Tests for translating specifications into PostgreSQL clauses."""

from types import SimpleNamespace

import pytest

from backend_domain.core.exceptions import DomainValidationError
from backend_domain.core.specifications import (
    Criterion,
    Operator,
    Specification,
    SpecificationEvaluator,
    eq,
    is_in,
    is_null,
    ne,
)
from backend_domain.infrastructure.persistence import SpecificationSqlTranslator
from backend_domain.platform.customers.core import CustomerStatus
from backend_domain.platform.customers.core.specifications import active_customers

COLUMNS = {
    "last_name": "last_name",
    "customer_status": "customer_status",
    "email.value": "email",
    "meta.is_deleted": "is_deleted",
    "meta.created_at": "created_at",
}


@pytest.fixture
def translator():
    return SpecificationSqlTranslator(COLUMNS)


class TestSpecificationSqlTranslator:
    """Test WHERE, ORDER BY and paging generation."""

    def test_empty_specification(self, translator):
        parts = translator.translate(Specification())
        assert parts.where == "TRUE"
        assert parts.params == []
        assert parts.select("domain.customers") == "SELECT * FROM domain.customers WHERE TRUE"

    def test_criteria_are_parameterized(self, translator):
        spec = Specification().where(eq("customer_status", CustomerStatus.ACTIVE)).where(eq("meta.is_deleted", False))

        parts = translator.translate(spec)

        assert parts.where == "(customer_status = $1 AND is_deleted = $2)"
        assert parts.params == ["active", False]

    def test_in_uses_any(self, translator):
        parts = translator.translate(Specification().where(is_in("customer_status", [CustomerStatus.ACTIVE])))
        assert parts.where == "customer_status = ANY($1)"
        assert parts.params == [["active"]]

    def test_contains_uses_ilike(self, translator):
        parts = translator.translate(Specification().where(Criterion("email.value", Operator.CONTAINS, "acme")))
        assert parts.where == "email ILIKE $1 ESCAPE '\\'"
        assert parts.params == ["%acme%"]

    def test_is_null(self, translator):
        assert translator.translate(Specification().where(is_null("email.value"))).where == "email IS NULL"
        assert translator.translate(Specification().where(is_null("email.value", False))).where == "email IS NOT NULL"

    def test_or_and_not(self, translator):
        expression = eq("last_name", "Ahmadi") | ~eq("customer_status", "pending")
        parts = translator.translate(Specification().where(expression))
        assert parts.where == "(last_name = $1 OR NOT COALESCE(customer_status = $2, FALSE))"
        assert parts.params == ["Ahmadi", "pending"]

    def test_ordering_and_paging(self, translator):
        spec = (
            Specification()
            .where(eq("last_name", "Ahmadi"))
            .add_order_by("last_name")
            .add_order_by_descending("meta.created_at")
            .apply_paging(40, 20)
        )

        parts = translator.translate(spec)

        assert parts.order_by == "ORDER BY last_name ASC NULLS FIRST, created_at DESC NULLS LAST"
        assert parts.paging == "OFFSET $2 LIMIT $3"
        assert parts.params == ["Ahmadi", 40, 20]
        assert parts.select("t") == (
            "SELECT * FROM t WHERE last_name = $1 "
            "ORDER BY last_name ASC NULLS FIRST, created_at DESC NULLS LAST OFFSET $2 LIMIT $3"
        )

    def test_count_ignores_paging(self, translator):
        parts = translator.translate(Specification().where(eq("last_name", "A")))
        assert parts.count("t") == "SELECT COUNT(*) FROM t WHERE last_name = $1"

    def test_unmapped_field_rejected(self, translator):
        with pytest.raises(DomainValidationError):
            translator.translate(Specification().where(eq("password", "x")))
        with pytest.raises(DomainValidationError):
            translator.translate(Specification().add_order_by("password"))

    def test_customer_specification(self, translator):
        parts = translator.translate(active_customers())

        assert parts.where == "(customer_status = ANY($1) AND is_deleted = $2)"
        assert sorted(parts.params[0]) == ["active", "premium", "regular", "verified"]
        assert parts.params[1] is False
        assert parts.order_by == "ORDER BY created_at DESC NULLS LAST"


ROWS = [
    SimpleNamespace(email="sara@acme.io", note="50% off"),
    SimpleNamespace(email="ali@acme.io", note="500 units"),
    SimpleNamespace(email=None, note=None),
]


def matching_emails(spec):
    return [row.email for row in SpecificationEvaluator.filter(ROWS, spec)]


class TestNullAndWildcardSemantics:
    """Test SQL clauses select the same rows the in-memory evaluator does."""

    @pytest.fixture
    def row_translator(self):
        return SpecificationSqlTranslator({"email": "email", "note": "note"})

    def test_eq_none_is_null(self, row_translator):
        spec = Specification().where(eq("email", None))

        parts = row_translator.translate(spec)

        assert parts.where == "email IS NULL"
        assert parts.params == []
        assert matching_emails(spec) == [None]

    def test_ne_none_is_not_null(self, row_translator):
        spec = Specification().where(ne("email", None))

        assert row_translator.translate(spec).where == "email IS NOT NULL"
        assert matching_emails(spec) == ["sara@acme.io", "ali@acme.io"]

    def test_ne_keeps_null_rows(self, row_translator):
        spec = Specification().where(ne("email", "sara@acme.io"))

        parts = row_translator.translate(spec)

        assert parts.where == "(email <> $1 OR email IS NULL)"
        assert parts.params == ["sara@acme.io"]
        assert matching_emails(spec) == ["ali@acme.io", None]

    def test_not_treats_null_comparison_as_false(self, row_translator):
        spec = Specification().where(~eq("email", "sara@acme.io"))

        assert row_translator.translate(spec).where == "NOT COALESCE(email = $1, FALSE)"
        assert matching_emails(spec) == ["ali@acme.io", None]

    def test_in_with_none(self, row_translator):
        spec = Specification().where(is_in("email", ["ali@acme.io", None]))

        parts = row_translator.translate(spec)

        assert parts.where == "(email = ANY($1) OR email IS NULL)"
        assert parts.params == [["ali@acme.io"]]
        assert matching_emails(spec) == ["ali@acme.io", None]

    def test_contains_escapes_wildcards(self, row_translator):
        spec = Specification().where(Criterion("note", Operator.CONTAINS, "50%"))

        parts = row_translator.translate(spec)

        assert parts.params == ["%50\\%%"]
        assert matching_emails(spec) == ["sara@acme.io"]

    def test_contains_escapes_underscore_and_backslash(self, row_translator):
        parts = row_translator.translate(Specification().where(Criterion("note", Operator.CONTAINS, "a_b\\c")))
        assert parts.params == ["%a\\_b\\\\c%"]

    def test_null_ordering_matches_memory(self, row_translator):
        spec = Specification().add_order_by("email")

        assert row_translator.translate(spec).order_by == "ORDER BY email ASC NULLS FIRST"
        assert [row.email for row in SpecificationEvaluator.apply(ROWS, spec)] == [
            None, "ali@acme.io", "sara@acme.io",
        ]
