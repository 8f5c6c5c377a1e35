"""Aggregate building blocks."""

from .aggregate import AggregateIdentityMixin, AggregateMetadata, AggregateRoot

__all__ = ["AggregateIdentityMixin", "AggregateMetadata", "AggregateRoot"]
