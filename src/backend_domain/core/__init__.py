"""Shared kernel: exceptions, value objects, aggregates, rules and specifications."""
