"""MFA application layer."""
