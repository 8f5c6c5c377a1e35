"""Multi-factor authentication methods feature."""
