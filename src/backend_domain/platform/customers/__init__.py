"""Customer accounts feature."""
