"""Core diagnostics logic: counting, snapshot diffing and sampling."""
