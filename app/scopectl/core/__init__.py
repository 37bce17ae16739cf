"""Core search scope engine: root sets, patterns, matchers and scopes."""
