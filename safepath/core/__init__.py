"""Core domain: name validation and the path tree."""
