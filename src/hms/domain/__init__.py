"""Domain layer — the hms value type, construction, parsing and formatting.

This layer depends only on stdlib and rich (for console rendering).
It must never import from services, commands, output, or config.
"""
