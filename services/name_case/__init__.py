"""
Name Case Service

Converts personal names to their conventional capitalization with:
- Rule-based name case pipeline (Mac/Mc, particles, numerals, conjunctions)
- Max length formatting for bounded display values
- Pydantic settings for configuration
- Structured JSON logging with structlog
- CLI interface
"""

__version__ = "0.1.0"
