"""Domain layer — fields, rules, dates, and the forbidden-term matcher.

This layer depends only on stdlib and structlog (for its log events).
It must never import from services, infrastructure, commands, or config.
"""
