"""Infrastructure modules for the i18n template engine.

Centralized infrastructure components:
- i18n: Template engine, message catalogs, fallback chains and lint checks
"""
