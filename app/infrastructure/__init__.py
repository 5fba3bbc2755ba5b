"""Infrastructure modules for the translation engine.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- hookspecs: Plugin hook specifications (modifier plugins)
- i18n: Translation key resolution, modifier dispatch and language fallback
"""
