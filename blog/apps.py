import logging

from django.apps import AppConfig
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE_ALIASES = {"funk": "haskell"}


class BlogConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'blog'

    def ready(self):
        """Register code block language aliases once, at startup."""
        from blog.markdown.highlighting import (
            LanguageAliasError,
            language_aliases,
            register_language_alias,
        )

        aliases = getattr(settings, "HIGHLIGHT_LANGUAGE_ALIASES", DEFAULT_LANGUAGE_ALIASES)
        for alias, target in aliases.items():
            try:
                register_language_alias(alias, target)
            except LanguageAliasError as e:
                raise ImproperlyConfigured(f"HIGHLIGHT_LANGUAGE_ALIASES: {e}") from e

        logger.debug(
            "Code block language aliases: %s",
            ", ".join(f"{a} -> {t}" for a, t in sorted(language_aliases().items())) or "none",
        )
