import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class NoticesConfig(AppConfig):
    name = "notices"
    verbose_name = "Notices"

    def ready(self):
        """Import the notice tag library so the tags are registered at startup."""
        from notices.templatetags import notice_tags

        logger.debug("Notice kinds available: %s", ", ".join(notice_tags.NOTICE_KINDS))
