from django.core.management.base import BaseCommand

from apps.seo.conf import get_config
from apps.seo.services.factory import get_extractor_cache


class Command(BaseCommand):
    help = "Clear cached SEO extractor collections (all content types)."

    def handle(self, *args, **options):
        config = get_config()
        get_extractor_cache(config.cache_alias, config.cache_timeout).clear()
        self.stdout.write(self.style.SUCCESS(f"SEO extractor cache cleared (alias={config.cache_alias})."))
