from django.conf import settings
from django.core.management.base import BaseCommand

from main.catalog import load_catalog


class Command(BaseCommand):
    help = 'Загружает каталог оборудования из опубликованной таблицы и выводит его (проверка источника).'

    def add_arguments(self, parser):
        parser.add_argument(
            '--url',
            default=None,
            help='Адрес CSV-выгрузки таблицы (по умолчанию ITEM_CATALOG_CSV_URL)',
        )

    def handle(self, *args, **options):
        url = options['url'] or settings.ITEM_CATALOG_CSV_URL
        if not url:
            self.stdout.write(self.style.ERROR('Не задан ITEM_CATALOG_CSV_URL в настройках проекта.'))
            return

        self.stdout.write(f"Загрузка каталога: {url}")
        catalog = load_catalog(url)
        for number, name in enumerate(catalog, start=1):
            self.stdout.write(f"  {number}. {name}")

        if catalog:
            self.stdout.write(self.style.SUCCESS(f"Загружено позиций: {len(catalog)}."))
        else:
            self.stdout.write(self.style.WARNING('Каталог пуст (подробности в логе).'))
