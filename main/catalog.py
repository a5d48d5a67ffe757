"""
Каталог оборудования для формы выдачи.

Источник - опубликованная Google-таблица, выгруженная в CSV.
Загрузка делается один раз при открытии формы, без повторов и кэша:
любая ошибка пишется в лог, а каталог остается пустым.
"""
import csv
import io
import logging

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

# Значение пункта списка "Добавить новую позицию"
ADD_NEW_ITEM = '__add_new__'


def parse_catalog_csv(text):
    """
    Разбирает CSV: первая строка - заголовок, из остальных берется
    первая колонка без пробелов по краям, пустые значения отбрасываются.
    """
    reader = csv.reader(io.StringIO(text or ''))
    names = []
    for index, row in enumerate(reader):
        if index == 0 or not row:
            continue
        name = row[0].strip()
        if name:
            names.append(name)
    return names


def load_catalog(url=None, session=None):
    url = url if url is not None else settings.ITEM_CATALOG_CSV_URL
    if not url:
        logger.warning("Item catalog URL is not configured, catalog is empty")
        return []

    http = session or requests
    try:
        response = http.get(url, timeout=settings.ISSUE_FORMS_HTTP_TIMEOUT)
        response.raise_for_status()
        return parse_catalog_csv(response.text)
    except (requests.exceptions.RequestException, csv.Error):
        logger.exception("Error fetching item catalog from %s", url)
        return []


def add_catalog_item(catalog, name):
    """
    Добавляет новое название в каталог текущей сессии.
    Возвращает (новый каталог, добавленное название) или (каталог, None),
    если название пустое.
    """
    name = (name or '').strip()
    if not name:
        return list(catalog), None
    if name in catalog:
        return list(catalog), name
    return list(catalog) + [name], name
