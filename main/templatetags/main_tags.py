from django import template

from main.receipt import identifier_label

register = template.Library()


@register.filter
def id_label(user_type):
    """
    Подпись поля ID для типа заявителя.
    Использование: {{ request_data.user_type|id_label }}
    """
    return identifier_label(user_type)


@register.filter
def row_number(index):
    """Номер строки в таблице позиций (нумерация с единицы)."""
    return int(index) + 1
