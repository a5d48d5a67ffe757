from django import forms

from main.catalog import ADD_NEW_ITEM
from main.forms import IssueRequestForm, ItemRowForm, text_widget
from main.state import STUDENT, FACULTY, STAFF
from .state import DEPARTMENTS


class ItemIssueForm(IssueRequestForm):
    USER_TYPES = (
        (STUDENT, 'Student'),
        (FACULTY, 'Faculty'),
        (STAFF, 'Staff'),
    )

    user_type = forms.ChoiceField(
        label='User Type',
        required=False,
        choices=USER_TYPES,
        widget=forms.Select(attrs={'class': 'form-select form-select-sm', 'data-refresh': 'true'}),
    )
    department = forms.ChoiceField(
        label='Department',
        required=False,
        choices=[('', 'Select department')] + [(d, d) for d in DEPARTMENTS],
        widget=forms.Select(attrs={
            'class': 'form-select form-select-sm',
            'required': True,
            'data-refresh': 'true',
        }),
    )
    other_department = forms.CharField(
        label='Specify Department',
        required=False,
        widget=text_widget(placeholder='Enter your department'),
    )
    instructor_name = forms.CharField(
        label='Instructor Name (optional)',
        required=False,
        widget=text_widget(required=False),
    )
    issue_date = forms.CharField(label='Issue Date', required=False, widget=text_widget('date', required=False))
    return_date = forms.CharField(label='Return Date', required=False, widget=text_widget('date', required=False))


class CatalogItemForm(ItemRowForm):
    """
    Строка позиции с выбором названия из каталога.
    Последний пункт списка переводит строку в режим ввода нового названия.
    """
    name = forms.CharField(
        required=False,
        widget=forms.Select(attrs={
            'class': 'form-select form-select-sm',
            'required': True,
            'data-refresh': 'true',
        }),
    )
    new_item_name = forms.CharField(
        required=False,
        widget=text_widget(required=False, placeholder='Enter new item name'),
    )

    def __init__(self, *args, catalog=(), **kwargs):
        super().__init__(*args, **kwargs)
        choices = [('', 'Select an item')] + [(name, name) for name in catalog]
        # Название, которого уже нет в каталоге, все равно показываем выбранным
        current = self.initial.get('name')
        if current and current not in catalog:
            choices.append((current, current))
        choices.append((ADD_NEW_ITEM, '+ Add new item'))
        self.fields['name'].widget.choices = choices
