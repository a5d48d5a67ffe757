from django import forms

from .receipt import identifier_label
from .state import STUDENT, FACULTY


def text_widget(input_type='text', required=True, **attrs):
    attrs = {'class': 'form-control form-control-sm', **attrs}
    if required:
        attrs['required'] = True
    widgets = {
        'text': forms.TextInput,
        'email': forms.EmailInput,
        'tel': forms.TextInput,
        'date': forms.DateInput,
        'number': forms.NumberInput,
    }
    if input_type in ('tel', 'date'):
        attrs['type'] = input_type
    return widgets[input_type](attrs=attrs)


class IssueRequestForm(forms.Form):
    """
    Поля заявителя. Все поля необязательны на уровне Django-формы:
    форма отправляется при каждом действии (добавить строку и т.п.),
    а обязательность проверяется только при отправке заявки.
    Атрибут required в HTML оставлен для браузера.
    """
    USER_TYPES = (
        (STUDENT, 'Student'),
        (FACULTY, 'Faculty'),
    )

    user_type = forms.ChoiceField(
        label='User Type',
        required=False,
        choices=USER_TYPES,
        widget=forms.Select(attrs={'class': 'form-select form-select-sm', 'data-refresh': 'true'}),
    )
    name = forms.CharField(label='Name', required=False, widget=text_widget())
    id_number = forms.CharField(label='Roll No', required=False, widget=text_widget())
    department = forms.CharField(label='Department', required=False, widget=text_widget())
    # Почта и телефон проверяются как есть, без обрезки пробелов
    mobile = forms.CharField(
        label='Mobile No',
        required=False,
        strip=False,
        widget=text_widget('tel', placeholder='10-digit mobile number', maxlength=10),
    )
    email = forms.CharField(
        label='Email ID',
        required=False,
        strip=False,
        widget=text_widget('email', placeholder='name@lnmiit.ac.in'),
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Подбираем подпись поля ID под тип заявителя
        user_type = self.initial.get('user_type') or self.data.get('user_type') or STUDENT
        self.fields['id_number'].label = identifier_label(user_type)

    @classmethod
    def from_state(cls, state):
        return cls(initial={name: getattr(state, name) for name in cls.base_fields})

    def state_values(self, state_class):
        """
        Значения, прошедшие очистку и относящиеся к состоянию.
        Поля, которых не было в запросе (скрытые на странице), не трогаем.
        """
        editable = set(state_class.editable_fields())
        return {
            name: value for name, value in self.cleaned_data.items()
            if name in editable and self.add_prefix(name) in self.data
        }


class ItemRowForm(forms.Form):
    name = forms.CharField(
        required=False,
        widget=text_widget(placeholder='Item name'),
    )
    quantity = forms.CharField(
        required=False,
        widget=text_widget('number', min=1),
    )

    @classmethod
    def from_item(cls, item, index, **kwargs):
        return cls(initial=item.to_dict(), prefix=f'items-{index}', **kwargs)

    def row_values(self):
        return {
            name: value for name, value in self.cleaned_data.items()
            if self.add_prefix(name) in self.data
        }
