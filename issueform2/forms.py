from django import forms

from main.forms import ItemRowForm, text_widget


class DatedItemForm(ItemRowForm):
    issue_date = forms.CharField(required=False, widget=text_widget('date'))
    return_date = forms.CharField(required=False, widget=text_widget('date'))
    remark = forms.CharField(required=False, widget=text_widget(required=False))
