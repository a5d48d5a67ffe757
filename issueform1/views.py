from dataclasses import replace

from main import state as st
from main.catalog import ADD_NEW_ITEM, add_catalog_item, load_catalog
from main.views import IssueFormView
from .forms import ItemIssueForm, CatalogItemForm
from .serializers import ItemIssueSerializer
from .state import ItemIssueRequest

CATALOG_SESSION_KEY = 'issueform1_catalog'


class ItemIssueFormView(IssueFormView):
    """
    Форма 1: позиции выбираются из каталога (Google-таблица),
    недостающие названия можно добавить прямо из формы.
    """
    template_name = 'issueform1/issue_form.html'
    state_class = ItemIssueRequest
    form_class = ItemIssueForm
    item_form_class = CatalogItemForm
    serializer_class = ItemIssueSerializer
    script_url_setting = 'ITEM_ISSUE_SCRIPT_URL'
    session_key = 'issueform1_session'

    def get_catalog(self, request):
        return request.session.get(CATALOG_SESSION_KEY, [])

    def on_page_load(self, request):
        # Одна попытка загрузки на каждое открытие страницы
        request.session[CATALOG_SESSION_KEY] = load_catalog()

    def apply_item_row(self, request, form_session, index, values):
        values = dict(values)
        values.pop('new_item_name', None)
        if values.get('name') == ADD_NEW_ITEM:
            # Пункт "добавить новую позицию": строка переходит в режим ввода
            # и остается без названия, пока оно не введено
            values['name'] = ''
            form_session = replace(form_session, adding_row=index)
        elif 'name' in values and form_session.adding_row == index:
            form_session = replace(form_session, adding_row=None)
        return super().apply_item_row(request, form_session, index, values)

    def handle_extra_action(self, request, form_session, action, argument):
        if action == 'add_catalog_item':
            try:
                index = int(argument)
            except ValueError:
                return form_session
            if not 0 <= index < len(form_session.state.items):
                return form_session
            new_name = request.POST.get(f'items-{index}-new_item_name', '')
            catalog, added = add_catalog_item(self.get_catalog(request), new_name)
            if added is None:
                return form_session
            request.session[CATALOG_SESSION_KEY] = catalog
            form_session = st.update_state(
                form_session, st.set_item_field(form_session.state, index, 'name', added))
            return replace(form_session, adding_row=None)

        if action == 'cancel_new_item':
            return replace(form_session, adding_row=None)

        return form_session

    def build_item_form(self, request, form_session, item, index):
        form = self.item_form_class.from_item(item, index, catalog=self.get_catalog(request))
        if index == form_session.adding_row:
            form.initial['name'] = ADD_NEW_ITEM
        return form

    def get_extra_context(self, request, form_session):
        return {
            'catalog': self.get_catalog(request),
            'adding_row': form_session.adding_row,
        }
