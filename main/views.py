from dataclasses import replace

from django.conf import settings
from django.shortcuts import render
from django.views.generic import TemplateView, View

from . import state as st
from .forms import IssueRequestForm, ItemRowForm
from .receipt import identifier_label, signature_blocks
from .submitter import SubmissionError, submit_request
from .validators import validate_request


class IndexView(TemplateView):
    template_name = 'index.html'


# ==============================================================================
# Отправка заявки: валидация -> сеть -> снимок
# ==============================================================================

def run_submission(form_session, url, serializer_class):
    """
    Проводит сессию формы через Submitting.
    Возвращает Submitted со снимком либо Editing с текстом ошибки.
    """
    form_session = st.begin_submit(form_session)
    if form_session.phase != st.SUBMITTING:
        return form_session

    error = validate_request(form_session.state)
    if error:
        return st.fail_validation(form_session, error)

    try:
        submit_request(url, form_session.state, serializer_class)
    except SubmissionError as e:
        return st.submit_failed(form_session, e.message)
    return st.submit_succeeded(form_session)


# ==============================================================================
# Базовая вьюха формы выдачи
# ==============================================================================

class IssueFormView(View):
    """
    Одностраничная форма выдачи.

    GET - открытие страницы: новая пустая заявка.
    POST - любое действие на странице: форма отправляется целиком,
    в поле action передается что сделать (add_item, remove_item:<N>,
    submit, close, refresh). Состояние хранится в сессии.
    """
    template_name = None
    state_class = None
    form_class = IssueRequestForm
    item_form_class = ItemRowForm
    serializer_class = None
    script_url_setting = None
    session_key = None
    form_title = 'Item Issue Form'

    def get(self, request, *args, **kwargs):
        form_session = st.new_session(self.state_class)
        self.on_page_load(request)
        self.save_session(request, form_session)
        return self.render_page(request, form_session)

    def post(self, request, *args, **kwargs):
        form_session = self.load_session(request)
        action, _, argument = request.POST.get('action', 'refresh').partition(':')

        if action == 'close':
            form_session = st.close(form_session)
            self.on_close(request)
        elif not form_session.is_submitted:
            form_session = self.apply_input(request, form_session)
            form_session = self.handle_action(request, form_session, action, argument)

        self.save_session(request, form_session)
        return self.render_page(request, form_session)

    # --- хуки для конкретных форм ---

    def on_page_load(self, request):
        pass

    def on_close(self, request):
        pass

    def handle_extra_action(self, request, form_session, action, argument):
        return form_session

    def apply_item_row(self, request, form_session, index, values):
        state = form_session.state
        for name, value in values.items():
            state = st.set_item_field(state, index, name, value)
        return st.update_state(form_session, state)

    def build_item_form(self, request, form_session, item, index):
        return self.item_form_class.from_item(item, index)

    def get_extra_context(self, request, form_session):
        return {}

    # --- общая механика ---

    def load_session(self, request):
        return st.FormSession.from_dict(self.state_class, request.session.get(self.session_key))

    def save_session(self, request, form_session):
        request.session[self.session_key] = form_session.to_dict()

    def apply_input(self, request, form_session):
        form = self.form_class(request.POST)
        form.is_valid()
        values = form.state_values(self.state_class)
        form_session = st.update_state(form_session, st.set_fields(form_session.state, values))

        for index in range(len(form_session.state.items)):
            row_form = self.item_form_class(request.POST, prefix=f'items-{index}')
            row_form.is_valid()
            form_session = self.apply_item_row(request, form_session, index, row_form.row_values())
        return form_session

    def handle_action(self, request, form_session, action, argument):
        if action == 'add_item':
            return st.update_state(form_session, st.add_item(form_session.state))

        if action == 'remove_item':
            try:
                index = int(argument)
            except ValueError:
                return form_session
            form_session = st.update_state(form_session, st.remove_item(form_session.state, index))
            return replace(form_session, adding_row=None)

        if action == 'submit':
            url = getattr(settings, self.script_url_setting)
            return run_submission(form_session, url, self.serializer_class)

        return self.handle_extra_action(request, form_session, action, argument)

    def render_page(self, request, form_session):
        state = form_session.snapshot if form_session.is_submitted else form_session.state
        context = {
            'form_title': self.form_title,
            'form_session': form_session,
            'submitted': form_session.is_submitted,
            'error': form_session.error,
            'request_data': state,
            'id_label': identifier_label(state.user_type),
            'signature_blocks': signature_blocks(state),
            'form': self.form_class.from_state(state),
            'item_rows': [
                (index, item, self.build_item_form(request, form_session, item, index))
                for index, item in enumerate(state.items)
            ],
            'can_remove_items': len(state.items) > 1,
        }
        context.update(self.get_extra_context(request, form_session))
        return render(request, self.template_name, context)
