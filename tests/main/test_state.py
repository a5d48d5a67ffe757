import pytest

from main import state as st
from issueform1.state import ItemIssueRequest, CatalogItem
from issueform2.state import LabIssueRequest, DatedItem


class TestEmptyRequest:
    """Тесты пустой заявки"""

    def test_new_request_has_one_blank_row(self):
        """Новая заявка: студент и одна пустая строка"""
        state = ItemIssueRequest()

        assert state.user_type == 'student'
        assert state.items == (CatalogItem(),)

    def test_empty_items_are_replaced_by_blank_row(self):
        """Пустой список позиций заменяется одной пустой строкой"""
        state = st.replace_items(LabIssueRequest(), [])

        assert state.items == (DatedItem(),)

    def test_state_is_immutable(self, asha_request):
        """Состояние нельзя изменить на месте"""
        with pytest.raises(AttributeError):
            asha_request.name = 'Другое имя'


class TestSetField:
    """Тесты изменения полей заявителя"""

    def test_set_field_returns_new_state(self, asha_request):
        """Переход возвращает новый объект, старый не меняется"""
        new_state = st.set_field(asha_request, 'name', 'Asha R.')

        assert new_state.name == 'Asha R.'
        assert asha_request.name == 'Asha Rao'
        assert new_state is not asha_request

    def test_unknown_field(self, asha_request):
        """Неизвестное поле - KeyError"""
        with pytest.raises(KeyError):
            st.set_field(asha_request, 'salary', '100')

    def test_items_are_not_a_plain_field(self, asha_request):
        """Список позиций меняется только через операции со строками"""
        with pytest.raises(KeyError):
            st.set_field(asha_request, 'items', ())

    def test_switching_away_from_others_clears_other_department(self):
        """Выбор Others, затем обычной кафедры - поле 'другая кафедра' очищается"""
        state = st.set_field(ItemIssueRequest(), 'department', 'Others')
        state = st.set_field(state, 'other_department', 'Design')
        assert state.other_department == 'Design'

        state = st.set_field(state, 'department', 'Physics')

        assert state.department == 'Physics'
        assert state.other_department == ''

    def test_switching_away_from_student_clears_instructor(self):
        """Смена типа заявителя со студента очищает имя преподавателя"""
        state = st.set_field(ItemIssueRequest(), 'instructor_name', 'Dr. Mehta')

        state = st.set_field(state, 'user_type', 'staff')

        assert state.instructor_name == ''

    def test_other_department_is_ignored_without_others(self):
        """Без Others поле 'другая кафедра' всегда пустое"""
        state = st.set_field(ItemIssueRequest(department='Physics'), 'other_department', 'Design')

        assert state.other_department == ''

    def test_no_other_side_effects(self, asha_request):
        """Смена кафедры не трогает остальные поля"""
        new_state = st.set_field(asha_request, 'department', 'Physics')

        assert new_state.name == asha_request.name
        assert new_state.email == asha_request.email
        assert new_state.items == asha_request.items

    def test_set_fields_uses_final_values(self):
        """При массовом обновлении очистка идет по итоговым значениям"""
        state = st.set_fields(ItemIssueRequest(), {
            'user_type': 'faculty',
            'instructor_name': 'Dr. Mehta',
            'department': 'Others',
            'other_department': 'Design',
        })

        assert state.instructor_name == ''
        assert state.other_department == 'Design'

    def test_set_fields_unknown_field(self):
        """Массовое обновление с неизвестным полем - KeyError"""
        with pytest.raises(KeyError):
            st.set_fields(LabIssueRequest(), {'name': 'X', 'other_department': 'Design'})


class TestItemList:
    """Тесты операций со списком позиций"""

    def test_add_item_appends_blank_row(self, asha_request):
        """Новая строка добавляется в конец"""
        state = st.add_item(asha_request)

        assert len(state.items) == 2
        assert state.items[0] == asha_request.items[0]
        assert state.items[1] == CatalogItem()

    def test_remove_last_row_is_noop(self):
        """Единственную строку удалить нельзя"""
        state = ItemIssueRequest()

        assert st.remove_item(state, 0) is state
        assert len(st.remove_item(state, 0).items) == 1

    def test_add_then_remove_restores_sequence(self, lab_request):
        """Добавить строку и удалить ее по индексу - список как был"""
        state = st.add_item(lab_request)
        state = st.remove_item(state, len(state.items) - 1)

        assert state.items == lab_request.items

    def test_remove_by_position_not_by_value(self):
        """Удаление по позиции, даже если строки одинаковые"""
        row = CatalogItem(name='Breadboard', quantity='1')
        state = ItemIssueRequest(items=(row, CatalogItem(name='Wire'), row))

        state = st.remove_item(state, 0)

        assert state.items == (CatalogItem(name='Wire'), row)

    def test_remove_out_of_range_is_noop(self, lab_request):
        """Индекс за пределами списка ничего не меняет"""
        assert st.remove_item(lab_request, 5) is lab_request
        assert st.remove_item(lab_request, -1) is lab_request

    def test_set_item_field(self, lab_request):
        """Изменение поля одной строки"""
        state = st.set_item_field(lab_request, 1, 'remark', 'Return to Lab 2')

        assert state.items[1].remark == 'Return to Lab 2'
        assert state.items[0] == lab_request.items[0]
        assert lab_request.items[1].remark == ''

    def test_set_item_field_bad_index(self, lab_request):
        """Несуществующая строка - IndexError"""
        with pytest.raises(IndexError):
            st.set_item_field(lab_request, 2, 'name', 'X')

    def test_set_item_field_unknown_field(self, asha_request):
        """У строк формы 1 нет примечания"""
        with pytest.raises(KeyError):
            st.set_item_field(asha_request, 0, 'remark', 'X')


class TestSerialization:
    """Тесты сохранения состояния в сессию"""

    def test_dict_round_trip(self, lab_request):
        """to_dict / from_dict дают то же состояние"""
        assert LabIssueRequest.from_dict(lab_request.to_dict()) == lab_request

    def test_from_dict_ignores_unknown_keys(self):
        """Лишние ключи отбрасываются"""
        state = ItemIssueRequest.from_dict({'name': 'Asha', 'hacker': '1', 'items': [{'name': 'X', 'junk': 1}]})

        assert state.name == 'Asha'
        assert state.items == (CatalogItem(name='X'),)

    def test_from_dict_enforces_dependencies(self):
        """Зависимые поля очищаются и при восстановлении из словаря"""
        state = ItemIssueRequest.from_dict({'department': 'Physics', 'other_department': 'Design'})

        assert state.other_department == ''


class TestFormSession:
    """Тесты жизненного цикла отправки"""

    def test_happy_path(self, asha_request):
        """Editing -> Submitting -> Submitted со снимком"""
        session = st.FormSession(state=asha_request)

        session = st.begin_submit(session)
        assert session.phase == st.SUBMITTING

        session = st.submit_succeeded(session)
        assert session.is_submitted
        assert session.snapshot == asha_request
        assert session.error is None

    def test_failure_returns_to_editing(self, asha_request):
        """Ошибка отправки - обратно в Editing с сообщением"""
        session = st.begin_submit(st.FormSession(state=asha_request))

        session = st.submit_failed(session, 'Сеть недоступна')

        assert session.phase == st.EDITING
        assert session.error == 'Сеть недоступна'
        assert session.snapshot is None
        assert session.error_kind == st.NETWORK_FAILED

    def test_validation_failure_kind(self, asha_request):
        """Ошибка проверки отличается от сетевой видом, а не текстом"""
        session = st.begin_submit(st.FormSession(state=asha_request))

        session = st.fail_validation(session, 'Сеть недоступна')

        assert session.phase == st.EDITING
        assert session.error_kind == st.VALIDATION_FAILED

    def test_begin_submit_clears_previous_error(self, asha_request):
        """Повторная попытка сбрасывает прошлую ошибку"""
        session = st.FormSession(state=asha_request, error='Старая ошибка', error_kind=st.NETWORK_FAILED)

        session = st.begin_submit(session)

        assert session.error is None
        assert session.error_kind is None

    def test_submitted_ignores_edits(self, asha_request):
        """После отправки изменения не принимаются"""
        session = st.submit_succeeded(st.begin_submit(st.FormSession(state=asha_request)))

        same = st.update_state(session, st.add_item(asha_request))

        assert same is session
        assert st.begin_submit(session) is session

    def test_close_resets_everything(self, asha_request):
        """Close - новая пустая заявка в режиме Editing"""
        session = st.submit_succeeded(st.begin_submit(st.FormSession(state=asha_request)))

        session = st.close(session)

        assert session.phase == st.EDITING
        assert session.state == ItemIssueRequest()
        assert session.snapshot is None

    def test_failed_session_dict_round_trip(self, lab_request):
        session = st.submit_failed(st.begin_submit(st.FormSession(state=lab_request)), 'Offline')

        restored = st.FormSession.from_dict(LabIssueRequest, session.to_dict())

        assert restored == session
        assert restored.error_kind == st.NETWORK_FAILED

    def test_session_dict_round_trip(self, lab_request):
        """FormSession сохраняется в сессию и восстанавливается"""
        session = st.submit_succeeded(st.begin_submit(st.FormSession(state=lab_request)))

        restored = st.FormSession.from_dict(LabIssueRequest, session.to_dict())

        assert restored == session

    def test_missing_session_data(self):
        """Пустая сессия - новая заявка"""
        session = st.FormSession.from_dict(LabIssueRequest, None)

        assert session.state == LabIssueRequest()
        assert session.phase == st.EDITING
