import pytest
import requests
from unittest.mock import Mock

from issueform1.state import ItemIssueRequest, CatalogItem
from issueform2.state import LabIssueRequest, DatedItem

ITEM_SCRIPT_URL = 'https://script.example.test/item-issue/exec'
LAB_SCRIPT_URL = 'https://script.example.test/lab-issue/exec'
CATALOG_URL = 'https://sheets.example.test/catalog.csv'

CATALOG_CSV = (
    "Item Name,Available\n"
    "Soldering Iron,5\n"
    "  Digital Multimeter  ,3\n"
    ",2\n"
    "Breadboard,10\n"
)


# Фикстура с настройками: адреса скриптов и таблицы указывают на тестовые хосты
@pytest.fixture(autouse=True)
def issue_forms_settings(settings):
    settings.ITEM_ISSUE_SCRIPT_URL = ITEM_SCRIPT_URL
    settings.LAB_ISSUE_SCRIPT_URL = LAB_SCRIPT_URL
    settings.ITEM_CATALOG_CSV_URL = CATALOG_URL
    settings.ISSUE_FORMS_HTTP_TIMEOUT = None
    return settings


@pytest.fixture(autouse=True)
def catalog_get(mocker):
    """
    Подменяет загрузку таблицы каталога.
    По умолчанию отдает CATALOG_CSV, тест может переопределить ответ.
    """
    response = Mock()
    response.text = CATALOG_CSV
    response.raise_for_status.return_value = None
    return mocker.patch('main.catalog.requests.get', return_value=response)


@pytest.fixture
def script_post(mocker):
    """Подменяет POST в Google Apps Script (ответ никогда не читается)."""
    return mocker.patch('main.submitter.requests.post', return_value=Mock(status_code=200))


@pytest.fixture
def script_post_offline(mocker):
    """POST падает с сетевой ошибкой."""
    return mocker.patch(
        'main.submitter.requests.post',
        side_effect=requests.exceptions.ConnectionError('Network is unreachable'),
    )


@pytest.fixture
def asha_request():
    """Заполненная заявка формы 1 (студентка, одна позиция)."""
    return ItemIssueRequest(
        user_type='student',
        name='Asha Rao',
        id_number='2021UCS001',
        department='Computer Science and Engineering',
        email='asha@lnmiit.ac.in',
        mobile='9876543210',
        items=(CatalogItem(name='Soldering Iron', quantity='1'),),
    )


@pytest.fixture
def lab_request():
    """Заполненная заявка формы 2 (преподаватель, две позиции)."""
    return LabIssueRequest(
        user_type='faculty',
        name='R. Sharma',
        id_number='EMP042',
        department='Physics',
        email='rsharma@lnmiit.ac.in',
        mobile='9123456780',
        items=(
            DatedItem(name='Oscilloscope', quantity='1',
                      issue_date='2026-10-19', return_date='2026-10-26', remark='Lab 3'),
            DatedItem(name='Probe Set', quantity='2',
                      issue_date='2026-10-19', return_date='2026-10-21'),
        ),
    )


@pytest.fixture
def item_issue_post_data():
    """POST-данные формы 1 в том виде, в каком их отправляет браузер."""
    return {
        'user_type': 'student',
        'name': 'Asha Rao',
        'id_number': '2021UCS001',
        'department': 'Computer Science and Engineering',
        'instructor_name': '',
        'mobile': '9876543210',
        'email': 'asha@lnmiit.ac.in',
        'issue_date': '',
        'return_date': '',
        'items-0-name': 'Soldering Iron',
        'items-0-quantity': '1',
    }


@pytest.fixture
def lab_issue_post_data():
    """POST-данные формы 2 с одной позицией."""
    return {
        'user_type': 'student',
        'name': 'Asha Rao',
        'id_number': '2021UCS001',
        'department': 'Computer Science and Engineering',
        'mobile': '9876543210',
        'email': 'asha@lnmiit.ac.in',
        'items-0-name': 'Soldering Iron',
        'items-0-quantity': '1',
        'items-0-issue_date': '2026-10-19',
        'items-0-return_date': '2026-10-26',
        'items-0-remark': '',
    }
