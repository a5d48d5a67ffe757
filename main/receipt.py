"""
Данные для печатной квитанции: подписи и подписи полей.
"""
from .state import STUDENT

CATEGORY_TITLES = {
    'student': 'Student',
    'faculty': 'Faculty',
    'staff': 'Staff',
}


def identifier_label(user_type):
    return 'Roll No' if user_type == STUDENT else 'Employee No'


def signature_blocks(snapshot):
    """
    Блоки подписей внизу квитанции.
    Студент: студент / преподаватель / HOD.
    Преподаватель и сотрудник: широкий блок заявителя (на две колонки) и HOD.
    """
    if snapshot.user_type == STUDENT:
        return [
            {'title': "Student's Signature", 'subtitle': snapshot.name, 'span': 1},
            {'title': "Instructor's Signature",
             'subtitle': getattr(snapshot, 'instructor_name', ''), 'span': 1},
            {'title': "HOD's Signature", 'subtitle': '', 'span': 1},
        ]
    title = CATEGORY_TITLES.get(snapshot.user_type, 'Faculty')
    return [
        {'title': f"{title}'s Signature", 'subtitle': snapshot.name, 'span': 2},
        {'title': "HOD's Signature", 'subtitle': '', 'span': 1},
    ]
