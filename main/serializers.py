from rest_framework import serializers


class IssueRequestSerializer(serializers.Serializer):
    """
    Базовый сериализатор заявки. Ключи JSON совпадают с тем, что ожидает
    Google Apps Script (camelCase), атрибуты состояния - snake_case.
    Наследники задают state_class и поле items.
    """
    state_class = None

    userType = serializers.ChoiceField(source='user_type', choices=[])
    name = serializers.CharField(allow_blank=True)
    id = serializers.CharField(source='id_number', allow_blank=True)
    department = serializers.CharField(allow_blank=True)
    email = serializers.CharField(allow_blank=True, trim_whitespace=False)
    mobile = serializers.CharField(allow_blank=True, trim_whitespace=False)

    def to_state(self):
        """Собирает объект состояния из провалидированных данных."""
        data = dict(self.validated_data)
        data['items'] = [dict(row) for row in data.get('items', [])]
        return self.state_class.from_dict(data)


def build_payload(serializer_class, state):
    return serializer_class(state.for_submission()).data
