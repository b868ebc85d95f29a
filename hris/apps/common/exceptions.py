"""
Преобразование ошибок сервисного слоя в ответы API
"""
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework.exceptions import ValidationError


def as_api_error(exc: DjangoValidationError) -> ValidationError:
    """Ошибка валидации сервиса -> 400 с сообщениями по полям"""
    if hasattr(exc, 'error_dict'):
        return ValidationError(exc.message_dict)
    return ValidationError({'non_field_errors': exc.messages})
