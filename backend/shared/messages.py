"""
User-facing message catalog.

Error classes carry a stable code; the text shown to a person is looked up
here by locale. A ``code.field`` key overrides the plain ``code`` key when
the same error kind needs different wording for different inputs.
"""

from typing import Any, Optional

from .config import get_settings


DEFAULT_LOCALE = "en"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "ALREADY_REGISTERED": "A user with this email already exists",
        "REGISTRATION_NOT_CONFIRMED": "Email address has not been confirmed",
        "INVALID_CODE": "The code is incorrect",
        "EXPIRED_CODE": "The code has expired. Request a new code",
        "COOLDOWN_ACTIVE": "Request a new code in {seconds_left} seconds",
        "INVALID_CREDENTIALS": "Incorrect password",
        "INVALID_CREDENTIALS.old_password": "Current password is incorrect",
        "MISMATCH": "Passwords do not match",
        "NO_OP_CHANGE": "New password must differ from the current one",
        "UNAUTHORIZED": "User is not authorized",
        "NOT_FOUND": "No user is registered with this email",
        "NOT_FOUND.id": "User not found",
        "INVALID_ACTIVATION_LINK": "Invalid activation link",
    },
    "ru": {
        "ALREADY_REGISTERED": "Пользователь с таким email уже существует",
        "REGISTRATION_NOT_CONFIRMED": "Учетная запись не подтверждена",
        "INVALID_CODE": "Код введен неверно!",
        "EXPIRED_CODE": "Срок действия кода истек. Повторите запрос кода!",
        "COOLDOWN_ACTIVE": "Повторите отправку кода через: {seconds_left}",
        "INVALID_CREDENTIALS": "Пароль введен неверно",
        "INVALID_CREDENTIALS.old_password": "Старый пароль введен неверно",
        "MISMATCH": "Пароли не совпадают",
        "NO_OP_CHANGE": "Новый пароль не должен совпадать со старым",
        "UNAUTHORIZED": "Пользователь не авторизован",
        "NOT_FOUND": "Пользователь с таким email не зарегистрирован",
        "NOT_FOUND.id": "Пользователь не найден",
        "INVALID_ACTIVATION_LINK": "Некорректная ссылка активации",
    },
}


def render_message(
    code: str,
    field: Optional[str] = None,
    locale: Optional[str] = None,
    **params: Any,
) -> str:
    """
    Render the message for an error code.

    Falls back to the default locale when the requested one has no entry,
    and to the code itself when no locale knows it.

    Args:
        code: Error code (e.g. "COOLDOWN_ACTIVE")
        field: Offending input field, used for field-specific wording
        locale: Catalog locale; defaults to Settings.message_locale
        **params: Values substituted into the template

    Returns:
        The formatted message
    """
    locale = locale or get_settings().message_locale
    keys = [f"{code}.{field}", code] if field else [code]

    for catalog in (MESSAGES.get(locale, {}), MESSAGES[DEFAULT_LOCALE]):
        for key in keys:
            template = catalog.get(key)
            if template is not None:
                return template.format(**params)

    return code
