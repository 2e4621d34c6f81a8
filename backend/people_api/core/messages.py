"""Messages: centralized locale-specific text for API responses.

Invariants:
    - All strings are pure data (no IO)
    - Every Locale has an entry for every PersonField and every generic message
    - pt-BR strings are the published API contract and must not change wording

Design Decisions:
    - Dict-per-locale tables over gettext: two locales, a dozen strings
    - Unknown locale strings fall back to pt-BR instead of raising at request time
"""

from people_api.core.domain_types import Locale, PersonField


_INVALID_FIELD: dict[Locale, dict[PersonField, str]] = {
    Locale.PT_BR: {
        PersonField.ID: "CPF inválido",
        PersonField.NAME: "Nome inválido",
        PersonField.PHONE: "Telefone inválido",
        PersonField.BIRTH_DATE: "Data de nascimento inválida",
    },
    Locale.EN: {
        PersonField.ID: "Invalid CPF",
        PersonField.NAME: "Invalid name",
        PersonField.PHONE: "Invalid phone",
        PersonField.BIRTH_DATE: "Invalid birth date",
    },
}

_ALREADY_EXISTS: dict[Locale, str] = {
    Locale.PT_BR: "CPF já cadastrado",
    Locale.EN: "CPF already registered",
}

_MALFORMED_REQUEST: dict[Locale, str] = {
    Locale.PT_BR: "Requisição inválida",
    Locale.EN: "Invalid request",
}

_DATABASE_UNAVAILABLE: dict[Locale, str] = {
    Locale.PT_BR: "Banco de dados indisponível",
    Locale.EN: "Database unavailable",
}

_INTERNAL_ERROR: dict[Locale, str] = {
    Locale.PT_BR: "Erro interno",
    Locale.EN: "Internal error",
}


def resolve_locale(value: str | None) -> Locale:
    """Map a settings string to a Locale, defaulting to pt-BR."""
    try:
        return Locale(value)
    except ValueError:
        return Locale.PT_BR


def invalid_field_message(locale: Locale, field: PersonField) -> str:
    return _INVALID_FIELD[locale][field]


def already_exists_message(locale: Locale) -> str:
    return _ALREADY_EXISTS[locale]


def malformed_request_message(locale: Locale) -> str:
    return _MALFORMED_REQUEST[locale]


def database_unavailable_message(locale: Locale) -> str:
    return _DATABASE_UNAVAILABLE[locale]


def internal_error_message(locale: Locale) -> str:
    return _INTERNAL_ERROR[locale]
