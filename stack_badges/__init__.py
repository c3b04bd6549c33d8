from .languages import DEFAULT_LANGUAGE_KEY, LANGUAGES, Language, get_language

__all__ = ["DEFAULT_LANGUAGE_KEY", "LANGUAGES", "Language", "get_language"]
