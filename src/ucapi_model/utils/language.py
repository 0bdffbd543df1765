from __future__ import annotations

from typing import Mapping, Optional

DEFAULT_LANGUAGE = "en"


def text_from_language_map(lang_map: Optional[Mapping[str, str]], lang: str) -> Optional[str]:
    """Retrieve a language text from a language map.

    Language keys are ISO 639-1 codes with an optional country suffix
    separated by ``_`` (e.g. ``en``, ``de_CH``). The first match wins:

    1. the exact ``lang`` key.
    2. the base language of ``lang`` (``de_AT`` -> ``de``). A key without
       country suffix has ``en`` as base language.
    3. any other country variant of the base language (``de_DE``); which one
       is returned is not defined if there are several.
    4. the english text ``en``.
    5. any text in the map.

    Args:
        lang_map: the language map with (language_key, language_text) entries.
        lang: the requested language key.

    Returns:
        Optional[str]: the found language text, ``None`` if the map is
        missing or empty.

    Example:
        >>> names = {"en": "movie", "de": "Film", "en_UK": "film"}
        >>> text_from_language_map(names, "de_CH")
        'Film'
        >>> text_from_language_map(names, "it")
        'movie'
    """
    if not lang_map:
        return None

    text = lang_map.get(lang)
    if text is not None:
        return text

    base_lang, sep, _ = lang.partition("_")
    if not sep:
        base_lang = DEFAULT_LANGUAGE

    text = lang_map.get(base_lang)
    if text is not None:
        return text

    prefix = base_lang + "_"
    for key, value in lang_map.items():
        if key.startswith(prefix):
            return value

    text = lang_map.get(DEFAULT_LANGUAGE)
    if text is not None:
        return text

    return next(iter(lang_map.values()))
