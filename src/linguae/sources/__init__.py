"""
Translation sources for Linguae.

Each source returns the complete key/value map of a locale from local JSON
files, a JSON endpoint or a translation management service.
"""

from .base import HttpTranslationSource, LinguaeSource, flatten_translations
from .glotpress import GlotPressSource
from .json_file import HttpJsonSource, JsonFileSource, json_source
from .lokalise import LokaliseSource
from .poeditor import POEditorSource
from .tolgee import TolgeeSource
from .transifex import TransifexSource
from .weblate import WeblateSource
from .zanata import ZanataSource

__all__ = [
    "GlotPressSource",
    "HttpJsonSource",
    "HttpTranslationSource",
    "JsonFileSource",
    "LinguaeSource",
    "LokaliseSource",
    "POEditorSource",
    "TolgeeSource",
    "TransifexSource",
    "WeblateSource",
    "ZanataSource",
    "flatten_translations",
    "json_source",
]
