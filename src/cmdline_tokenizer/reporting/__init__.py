from .base import (
    Reporter,
    get_reporter,
    set_reporter,
    section,
)
from .base import (
    set_verbosity,
    get_verbosity,
)
from .plain import PlainReporter
from .jsonl import JsonLinesReporter
from .silent import SilentReporter
from .yaml_reporter import YamlReporter
from .rich_reporter import RichReporter

__all__ = [
    "Reporter",
    "get_reporter",
    "set_reporter",
    "section",
    "set_verbosity",
    "get_verbosity",
    "PlainReporter",
    "JsonLinesReporter",
    "SilentReporter",
    "YamlReporter",
    "RichReporter",
]
