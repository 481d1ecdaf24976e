from mediastyle.stylesheet.document import load_path, loads, parse_document
from mediastyle.stylesheet.merge import deep_merge
from mediastyle.stylesheet.resolver import Stylesheet, normalize_layers, resolve, select_styles

__all__ = [
    "Stylesheet",
    "deep_merge",
    "load_path",
    "loads",
    "normalize_layers",
    "parse_document",
    "resolve",
    "select_styles",
]
