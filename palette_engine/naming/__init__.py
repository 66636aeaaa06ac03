from .database import ColorNameEntry, NameDatabase, default_databases, load_corpus_file
from .lookup import ColorName, get_color_name

__all__ = [
    "ColorName",
    "ColorNameEntry",
    "NameDatabase",
    "default_databases",
    "get_color_name",
    "load_corpus_file",
]
