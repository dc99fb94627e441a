from .library import LibraryKeywords
from .listview import ListViewKeywords, labels_of, values_of
from .selection import Resolution, SelectionKeywords

__all__ = [
    "LibraryKeywords",
    "ListViewKeywords",
    "Resolution",
    "SelectionKeywords",
    "labels_of",
    "values_of",
]
