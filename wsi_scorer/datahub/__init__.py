from .annotated_instance import AnnotatedInstance, is_unclear
from .helpers import TableFormatError
from .io import read_table, write_table
from .loader import load_frame, load_instances
from .request import ScoreRequest

__all__ = [
    "AnnotatedInstance",
    "ScoreRequest",
    "TableFormatError",
    "is_unclear",
    "load_frame",
    "load_instances",
    "read_table",
    "write_table",
]
