import os
from typing import Annotated, NewType

from annotated_types import Predicate


def _is_suffix(name: str) -> bool:
    return name.startswith(".") and os.path.sep not in name


TSuffix = Annotated[NewType("TSuffix", str), Predicate(_is_suffix)]
"""A file-name suffix including its leading dot, e.g. '.hs'."""
