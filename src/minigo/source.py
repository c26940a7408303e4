"""Loading source files before they reach the lexer."""
from __future__ import annotations

from pathlib import Path
from typing import Union

from .errors import EmptySourceError, SourceNotFoundError


#the lexer only ever sees text that has at least one non-blank character
def read_source(path: Union[str, Path]) -> str:
    source_path = Path(path)
    if not source_path.is_file():
        raise SourceNotFoundError(str(source_path))
    source = source_path.read_text(encoding="utf-8")
    if not source.strip():
        raise EmptySourceError(str(source_path))
    return source
