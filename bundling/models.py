"""
Data models shared by the bundler and the request pipeline.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from .errors import BundleInputError


class SourceFile(BaseModel):
    """A named text buffer supplied by the caller. Never modified by the bundler."""
    model_config = ConfigDict(frozen=True)

    name: str
    content: str


class BundleRequest(BaseModel):
    """A compile-and-run request as received from a client."""
    language: str = ""
    version: Optional[str] = None
    stdin: Optional[str] = None
    files: List[SourceFile] = []


def coerce_files(files):
    """
    Validate caller input into a list of SourceFile.

    Accepts SourceFile instances or mappings with 'name' and 'content' keys.

    Raises:
        BundleInputError: If files is not a sequence of name/content records
    """
    if files is None or isinstance(files, (str, bytes, dict)):
        raise BundleInputError(
            f"Expected a list of files, got {type(files).__name__}",
            suggestion='Pass files as [{"name": "main.cpp", "content": "..."}]'
        )
    try:
        items = list(files)
    except TypeError:
        raise BundleInputError(
            f"Expected a list of files, got {type(files).__name__}",
            suggestion='Pass files as [{"name": "main.cpp", "content": "..."}]'
        )

    result = []
    for position, item in enumerate(items):
        if isinstance(item, SourceFile):
            result.append(item)
            continue
        try:
            result.append(SourceFile.model_validate(item))
        except ValidationError as e:
            raise BundleInputError(
                f"File #{position} is not a name/content record: {e.errors()[0]['msg']}",
                suggestion="Every file needs a string 'name' and a string 'content'"
            )
    return result
