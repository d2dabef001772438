"""
Format-aware extraction of checkable text.

The format is chosen once per file from its extension:
- Markdown: prose only, code excluded
- Source code: comments and string literals (C-style or Python-style)
- Plain text: everything
"""

from pathlib import Path
from typing import List, Union

from ..models import FileFormat, FileType, TextSpan
from . import markdown, plaintext, source_code

__all__ = ['parse_file', 'markdown', 'plaintext', 'source_code']


def parse_file(path: Union[str, Path], content: str) -> List[TextSpan]:
    """Extract the checkable word spans of ``content`` according to the type of ``path``."""
    file_type = FileType.from_path(path)

    if file_type.format == FileFormat.MARKDOWN:
        return markdown.parse(content)
    if file_type.format == FileFormat.SOURCE_CODE:
        return source_code.parse(content, file_type.family)
    return plaintext.parse(content)
