"""
Splits rendered manifest streams (e.g. `helm template` output) into single documents.

Document boundaries come from the YAML parser, and each document is cut out
of the stream as raw text so that it can be decoded again on its own.
"""
import re
import yaml
from typing import List, Optional

from ..errors import DecodeError

SOURCE_COMMENT = re.compile(r'^#\s*Source:\s*(\S+)')


def _is_blank(document: str) -> bool:
    for line in document.splitlines():
        stripped = line.strip()
        if stripped and not stripped.startswith('#'):
            return False
    return True


def split_documents(content: str) -> List[str]:
    """
    Splits a YAML stream into its documents, dropping documents that hold
    nothing but whitespace and comments.

    A document opened with an explicit `---` starts right after the marker,
    so content on the marker line is kept and directives such as `%YAML`
    are left out. An implicitly started document takes everything after the
    previous one, which keeps a leading `# Source:` comment with it.

    Args:
        content (str): The rendered stream.

    Returns:
        List[str]: The documents in stream order.

    Raises:
        DecodeError: If the stream is not valid YAML.
    """
    documents = []
    previous_end = 0
    start = 0

    try:
        for event in yaml.parse(content, Loader=yaml.SafeLoader):
            if isinstance(event, yaml.DocumentStartEvent):
                start = event.end_mark.index if event.explicit else previous_end
            elif isinstance(event, yaml.DocumentEndEvent):
                end = event.start_mark.index
                documents.append(content[start:end].lstrip('\n').rstrip())
                previous_end = event.end_mark.index
    except yaml.YAMLError as e:
        raise DecodeError(f"failed to split manifest stream: {e}") from e

    return [doc for doc in documents if not _is_blank(doc)]


def source_of(document: str) -> Optional[str]:
    """
    Returns the template path of a document rendered by helm, taken from its
    `# Source:` comment, or None.
    """
    for line in document.splitlines():
        match = SOURCE_COMMENT.match(line.strip())
        if match:
            return match.group(1)
    return None
