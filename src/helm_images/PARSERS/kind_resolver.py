# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Loose first pass over a manifest: find out which kind of resource it is.
"""
import yaml
from typing import Any, Dict

from ..errors import DecodeError, MissingFieldError, TypeMismatchError

KIND_FIELD = "kind"


def load_mapping(content: str) -> Dict[str, Any]:
    """
    Loads a single YAML document as a plain mapping.

    :param content: Raw manifest text.
    :return: The top-level mapping, empty for an empty document.
    :raises DecodeError: If the text is not YAML or not a mapping.
    """
    # blank text with tabs in it is still an empty document
    if not content.strip():
        return {}

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise DecodeError(f"failed to decode manifest: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DecodeError(
            f"failed to decode manifest: expected a mapping at the top level, got {type(data).__name__}"
        )
    return data


class KindResolver:
    """
    Reads the `kind` of a manifest without decoding the rest of it.
    """
    @staticmethod
    def resolve(content: str) -> str:
        """
        Resolves the kind of a manifest.

        Args:
            content (str): Raw manifest text.

        Returns:
            str: The kind exactly as written, or "" for an empty document.
        """
        data = load_mapping(content)
        if not data:
            return ""

        if KIND_FIELD not in data:
            raise MissingFieldError(KIND_FIELD)

        kind = data[KIND_FIELD]
        if not isinstance(kind, str):
            raise TypeMismatchError(KIND_FIELD, kind)

        return kind


def resolve_kind(content: str) -> str:
    return KindResolver.resolve(content)
