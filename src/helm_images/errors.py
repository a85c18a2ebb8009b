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
Errors raised while resolving and extracting images from manifests.
"""
from typing import Optional


class ImageExtractionError(Exception):
    """Base class for every error raised by helm-images."""


class DecodeError(ImageExtractionError):
    """
    The manifest is not valid YAML, or does not match the shape expected
    by the extractor that was asked to decode it.
    """

    def __init__(self, message: str, kind: Optional[str] = None):
        super().__init__(message)
        self.kind = kind


class TypeMismatchError(ImageExtractionError):
    """A field expected to be a string holds some other type."""

    def __init__(self, field: str, value: object):
        super().__init__(
            f"failed to get {field} from the manifest, '{field}' is not type string "
            f"(got {type(value).__name__})"
        )
        self.field = field
        self.value = value


class MissingFieldError(ImageExtractionError):
    """A field the extraction depends on is absent from the manifest."""

    def __init__(self, field: str, kind: Optional[str] = None):
        if kind:
            message = f"{kind} manifest has no '{field}' field"
        else:
            message = f"manifest has no '{field}' field"
        super().__init__(message)
        self.field = field
        self.kind = kind


class UnsupportedAPIVersionError(ImageExtractionError):
    """The manifest uses an API version the extractor refuses to handle."""

    def __init__(self, api_version: str, kind: str):
        super().__init__(
            f"plugin supports the latest api version of {kind} and '{api_version}' is not supported"
        )
        self.api_version = api_version
        self.kind = kind


class UnsupportedKindError(ImageExtractionError, KeyError):
    """No extractor is registered for the requested kind."""

    def __init__(self, kind: str):
        super().__init__(f"no image extractor registered for kind '{kind}'")
        self.kind = kind

    def __str__(self) -> str:
        return self.args[0]
