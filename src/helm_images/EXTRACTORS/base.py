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
Base class of the per-kind image extractors.
"""
from typing import Any, Dict, List, Optional, Type
from pydantic import ValidationError

from ..config import ExtractionConfig
from ..errors import DecodeError
from ..MODELS.image_record import ImageRecord
from ..MODELS.kubernetes import Manifest
from ..PARSERS.kind_resolver import load_mapping
from ..UTILS.logging import get_logger

logger = get_logger(__name__)


class ImageExtractor:
    """
    Decodes a manifest of one kind into its typed model and walks it for images.

    Subclasses set `kind` and `model` and implement `images`. Extractors keep
    no state between calls, so one instance can serve any number of callers.
    """
    kind: str = ""
    model: Type[Manifest] = Manifest

    def check(self, data: Dict[str, Any]) -> None:
        """
        Hook for validation that must run on the loosely parsed document
        before the typed decode. Does nothing by default.
        """

    def decode(self, content: str) -> Manifest:
        """
        Decodes raw manifest text into this extractor's model.

        :param content: Raw manifest text.
        :return: The typed manifest.
        :raises DecodeError: If the text is not YAML or does not fit the model.
        """
        data = load_mapping(content)
        self.check(data)
        try:
            return self.model.model_validate(data)
        except ValidationError as e:
            raise DecodeError(
                f"failed to decode {self.kind} manifest: {e}", kind=self.kind
            ) from e

    def images(self, manifest: Manifest, config: ExtractionConfig) -> List[str]:
        raise NotImplementedError

    def extract(self, content: str, config: Optional[ExtractionConfig] = None) -> ImageRecord:
        """
        Extracts every image of a manifest.

        :param content: Raw manifest text of a resource of this extractor's kind.
        :param config: Extraction options, defaults apply when omitted.
        :return: A record holding the kind, the resource name and its images.
        """
        config = config or ExtractionConfig()
        manifest = self.decode(content)
        images = self.images(manifest, config)
        logger.debug(f"Found {len(images)} images in {self.kind} '{manifest.name}'")
        return ImageRecord(kind=self.kind, name=manifest.name, images=images)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r})"
