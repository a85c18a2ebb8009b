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
Runs image extraction over every document of a rendered manifest stream.
"""
from typing import Iterable, List, Optional

from ..config import ExtractionConfig
from ..errors import ImageExtractionError
from ..EXTRACTORS.registry import get_extractor, is_supported
from ..MODELS.image_record import ImageRecord
from ..PARSERS.document_splitter import source_of, split_documents
from ..PARSERS.kind_resolver import KindResolver
from ..UTILS.logging import get_logger

logger = get_logger(__name__)


class ImageCollector:
    """
    Resolves the kind of each document, skips the ones that are empty,
    unsupported or filtered out, and extracts images from the rest.

    Records are returned per document and in stream order; no deduplication
    is done here.
    """
    def __init__(self, config: Optional[ExtractionConfig] = None):
        """
        Initializes the collector.

        :param config: Options for the run, defaults apply when omitted.
        """
        self.config = config or ExtractionConfig()

    def collect(self, content: str) -> List[ImageRecord]:
        """
        Collects images from a multi-document YAML stream.

        :param content: Rendered manifests, separated by `---`.
        :return: One record per extracted document.
        """
        return self.collect_documents(split_documents(content))

    def collect_documents(self, documents: Iterable[str]) -> List[ImageRecord]:
        """
        Collects images from documents that were already split.

        :param documents: Single-document manifest texts.
        :return: One record per extracted document.
        """
        records = []
        for index, document in enumerate(documents):
            label = source_of(document) or f"document {index}"
            try:
                record = self._collect_one(document, label)
            except ImageExtractionError as e:
                if not self.config.skip_errors:
                    raise
                logger.warning(f"Skipping {label}: {e}")
                continue
            if record is not None:
                records.append(record)

        logger.info(f"Extracted images from {len(records)} manifests")
        return records

    def _collect_one(self, document: str, label: str) -> Optional[ImageRecord]:
        kind = KindResolver.resolve(document)
        if not kind:
            logger.debug(f"Skipping {label}: empty document")
            return None
        if not is_supported(kind):
            logger.debug(f"Skipping {label}: kind '{kind}' is not supported")
            return None
        if kind not in self.config.kinds:
            logger.debug(f"Skipping {label}: kind '{kind}' is filtered out")
            return None

        return get_extractor(kind).extract(document, self.config)
