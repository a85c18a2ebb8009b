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
The closed set of image extractors, keyed by kind.

Supporting a new kind means adding its tag to `kinds.SUPPORTED_KINDS` and an
extractor to `EXTRACTORS` below.
"""
from typing import Dict, List, Optional

from ..config import ExtractionConfig
from ..errors import UnsupportedKindError
from ..MODELS.image_record import ImageRecord
from ..PARSERS.kind_resolver import KindResolver
from .base import ImageExtractor
from .kinds import SUPPORTED_KINDS
from .monitoring import (
    AlertmanagerExtractor,
    GrafanaExtractor,
    PrometheusExtractor,
    ThanosExtractor,
    ThanosReceiverExtractor,
    ThanosRulerExtractor,
)
from .workloads import (
    ConfigMapExtractor,
    CronJobExtractor,
    DaemonSetExtractor,
    DeploymentExtractor,
    JobExtractor,
    PodExtractor,
    ReplicaSetExtractor,
    StatefulSetExtractor,
)

EXTRACTORS: Dict[str, ImageExtractor] = {
    extractor.kind: extractor
    for extractor in (
        DeploymentExtractor(),
        StatefulSetExtractor(),
        DaemonSetExtractor(),
        CronJobExtractor(),
        JobExtractor(),
        ReplicaSetExtractor(),
        PodExtractor(),
        AlertmanagerExtractor(),
        PrometheusExtractor(),
        ThanosRulerExtractor(),
        GrafanaExtractor(),
        ThanosExtractor(),
        ThanosReceiverExtractor(),
        ConfigMapExtractor(),
    )
}


def supported_kinds() -> List[str]:
    """Returns the supported kind tags in their fixed order."""
    return list(SUPPORTED_KINDS)


def is_supported(kind: str) -> bool:
    return kind in EXTRACTORS


def get_extractor(kind: str) -> ImageExtractor:
    """
    Looks up the extractor of a kind.

    :param kind: Kind tag, compared exactly.
    :return: The extractor registered for it.
    :raises UnsupportedKindError: If no extractor handles the kind.
    """
    try:
        return EXTRACTORS[kind]
    except KeyError:
        raise UnsupportedKindError(kind) from None


def extract(
    content: str,
    kind: Optional[str] = None,
    config: Optional[ExtractionConfig] = None,
) -> ImageRecord:
    """
    Extracts the images of a single manifest.

    When `kind` is not given it is resolved from the manifest first.

    :param content: Raw manifest text.
    :param kind: Kind of the manifest, if already known.
    :param config: Extraction options.
    :return: The image record of the manifest.
    :raises UnsupportedKindError: If the kind has no extractor.
    """
    if kind is None:
        kind = KindResolver.resolve(content)
    return get_extractor(kind).extract(content, config)
