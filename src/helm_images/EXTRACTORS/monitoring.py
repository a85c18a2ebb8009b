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
Extractors for the custom resources of the prometheus, grafana and thanos operators.

These resources describe workloads the operators create later, so their images
live in operator-specific places: a top-level `spec.image`, an embedded
deployment template, or several independent workload overrides.
"""
from typing import Any, Dict, List

from ..config import ExtractionConfig
from ..errors import MissingFieldError, UnsupportedAPIVersionError
from ..MODELS import monitoring
from .base import ImageExtractor
from .containers import flatten_pod_specs
from . import kinds

GRAFANA_LEGACY_API_VERSION = "integreatly.org/v1alpha1"


def _required_image(manifest, kind: str) -> str:
    if manifest.spec.image is None:
        raise MissingFieldError("spec.image", kind=kind)
    return manifest.spec.image


class AlertmanagerExtractor(ImageExtractor):
    kind = kinds.KIND_ALERTMANAGER
    model = monitoring.Alertmanager

    def images(self, manifest: monitoring.Alertmanager, config: ExtractionConfig) -> List[str]:
        return [_required_image(manifest, self.kind)]


class PrometheusExtractor(ImageExtractor):
    """
    Extra containers first, then the image of the Prometheus server itself.
    """
    kind = kinds.KIND_PROMETHEUS
    model = monitoring.Prometheus

    def images(self, manifest: monitoring.Prometheus, config: ExtractionConfig) -> List[str]:
        return flatten_pod_specs(manifest.spec) + [_required_image(manifest, self.kind)]


class ThanosRulerExtractor(ImageExtractor):
    kind = kinds.KIND_THANOS_RULER
    model = monitoring.ThanosRuler

    def images(self, manifest: monitoring.ThanosRuler, config: ExtractionConfig) -> List[str]:
        return flatten_pod_specs(manifest.spec) + [_required_image(manifest, self.kind)]


class GrafanaExtractor(ImageExtractor):
    """
    Only grafana.integreatly.org/v1beta1 is understood; the v1alpha1 resource
    has a different layout and is refused outright.
    """
    kind = kinds.KIND_GRAFANA
    model = monitoring.Grafana

    def check(self, data: Dict[str, Any]) -> None:
        api_version = data.get("apiVersion")
        if api_version == GRAFANA_LEGACY_API_VERSION:
            raise UnsupportedAPIVersionError(api_version, self.kind)

    def images(self, manifest: monitoring.Grafana, config: ExtractionConfig) -> List[str]:
        return flatten_pod_specs(manifest.spec.deployment.spec.template.spec)


class ThanosExtractor(ImageExtractor):
    """
    A Thanos resource overrides four independent workloads. Components that
    are not overridden contribute no images.
    """
    kind = kinds.KIND_THANOS
    model = monitoring.Thanos

    def images(self, manifest: monitoring.Thanos, config: ExtractionConfig) -> List[str]:
        spec = manifest.spec
        return flatten_pod_specs(
            spec.rule.statefulset_overrides.spec.template.spec,
            spec.query.deployment_overrides.spec.template.spec,
            spec.store_gateway.deployment_overrides.spec.template.spec,
            spec.query_frontend.deployment_overrides.spec.template.spec,
        )


class ThanosReceiverExtractor(ImageExtractor):
    kind = kinds.KIND_THANOS_RECEIVER
    model = monitoring.Receiver

    def images(self, manifest: monitoring.Receiver, config: ExtractionConfig) -> List[str]:
        return flatten_pod_specs(*[
            group.stateful_set_overrides.spec.template.spec
            for group in manifest.spec.receiver_groups
        ])
