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
Extractors for the built-in Kubernetes kinds: workload controllers, Pods and ConfigMaps.
"""
from typing import List

from ..config import ExtractionConfig
from ..MODELS import kubernetes as k8s
from .base import ImageExtractor
from .containers import env_images, flatten_pod_specs
from . import kinds


class PodTemplateExtractor(ImageExtractor):
    """
    Controllers whose pods come from `spec.template`.
    """
    def images(self, manifest, config: ExtractionConfig) -> List[str]:
        return flatten_pod_specs(manifest.spec.template.spec)


class DeploymentExtractor(PodTemplateExtractor):
    """
    Deployments also publish images through environment variables of their
    primary containers (e.g. a sidecar image handed to an operator).
    """
    kind = kinds.KIND_DEPLOYMENT
    model = k8s.Deployment

    def images(self, manifest: k8s.Deployment, config: ExtractionConfig) -> List[str]:
        pod = manifest.spec.template.spec
        return flatten_pod_specs(pod) + env_images(pod.containers, config.image_keyword)


class StatefulSetExtractor(PodTemplateExtractor):
    kind = kinds.KIND_STATEFULSET
    model = k8s.StatefulSet


class DaemonSetExtractor(PodTemplateExtractor):
    kind = kinds.KIND_DAEMONSET
    model = k8s.DaemonSet


class ReplicaSetExtractor(PodTemplateExtractor):
    kind = kinds.KIND_REPLICASET
    model = k8s.ReplicaSet


class JobExtractor(PodTemplateExtractor):
    kind = kinds.KIND_JOB
    model = k8s.Job


class CronJobExtractor(ImageExtractor):
    kind = kinds.KIND_CRONJOB
    model = k8s.CronJob

    def images(self, manifest: k8s.CronJob, config: ExtractionConfig) -> List[str]:
        return flatten_pod_specs(manifest.spec.job_template.spec.template.spec)


class PodExtractor(ImageExtractor):
    kind = kinds.KIND_POD
    model = k8s.Pod

    def images(self, manifest: k8s.Pod, config: ExtractionConfig) -> List[str]:
        return flatten_pod_specs(manifest.spec)


class ConfigMapExtractor(ImageExtractor):
    """
    Every data entry whose key mentions the image keyword is taken as an image.
    """
    kind = kinds.KIND_CONFIGMAP
    model = k8s.ConfigMap

    def images(self, manifest: k8s.ConfigMap, config: ExtractionConfig) -> List[str]:
        keyword = config.image_keyword.lower()
        return [
            value
            for key, value in (manifest.data or {}).items()
            if keyword in key.lower()
        ]
