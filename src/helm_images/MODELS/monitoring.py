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
Models for the custom resources of the monitoring operators:

- prometheus-operator (monitoring.coreos.com/v1): Alertmanager, Prometheus, ThanosRuler
- grafana-operator (grafana.integreatly.org/v1beta1): Grafana
- banzaicloud thanos-operator (monitoring.banzaicloud.io/v1alpha1): Thanos, Receiver
"""
from typing import List, Optional
from pydantic import Field

from .kubernetes import KubeModel, Manifest, PodSpec, WorkloadSpec


class AlertmanagerSpec(PodSpec):
    image: Optional[str] = None


class Alertmanager(Manifest):
    spec: AlertmanagerSpec = Field(default_factory=AlertmanagerSpec)


class PrometheusSpec(PodSpec):
    image: Optional[str] = None


class Prometheus(Manifest):
    spec: PrometheusSpec = Field(default_factory=PrometheusSpec)


class ThanosRulerSpec(PodSpec):
    image: Optional[str] = None


class ThanosRuler(Manifest):
    spec: ThanosRulerSpec = Field(default_factory=ThanosRulerSpec)


class WorkloadOverride(KubeModel):
    """
    A Deployment or StatefulSet override as embedded in an operator resource.
    Only its spec is of interest.
    """
    spec: WorkloadSpec = Field(default_factory=WorkloadSpec)


class GrafanaSpec(KubeModel):
    deployment: WorkloadOverride = Field(default_factory=WorkloadOverride)


class Grafana(Manifest):
    spec: GrafanaSpec = Field(default_factory=GrafanaSpec)


class ThanosRule(KubeModel):
    statefulset_overrides: WorkloadOverride = Field(default_factory=WorkloadOverride)


class ThanosDeploymentComponent(KubeModel):
    """
    Query, StoreGateway and QueryFrontend all override a Deployment.
    """
    deployment_overrides: WorkloadOverride = Field(default_factory=WorkloadOverride)


class ThanosSpec(KubeModel):
    rule: ThanosRule = Field(default_factory=ThanosRule)
    query: ThanosDeploymentComponent = Field(default_factory=ThanosDeploymentComponent)
    store_gateway: ThanosDeploymentComponent = Field(default_factory=ThanosDeploymentComponent)
    query_frontend: ThanosDeploymentComponent = Field(default_factory=ThanosDeploymentComponent)


class Thanos(Manifest):
    spec: ThanosSpec = Field(default_factory=ThanosSpec)


class ReceiverGroup(KubeModel):
    name: str = ""
    stateful_set_overrides: WorkloadOverride = Field(default_factory=WorkloadOverride)


class ReceiverSpec(KubeModel):
    receiver_groups: List[ReceiverGroup] = []


class Receiver(Manifest):
    spec: ReceiverSpec = Field(default_factory=ReceiverSpec)
