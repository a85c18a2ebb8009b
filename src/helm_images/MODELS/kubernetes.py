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
Models for the core, apps and batch Kubernetes resources that carry containers.

Only the fields needed to find images are modelled; everything else in a
manifest is ignored on decode.
"""
from typing import Any, List, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class KubeModel(BaseModel):
    """
    Base for all manifest models: camelCase keys on the wire, snake_case in Python.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # `key: null` in YAML means the same as leaving the key out,
        # and a null list item decodes to an empty object
        if data is None:
            return {}
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class EnvVar(KubeModel):
    """
    A single environment variable of a container.
    """
    name: str = ""
    value: str = ""


class Container(KubeModel):
    """
    A container of a pod spec: its image and environment.
    """
    name: str = ""
    image: str = ""
    env: List[EnvVar] = []


class PodSpec(KubeModel):
    containers: List[Container] = []
    init_containers: List[Container] = []


class PodTemplateSpec(KubeModel):
    spec: PodSpec = Field(default_factory=PodSpec)


class ObjectMeta(KubeModel):
    name: str = ""
    namespace: str = ""


class Manifest(KubeModel):
    """
    Fields shared by every Kubernetes object.
    """
    api_version: str = ""
    kind: str = ""
    metadata: ObjectMeta = Field(default_factory=ObjectMeta)

    @property
    def name(self) -> str:
        return self.metadata.name


class WorkloadSpec(KubeModel):
    """
    Spec of any controller that stamps pods out of a template
    (Deployment, StatefulSet, DaemonSet, ReplicaSet, Job).
    """
    template: PodTemplateSpec = Field(default_factory=PodTemplateSpec)


class Deployment(Manifest):
    spec: WorkloadSpec = Field(default_factory=WorkloadSpec)


class StatefulSet(Manifest):
    spec: WorkloadSpec = Field(default_factory=WorkloadSpec)


class DaemonSet(Manifest):
    spec: WorkloadSpec = Field(default_factory=WorkloadSpec)


class ReplicaSet(Manifest):
    spec: WorkloadSpec = Field(default_factory=WorkloadSpec)


class Job(Manifest):
    spec: WorkloadSpec = Field(default_factory=WorkloadSpec)


class JobTemplateSpec(KubeModel):
    spec: WorkloadSpec = Field(default_factory=WorkloadSpec)


class CronJobSpec(KubeModel):
    job_template: JobTemplateSpec = Field(default_factory=JobTemplateSpec)


class CronJob(Manifest):
    spec: CronJobSpec = Field(default_factory=CronJobSpec)


class Pod(Manifest):
    spec: PodSpec = Field(default_factory=PodSpec)


class ConfigMap(Manifest):
    """
    A ConfigMap; image references may be stored as plain data values.
    """
    data: Optional[Dict[str, str]] = None

    @field_validator("data", mode="before")
    @classmethod
    def empty_values(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: "" if v is None else v for k, v in data.items()}
        return data
