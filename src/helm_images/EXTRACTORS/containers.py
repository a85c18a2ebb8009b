"""
Flattening of container lists into an ordered list of images.
"""
from typing import Iterable, List

from ..MODELS.kubernetes import Container, PodSpec


def images_of(containers: Iterable[Container]) -> List[str]:
    """
    Takes the image of each container in encounter order.
    A container without an image contributes an empty string.
    """
    return [container.image for container in containers]


def flatten_pod_specs(*pod_specs: PodSpec) -> List[str]:
    """
    Flattens one or more pod specs into a single list of images.

    For each spec in turn the primary containers come first, then its
    init-containers, so that the result follows the declaration order of
    the object the specs were taken from.

    :param pod_specs: The pod specs to walk.
    :return: The images, possibly empty.
    """
    images: List[str] = []
    for spec in pod_specs:
        images.extend(images_of(spec.containers))
        images.extend(images_of(spec.init_containers))
    return images


def env_images(containers: Iterable[Container], keyword: str = "image") -> List[str]:
    """
    Collects the values of environment variables whose name contains
    `keyword` (case-insensitive), container by container, in declaration order.
    """
    keyword = keyword.lower()
    return [
        env.value
        for container in containers
        for env in container.env
        if keyword in env.name.lower()
    ]
