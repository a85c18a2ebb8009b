from helm_images.EXTRACTORS.containers import env_images, flatten_pod_specs, images_of
from helm_images.MODELS.kubernetes import Container, EnvVar, PodSpec


def pod(containers=(), init_containers=()):
    return PodSpec(
        containers=[Container(image=image) for image in containers],
        init_containers=[Container(image=image) for image in init_containers],
    )


def test_images_of_keeps_order_and_duplicates():
    containers = [Container(image='b'), Container(image='a'), Container(image='b')]
    assert images_of(containers) == ['b', 'a', 'b']


def test_container_without_image_gives_empty_string():
    assert images_of([Container(name='sidecar')]) == ['']


def test_flatten_single_spec():
    assert flatten_pod_specs(pod(['a', 'b'], ['c'])) == ['a', 'b', 'c']


def test_flatten_several_specs_in_order():
    images = flatten_pod_specs(pod(['a'], ['b']), pod(), pod(['c'], ['d', 'e']))
    assert images == ['a', 'b', 'c', 'd', 'e']


def test_flatten_nothing():
    assert flatten_pod_specs() == []
    assert flatten_pod_specs(pod()) == []


def test_env_images():
    containers = [
        Container(image='app', env=[
            EnvVar(name='SIDECAR_IMAGE', value='proxy:1'),
            EnvVar(name='PORT', value='80'),
        ]),
        Container(image='worker', env=[EnvVar(name='imageRepository', value='repo/x')]),
    ]
    assert env_images(containers) == ['proxy:1', 'repo/x']
    assert env_images(containers, keyword='PORT') == ['80']
