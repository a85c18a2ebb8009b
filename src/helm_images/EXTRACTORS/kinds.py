"""
Kind tags of the resources images can be extracted from.
"""

KIND_DEPLOYMENT = "Deployment"
KIND_STATEFULSET = "StatefulSet"
KIND_DAEMONSET = "DaemonSet"
KIND_CRONJOB = "CronJob"
KIND_JOB = "Job"
KIND_REPLICASET = "ReplicaSet"
KIND_POD = "Pod"
KIND_ALERTMANAGER = "Alertmanager"
KIND_PROMETHEUS = "Prometheus"
KIND_THANOS_RULER = "ThanosRuler"
KIND_GRAFANA = "Grafana"
KIND_THANOS = "Thanos"
KIND_THANOS_RECEIVER = "Receiver"
KIND_CONFIGMAP = "ConfigMap"

SUPPORTED_KINDS = (
    KIND_DEPLOYMENT,
    KIND_STATEFULSET,
    KIND_DAEMONSET,
    KIND_CRONJOB,
    KIND_JOB,
    KIND_REPLICASET,
    KIND_POD,
    KIND_ALERTMANAGER,
    KIND_PROMETHEUS,
    KIND_THANOS_RULER,
    KIND_GRAFANA,
    KIND_THANOS,
    KIND_THANOS_RECEIVER,
    KIND_CONFIGMAP,
)
