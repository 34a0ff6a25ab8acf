"""Constants and kind lists used throughout the builder.

Provider-specific field, annotation and variable names live with their
provider (providers/s3.py, providers/gcs.py).
"""

# Annotation namespace for per-secret settings read by providers
ANNOTATION_PREFIX = "serving.kubeflow.org"

# K8s kinds the manifest store indexes
IDENTITY_KIND = "ServiceAccount"
SECRET_KIND = "Secret"

# Knative v1alpha1 kinds carrying a revisionTemplate with a single container
# (Service nests it under runLatest/release.configuration)
REVISION_TEMPLATE_KINDS = ("Configuration", "Service")

# Kinds whose spec.template.spec is a pod spec with a containers list
POD_TEMPLATE_KINDS = (
    "Service", "Configuration",  # Knative v1
    "DaemonSet", "Deployment", "Job", "StatefulSet",
)

DEFAULT_NAMESPACE = "default"
DEFAULT_SERVICE_ACCOUNT = "default"
