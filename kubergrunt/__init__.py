"""Option parsing and validation for managing Kubernetes clusters, EKS workers and TLS secrets."""

__version__ = "0.1.0"