"""Options describing how to authenticate kubectl against a cluster."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from kubergrunt.cli_values import require_string_flag

KUBECONFIG_FLAG_NAME = "kubeconfig"
KUBECTL_CONTEXT_NAME_FLAG_NAME = "kubectl-context-name"
KUBECTL_SERVER_FLAG_NAME = "kubectl-server-endpoint"
KUBECTL_CA_FLAG_NAME = "kubectl-certificate-authority"
KUBECTL_TOKEN_FLAG_NAME = "kubectl-token"
KUBECTL_EKS_CLUSTER_ARN_FLAG_NAME = "kubectl-eks-cluster-arn"

logger = logging.getLogger("kubergrunt")


@dataclass
class KubectlOptions:
    """Authentication settings for talking to the Kubernetes API."""

    context_name: str = ""
    config_path: str = ""
    server: str = ""
    base64_pem_certificate_authority: str = ""
    bearer_token: str = ""
    eks_cluster_arn: str = ""


def default_kubeconfig_path() -> str:
    """Return the kubeconfig path in the user's home directory."""
    return str(Path.home() / ".kube" / "config")


def parse_kubectl_options(values: Mapping[str, str | None]) -> KubectlOptions:
    """Pick the authentication scheme from flag values and build the options.

    A server endpoint selects direct authentication and then needs the
    certificate authority and token; otherwise an EKS cluster ARN selects EKS
    authentication; otherwise a kubeconfig file and context are used.
    """
    server = values.get(KUBECTL_SERVER_FLAG_NAME) or ""
    eks_cluster_arn = values.get(KUBECTL_EKS_CLUSTER_ARN_FLAG_NAME) or ""
    context_name = values.get(KUBECTL_CONTEXT_NAME_FLAG_NAME) or ""
    config_path = values.get(KUBECONFIG_FLAG_NAME) or ""

    if server:
        logger.info(
            "--%s provided. Checking for --%s and --%s.",
            KUBECTL_SERVER_FLAG_NAME,
            KUBECTL_CA_FLAG_NAME,
            KUBECTL_TOKEN_FLAG_NAME,
        )
        certificate_authority = require_string_flag(values, KUBECTL_CA_FLAG_NAME)
        bearer_token = require_string_flag(values, KUBECTL_TOKEN_FLAG_NAME)
        return KubectlOptions(
            server=server,
            base64_pem_certificate_authority=certificate_authority,
            bearer_token=bearer_token,
        )
    if eks_cluster_arn:
        return KubectlOptions(eks_cluster_arn=eks_cluster_arn)

    if not context_name:
        logger.info("No context name provided. Using default.")
    if not config_path:
        config_path = default_kubeconfig_path()
        logger.info("No kube config path provided. Using default (%s)", config_path)

    return KubectlOptions(context_name=context_name, config_path=config_path)