# kubergrunt

Building blocks for tooling that sets up and manages a Kubernetes cluster:
choosing how to authenticate with the cluster, describing the subject of a TLS
certificate, and turning command-line values for EKS and TLS operations into
checked Python values.

## Modules

- `kubergrunt.kubectl_options` — `KubectlOptions`, `default_kubeconfig_path`
  and `parse_kubectl_options`. Given a mapping of flag names to values,
  `parse_kubectl_options` picks one of three ways to reach the Kubernetes API:
  - `kubectl-server-endpoint` set: direct access, which also requires
    `kubectl-certificate-authority` and `kubectl-token`;
  - otherwise `kubectl-eks-cluster-arn` set: EKS access by cluster ARN;
  - otherwise a kubeconfig file (`kubeconfig`, defaulting to
    `~/.kube/config`) and an optional context (`kubectl-context-name`).
- `kubergrunt.subject` — `TLSSubjectInfo`, `DistinguishedName`, `TLSFlags`,
  `DEFAULT_TLS_FLAGS`, `first_non_empty`, `parse_or_create_tls_subject_info`
  and `parse_tls_flags_to_name`. The common name and organisation are required,
  either in the subject JSON or as flags; flag values override the JSON.
  Organisational unit, city, state and country are optional and are left out
  of the distinguished name when empty.
- `kubergrunt.tls_args` — `tag_args_to_map`, `secret_filename_base`
  (explicit base, else `ca` for CA key pairs and `tls` otherwise),
  `ca_secret_namespace` and `validity_from_days`.
- `kubergrunt.eks_flags` — `parse_duration` for durations such as `10m`,
  `1h30m` or `1.5s`, and the defaults `DEFAULT_DRAIN_TIMEOUT` (15 minutes),
  `DEFAULT_SLEEP_BETWEEN_RETRIES` (15 seconds), `DEFAULT_WAIT_TIMEOUT`
  (`"10m"`) and `DEFAULT_MAX_RETRIES` (0).
- `kubergrunt.eks_args` — `select_single_asg`, `require_asg_names` and
  `format_token_output`.
- `kubergrunt.cli_values` — `CorednsAnnotation` (`FARGATE`, `EC2`),
  `require_string_flag`, `parse_log_level` (names such as `info`, `debug` or
  `trace` to `logging` level numbers) and `parse_kubectl_wrapper_args` (drops a
  leading `--`).
- `kubergrunt.errors` — `KubergruntError` and its subclasses
  `RequiredArgsError`, `MutuallyExclusiveFlagError`, `ExactlyOneASGError` and
  `ImpossibleError`.

## Examples

Subject information may name fields in either of two spellings
(`org`/`organization`, `org_unit`/`organizational_unit`, `city`/`locality`,
`state`/`province`):

```python
from kubergrunt.subject import parse_or_create_tls_subject_info

info = parse_or_create_tls_subject_info('{"organization": "Acme", "organizational_unit": "Eng"}')
print(info.org, info.org_unit)  # Acme Eng
name = info.distinguished_name()
print(name.organization)  # ('Acme',)
```

Secret labels and annotations are given as `key=value` strings; everything
after the first `=` belongs to the value:

```python
from kubergrunt.tls_args import tag_args_to_map

tag_args_to_map(["app=web", "expr=a=b"])  # {"app": "web", "expr": "a=b"}
```

Durations:

```python
from kubergrunt.eks_flags import parse_duration

parse_duration("1h30m")  # datetime.timedelta(seconds=5400)
```

A rolling deployment works on exactly one Auto Scaling Group, and anything
else is refused:

```python
from kubergrunt.eks_args import select_single_asg
from kubergrunt.errors import ExactlyOneASGError

try:
    select_single_asg(["asg-a", "asg-b"], "asg-name")
except ExactlyOneASGError as err:
    print(err)  # You must provide exactly one ASG using asg-name to this command.
```

## What this package does not do

It is a library of option parsing and validation only. It has no command-line
program, and it does not itself contact a Kubernetes cluster or AWS, run
kubectl, generate certificates or keys, store Secrets, or drain and roll
worker nodes. It produces the checked values that such operations would use.

## Requirements

Python 3.10 or newer. The package has no runtime dependencies; the tests use
pytest (`pip install .[test]`).