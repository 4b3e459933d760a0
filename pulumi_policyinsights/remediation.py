# Copyright 2026, Pulumi Corporation.
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


from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, NamedTuple, Optional

from azure.mgmt.core.tools import is_valid_resource_id, parse_resource_id, resource_id

PROVIDER_NAMESPACE = "Microsoft.PolicyInsights"
RESOURCE_TYPE = "remediations"


class ResourceDiscoveryMode(str, Enum):
    """
    Selects whether the remediation targets resources already known to be non-compliant or
    re-evaluates compliance first.
    """

    EXISTING_NON_COMPLIANT = "ExistingNonCompliant"
    RE_EVALUATE_COMPLIANCE = "ReEvaluateCompliance"


@dataclass
class RemediationProperties:
    """
    The properties of a remediation as reported by the Policy Insights service.
    """

    policy_assignment_id: Optional[str] = None
    """The ID of the policy assignment that should be remediated."""
    policy_definition_reference_id: Optional[str] = None
    """The definition within a policy set assignment to remediate."""
    resource_discovery_mode: Optional[ResourceDiscoveryMode] = None
    """How the resources to remediate are discovered."""
    location_filters: List[str] = field(default_factory=list)
    """The resource locations that will be remediated."""
    failure_percentage: Optional[float] = None
    """The failure ratio above which the remediation stops."""
    parallel_deployments: Optional[int] = None
    """How many resources to remediate at the same time."""
    resource_count: Optional[int] = None
    """The maximum number of non-compliant resources to remediate."""
    provisioning_state: Optional[str] = None
    """The status of the remediation, maintained by the service."""

    @staticmethod
    def from_inputs(props: Mapping[str, Any]) -> "RemediationProperties":
        mode = props.get("resource_discovery_mode")
        return RemediationProperties(
            policy_assignment_id=props.get("policy_assignment_id"),
            policy_definition_reference_id=props.get("policy_definition_reference_id") or None,
            resource_discovery_mode=ResourceDiscoveryMode(mode) if mode else None,
            location_filters=list(props.get("location_filters") or []),
            failure_percentage=_optional_float(props.get("failure_percentage")),
            parallel_deployments=_optional_int(props.get("parallel_deployments")),
            resource_count=_optional_int(props.get("resource_count")),
        )

    def to_outputs(self) -> Dict[str, Any]:
        return {
            "policy_assignment_id": self.policy_assignment_id,
            "policy_definition_reference_id": self.policy_definition_reference_id or "",
            "resource_discovery_mode": (
                self.resource_discovery_mode.value if self.resource_discovery_mode else None
            ),
            "location_filters": list(self.location_filters),
            "failure_percentage": self.failure_percentage,
            "parallel_deployments": self.parallel_deployments,
            "resource_count": self.resource_count,
            "provisioning_state": self.provisioning_state,
        }


class RemediationId(NamedTuple):
    subscription_id: str
    name: str

    def id(self) -> str:
        return remediation_id(self.subscription_id, self.name)

    def __str__(self) -> str:
        return self.id()


def remediation_id(subscription_id: str, name: str) -> str:
    """
    Returns the ARM ID of the remediation `name` at subscription scope.
    """
    return resource_id(
        subscription=subscription_id,
        namespace=PROVIDER_NAMESPACE,
        type=RESOURCE_TYPE,
        name=name,
    )


def parse_remediation_id(id_: str) -> RemediationId:
    """
    Parses a subscription scoped remediation ID, raising a ValueError if it is anything else.
    """
    if not is_valid_resource_id(id_):
        raise ValueError(f"Cannot parse remediation ID: {id_!r}")
    parts = parse_resource_id(id_)
    if (
        parts.get("resource_group")
        or parts.get("namespace", "").lower() != PROVIDER_NAMESPACE.lower()
        or parts.get("type", "").lower() != RESOURCE_TYPE
        or "child_name_1" in parts
    ):
        raise ValueError(f"Cannot parse remediation ID: {id_!r} is not a subscription policy remediation")
    return RemediationId(subscription_id=parts["subscription"], name=parts["name"])


def subscription_id_from(value: str) -> str:
    """
    Accepts either a bare subscription GUID or a `/subscriptions/{guid}` ID and returns the GUID.
    """
    prefix = "/subscriptions/"
    if value.lower().startswith(prefix):
        guid = value[len(prefix):].rstrip("/")
        if not guid or "/" in guid:
            raise ValueError(f"Cannot parse subscription ID: {value!r}")
        return guid
    return value


# Numbers arrive from the engine as floats.
def _optional_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)
