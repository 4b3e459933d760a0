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


import pytest

from pulumi_policyinsights import (
    RemediationId,
    RemediationProperties,
    ResourceDiscoveryMode,
    parse_remediation_id,
    remediation_id,
)
from pulumi_policyinsights.remediation import subscription_id_from

SUBSCRIPTION = "00000000-0000-0000-0000-000000000000"


def test_remediation_id():
    assert (
        remediation_id(SUBSCRIPTION, "remediate-tags")
        == f"/subscriptions/{SUBSCRIPTION}/providers/Microsoft.PolicyInsights/remediations/remediate-tags"
    )


def test_parse_remediation_id():
    res = parse_remediation_id(
        f"/subscriptions/{SUBSCRIPTION}/providers/Microsoft.PolicyInsights/remediations/remediate-tags"
    )
    assert res.subscription_id == SUBSCRIPTION
    assert res.name == "remediate-tags"
    assert str(res) == remediation_id(SUBSCRIPTION, "remediate-tags")


def test_parse_remediation_id_ignores_namespace_case():
    res = parse_remediation_id(
        f"/subscriptions/{SUBSCRIPTION}/providers/microsoft.policyinsights/remediations/remediate-tags"
    )
    assert res == RemediationId(SUBSCRIPTION, "remediate-tags")


@pytest.mark.parametrize(
    "id_",
    [
        "",
        "remediate-tags",
        f"/subscriptions/{SUBSCRIPTION}",
        f"/subscriptions/{SUBSCRIPTION}/resourceGroups/rg/providers/Microsoft.PolicyInsights/remediations/r",
        f"/subscriptions/{SUBSCRIPTION}/providers/Microsoft.Authorization/policyAssignments/a",
    ],
)
def test_parse_remediation_id_invalid(id_):
    with pytest.raises(ValueError):
        parse_remediation_id(id_)


@pytest.mark.parametrize(
    "value",
    [SUBSCRIPTION, f"/subscriptions/{SUBSCRIPTION}", f"/subscriptions/{SUBSCRIPTION}/"],
)
def test_subscription_id_from(value):
    assert subscription_id_from(value) == SUBSCRIPTION


def test_properties_from_inputs():
    properties = RemediationProperties.from_inputs({
        "policy_assignment_id": "/subscriptions/x/providers/Microsoft.Authorization/policyAssignments/a",
        "resource_discovery_mode": "ReEvaluateCompliance",
        "location_filters": ["westeurope"],
        "failure_percentage": 0.5,
        "parallel_deployments": 2.0,
        "resource_count": 10.0,
    })

    assert properties.resource_discovery_mode is ResourceDiscoveryMode.RE_EVALUATE_COMPLIANCE
    assert properties.location_filters == ["westeurope"]
    assert properties.parallel_deployments == 2
    assert isinstance(properties.parallel_deployments, int)
    assert properties.resource_count == 10
    assert properties.policy_definition_reference_id is None
    assert properties.provisioning_state is None


def test_properties_to_outputs():
    outs = RemediationProperties(
        policy_assignment_id="assignment",
        resource_discovery_mode=ResourceDiscoveryMode.EXISTING_NON_COMPLIANT,
        provisioning_state="Succeeded",
    ).to_outputs()

    assert outs == {
        "policy_assignment_id": "assignment",
        "policy_definition_reference_id": "",
        "resource_discovery_mode": "ExistingNonCompliant",
        "location_filters": [],
        "failure_percentage": None,
        "parallel_deployments": None,
        "resource_count": None,
        "provisioning_state": "Succeeded",
    }
