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


from unittest.mock import MagicMock

import pytest
from azure.core.exceptions import ResourceNotFoundError
from azure.mgmt.policyinsights.models import (
    Remediation,
    RemediationFilters,
    RemediationPropertiesFailureThreshold,
)

from pulumi_policyinsights import (
    AzureRemediationsClient,
    NotFoundError,
    RemediationId,
    RemediationProperties,
    ResourceDiscoveryMode,
)
from pulumi_policyinsights.azure import from_model, to_model

SUBSCRIPTION = "00000000-0000-0000-0000-000000000000"
ID = RemediationId(SUBSCRIPTION, "remediate-tags")


@pytest.fixture
def sdk():
    return MagicMock()


@pytest.fixture
def client(sdk):
    return AzureRemediationsClient(client_factory=lambda subscription_id: sdk)


def test_requires_credential_or_factory():
    with pytest.raises(TypeError):
        AzureRemediationsClient()


def test_get(client, sdk):
    model = MagicMock(
        policy_assignment_id="assignment",
        policy_definition_reference_id=None,
        resource_discovery_mode="ReEvaluateCompliance",
        filters=MagicMock(locations=["westeurope"]),
        failure_threshold=MagicMock(percentage=0.1),
        parallel_deployments=10,
        resource_count=500,
        provisioning_state="Evaluating",
    )
    sdk.remediations.get_at_subscription.return_value = model

    properties = client.get(ID)

    sdk.remediations.get_at_subscription.assert_called_once_with(remediation_name="remediate-tags")
    assert properties == RemediationProperties(
        policy_assignment_id="assignment",
        resource_discovery_mode=ResourceDiscoveryMode.RE_EVALUATE_COMPLIANCE,
        location_filters=["westeurope"],
        failure_percentage=0.1,
        parallel_deployments=10,
        resource_count=500,
        provisioning_state="Evaluating",
    )


@pytest.mark.parametrize("op", ["get", "cancel", "delete"])
def test_not_found(client, sdk, op):
    getattr(sdk.remediations, f"{op}_at_subscription").side_effect = ResourceNotFoundError("gone")

    with pytest.raises(NotFoundError) as excinfo:
        getattr(client, op)(ID)

    assert excinfo.value.resource_id == ID.id()


def test_cancel_and_delete(client, sdk):
    client.cancel(ID)
    client.delete(ID)

    sdk.remediations.cancel_at_subscription.assert_called_once_with(remediation_name="remediate-tags")
    sdk.remediations.delete_at_subscription.assert_called_once_with(remediation_name="remediate-tags")


def test_one_sdk_client_per_subscription():
    created = []

    def factory(subscription_id):
        created.append(subscription_id)
        return MagicMock()

    client = AzureRemediationsClient(client_factory=factory)
    client.cancel(ID)
    client.cancel(ID)
    client.cancel(RemediationId("11111111-1111-1111-1111-111111111111", "other"))

    assert created == [SUBSCRIPTION, "11111111-1111-1111-1111-111111111111"]


def test_to_model():
    model = to_model(RemediationProperties(
        policy_assignment_id="assignment",
        resource_discovery_mode=ResourceDiscoveryMode.EXISTING_NON_COMPLIANT,
        location_filters=["westeurope", "northeurope"],
        failure_percentage=0.5,
        resource_count=100,
    ))

    assert isinstance(model, Remediation)
    assert model.policy_assignment_id == "assignment"
    assert model.resource_discovery_mode == "ExistingNonCompliant"
    assert model.filters.locations == ["westeurope", "northeurope"]
    assert model.failure_threshold.percentage == 0.5
    assert model.resource_count == 100
    assert model.parallel_deployments is None


def test_to_model_omits_empty_filters():
    model = to_model(RemediationProperties(policy_assignment_id="assignment"))

    assert model.filters is None
    assert model.failure_threshold is None
    assert model.resource_discovery_mode is None


def test_from_model():
    model = Remediation(
        policy_assignment_id="assignment",
        resource_discovery_mode="ExistingNonCompliant",
        filters=RemediationFilters(locations=["westeurope"]),
        failure_threshold=RemediationPropertiesFailureThreshold(percentage=0.2),
    )

    properties = from_model(model)

    assert properties.resource_discovery_mode is ResourceDiscoveryMode.EXISTING_NON_COMPLIANT
    assert properties.location_filters == ["westeurope"]
    assert properties.failure_percentage == 0.2
    assert properties.provisioning_state is None
