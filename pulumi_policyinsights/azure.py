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


"""
A `RemediationsClient` backed by the Azure SDK for Policy Insights.
"""

from typing import Any, Callable, Dict, Optional

from azure.core.exceptions import ResourceNotFoundError
from azure.mgmt.policyinsights import PolicyInsightsClient
from azure.mgmt.policyinsights.models import (
    Remediation,
    RemediationFilters,
    RemediationPropertiesFailureThreshold,
)

from .errors import NotFoundError
from .remediation import RemediationId, RemediationProperties, ResourceDiscoveryMode

ClientFactory = Callable[[str], PolicyInsightsClient]


class AzureRemediationsClient:
    """
    AzureRemediationsClient talks to the remediations API at subscription scope.  One SDK client is
    created per subscription, on first use.
    """

    _clients: Dict[str, PolicyInsightsClient]
    _factory: ClientFactory

    def __init__(self, credential: Any = None, client_factory: Optional[ClientFactory] = None) -> None:
        """
        :param credential: An Azure credential, e.g. `azure.identity.DefaultAzureCredential()`.
        :param client_factory: Builds the SDK client for a subscription.  Defaults to constructing a
               `PolicyInsightsClient` with `credential`.
        """
        if client_factory is None:
            if credential is None:
                raise TypeError("Expected either credential or client_factory")
            client_factory = lambda subscription_id: PolicyInsightsClient(credential, subscription_id)
        self._factory = client_factory
        self._clients = {}

    def _remediations(self, id_: RemediationId):
        client = self._clients.get(id_.subscription_id)
        if client is None:
            client = self._factory(id_.subscription_id)
            self._clients[id_.subscription_id] = client
        return client.remediations

    def get(self, id_: RemediationId) -> RemediationProperties:
        try:
            model = self._remediations(id_).get_at_subscription(remediation_name=id_.name)
        except ResourceNotFoundError as e:
            raise NotFoundError(id_.id()) from e
        return from_model(model)

    def create_or_update(self, id_: RemediationId, properties: RemediationProperties) -> RemediationProperties:
        model = self._remediations(id_).create_or_update_at_subscription(
            remediation_name=id_.name,
            parameters=to_model(properties),
        )
        return from_model(model)

    def cancel(self, id_: RemediationId) -> None:
        try:
            self._remediations(id_).cancel_at_subscription(remediation_name=id_.name)
        except ResourceNotFoundError as e:
            raise NotFoundError(id_.id()) from e

    def delete(self, id_: RemediationId) -> None:
        try:
            self._remediations(id_).delete_at_subscription(remediation_name=id_.name)
        except ResourceNotFoundError as e:
            raise NotFoundError(id_.id()) from e


def to_model(properties: RemediationProperties) -> Remediation:
    filters = None
    if properties.location_filters:
        filters = RemediationFilters(locations=list(properties.location_filters))
    failure_threshold = None
    if properties.failure_percentage is not None:
        failure_threshold = RemediationPropertiesFailureThreshold(percentage=properties.failure_percentage)
    mode = properties.resource_discovery_mode
    return Remediation(
        policy_assignment_id=properties.policy_assignment_id,
        policy_definition_reference_id=properties.policy_definition_reference_id,
        resource_discovery_mode=mode.value if mode else None,
        filters=filters,
        failure_threshold=failure_threshold,
        parallel_deployments=properties.parallel_deployments,
        resource_count=properties.resource_count,
    )


def from_model(model: Remediation) -> RemediationProperties:
    filters = getattr(model, "filters", None)
    failure_threshold = getattr(model, "failure_threshold", None)
    mode = getattr(model, "resource_discovery_mode", None)
    return RemediationProperties(
        policy_assignment_id=model.policy_assignment_id,
        policy_definition_reference_id=model.policy_definition_reference_id,
        resource_discovery_mode=ResourceDiscoveryMode(getattr(mode, "value", mode)) if mode else None,
        location_filters=list(filters.locations or []) if filters is not None else [],
        failure_percentage=failure_threshold.percentage if failure_threshold is not None else None,
        parallel_deployments=model.parallel_deployments,
        resource_count=model.resource_count,
        provisioning_state=model.provisioning_state,
    )
