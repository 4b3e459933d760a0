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


from typing import List, Optional

import pulumi
from pulumi.dynamic import Resource

from .provider import SubscriptionPolicyRemediationProvider


class SubscriptionPolicyRemediation(Resource, module="policyinsights", name="SubscriptionPolicyRemediation"):
    """
    Manages an Azure Policy remediation at subscription scope.

    Deleting a remediation whose `resource_discovery_mode` is `ReEvaluateCompliance` cancels it first
    and waits for the cancellation to finish.
    """

    name: pulumi.Output[str]
    """The name of the remediation.  Changing this forces a new resource."""
    subscription_id: pulumi.Output[str]
    """The ID of the subscription, e.g. `/subscriptions/00000000-0000-0000-0000-000000000000`."""
    policy_assignment_id: pulumi.Output[str]
    """The ID of the policy assignment to remediate."""
    policy_definition_reference_id: pulumi.Output[str]
    """The unique ID of the policy definition within the policy set definition to remediate."""
    resource_discovery_mode: pulumi.Output[str]
    """Either `ExistingNonCompliant` (the default) or `ReEvaluateCompliance`."""
    location_filters: pulumi.Output[List[str]]
    """The resource locations to remediate."""
    failure_percentage: pulumi.Output[Optional[float]]
    """A number between 0.0 and 1.0; the remediation fails when this ratio of deployments fails."""
    parallel_deployments: pulumi.Output[Optional[int]]
    """How many resources to remediate at the same time."""
    resource_count: pulumi.Output[Optional[int]]
    """The maximum number of resources to remediate."""
    provisioning_state: pulumi.Output[str]
    """The status of the remediation."""

    def __init__(self,
                 resource_name: str,
                 name: pulumi.Input[str] = None,
                 subscription_id: pulumi.Input[str] = None,
                 policy_assignment_id: pulumi.Input[str] = None,
                 policy_definition_reference_id: Optional[pulumi.Input[str]] = None,
                 resource_discovery_mode: Optional[pulumi.Input[str]] = None,
                 location_filters: Optional[pulumi.Input[List[pulumi.Input[str]]]] = None,
                 failure_percentage: Optional[pulumi.Input[float]] = None,
                 parallel_deployments: Optional[pulumi.Input[int]] = None,
                 resource_count: Optional[pulumi.Input[int]] = None,
                 opts: Optional[pulumi.ResourceOptions] = None,
                 provider: Optional[SubscriptionPolicyRemediationProvider] = None) -> None:
        """
        :param str resource_name: The name of the resource.
        :param pulumi.Input[str] name: The name of the remediation.
        :param pulumi.Input[str] subscription_id: The subscription to create the remediation in.
        :param pulumi.Input[str] policy_assignment_id: The ID of the policy assignment to remediate.
        :param pulumi.ResourceOptions opts: Options for the resource.
        :param SubscriptionPolicyRemediationProvider provider: The provider implementation to use.
        """
        if opts is None:
            opts = pulumi.ResourceOptions()
        if not opts.urn:
            if name is None:
                raise TypeError("Missing required property 'name'")
            if subscription_id is None:
                raise TypeError("Missing required property 'subscription_id'")
            if policy_assignment_id is None:
                raise TypeError("Missing required property 'policy_assignment_id'")

        __props__: dict = dict()
        __props__["name"] = name
        __props__["subscription_id"] = subscription_id
        __props__["policy_assignment_id"] = policy_assignment_id
        __props__["policy_definition_reference_id"] = policy_definition_reference_id
        __props__["resource_discovery_mode"] = resource_discovery_mode
        __props__["location_filters"] = location_filters
        __props__["failure_percentage"] = failure_percentage
        __props__["parallel_deployments"] = parallel_deployments
        __props__["resource_count"] = resource_count
        __props__["provisioning_state"] = None

        if provider is None:
            provider = SubscriptionPolicyRemediationProvider()
        super().__init__(provider, resource_name, __props__, opts)
