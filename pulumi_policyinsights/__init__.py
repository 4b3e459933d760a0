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
A Pulumi dynamic resource for Azure Policy remediations scoped to a subscription.
"""

from .errors import (
    CancelFailure,
    MissingFieldError,
    NotFoundError,
    RemediationError,
    RemediationFailedError,
    ResourceExistsError,
    TransientFetchError,
    WaitTimeoutError,
)
from .client import RemediationsClient
from .remediation import (
    RemediationId,
    RemediationProperties,
    ResourceDiscoveryMode,
    parse_remediation_id,
    remediation_id,
)
from .waiter import (
    Deadline,
    PollResult,
    RemediationStateRefresher,
    StateRefresher,
    wait_for_remediation_to_delete,
    wait_for_state,
)
from .settings import ProviderSettings
from .azure import AzureRemediationsClient
from .provider import SubscriptionPolicyRemediationProvider
from .resource import SubscriptionPolicyRemediation

__all__ = [
    # errors
    "CancelFailure",
    "MissingFieldError",
    "NotFoundError",
    "RemediationError",
    "RemediationFailedError",
    "ResourceExistsError",
    "TransientFetchError",
    "WaitTimeoutError",
    # client
    "RemediationsClient",
    "AzureRemediationsClient",
    # remediation
    "RemediationId",
    "RemediationProperties",
    "ResourceDiscoveryMode",
    "parse_remediation_id",
    "remediation_id",
    # waiter
    "Deadline",
    "PollResult",
    "RemediationStateRefresher",
    "StateRefresher",
    "wait_for_remediation_to_delete",
    "wait_for_state",
    # provider
    "ProviderSettings",
    "SubscriptionPolicyRemediationProvider",
    "SubscriptionPolicyRemediation",
]
