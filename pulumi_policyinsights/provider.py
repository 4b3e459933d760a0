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
The dynamic provider implementing the CRUD operations of a subscription policy remediation.
"""

from typing import Any, Dict, List, Optional

from azure.identity import DefaultAzureCredential
from pulumi import log
from pulumi.runtime import rpc
from pulumi.dynamic import (
    CheckFailure,
    CheckResult,
    ConfigureRequest,
    CreateResult,
    DiffResult,
    ReadResult,
    ResourceProvider,
    UpdateResult,
)

from .azure import AzureRemediationsClient
from .client import RemediationsClient
from .errors import NotFoundError, RemediationError, ResourceExistsError
from .remediation import (
    RemediationId,
    RemediationProperties,
    ResourceDiscoveryMode,
    parse_remediation_id,
    subscription_id_from,
)
from .settings import ProviderSettings
from .waiter import Deadline, RemediationStateRefresher, wait_for_remediation_to_delete

INPUT_KEYS = [
    "name",
    "subscription_id",
    "policy_assignment_id",
    "policy_definition_reference_id",
    "resource_discovery_mode",
    "location_filters",
    "failure_percentage",
    "parallel_deployments",
    "resource_count",
]

REPLACE_KEYS = ["name", "subscription_id"]

REQUIRED_KEYS = ["name", "subscription_id", "policy_assignment_id"]


class SubscriptionPolicyRemediationProvider(ResourceProvider):
    """
    SubscriptionPolicyRemediationProvider manages Azure Policy remediations at subscription scope.

    The provider is serialized into the stack state, so a client passed to the constructor must be
    picklable.  When none is given an `AzureRemediationsClient` using `DefaultAzureCredential` is
    created on first use.
    """

    client: Optional[RemediationsClient]
    settings: ProviderSettings

    def __init__(self,
                 client: Optional[RemediationsClient] = None,
                 settings: Optional[ProviderSettings] = None) -> None:
        super().__init__()
        self.client = client
        self.settings = settings if settings is not None else ProviderSettings()

    def configure(self, req: ConfigureRequest) -> None:
        self.settings = ProviderSettings.from_config(req.config)

    def _client(self) -> RemediationsClient:
        if self.client is None:
            self.client = AzureRemediationsClient(DefaultAzureCredential())
        return self.client

    def check(self, _olds: Any, news: Any) -> CheckResult:
        inputs = dict(news)
        if not inputs.get("subscription_id") and self.settings.subscription_id:
            inputs["subscription_id"] = self.settings.subscription_id
        if not inputs.get("resource_discovery_mode"):
            inputs["resource_discovery_mode"] = ResourceDiscoveryMode.EXISTING_NON_COMPLIANT.value
        if inputs.get("location_filters") is None:
            inputs["location_filters"] = []

        failures: List[CheckFailure] = []
        for key in REQUIRED_KEYS:
            if not inputs.get(key):
                failures.append(CheckFailure(key, f"Missing required property '{key}'"))
        return CheckResult(inputs, failures)

    def diff(self, _id: str, olds: Any, news: Any) -> DiffResult:
        changed = [key for key in INPUT_KEYS if _changed(key, olds.get(key), news.get(key))]
        replaces = [key for key in changed if key in REPLACE_KEYS]
        return DiffResult(changes=len(changed) > 0, replaces=replaces)

    def create(self, props: Any) -> CreateResult:
        id_ = RemediationId(subscription_id_from(props["subscription_id"]), props["name"])
        client = self._client()

        try:
            client.get(id_)
        except NotFoundError:
            pass
        except Exception as e:
            raise RemediationError(f"checking for presence of existing {id_}: {e}", id_.id()) from e
        else:
            raise ResourceExistsError(id_.id())

        self._create_or_update(client, id_, props)
        return CreateResult(id_.id(), self._read_outputs(client, id_))

    def read(self, id_: str, props: Any) -> ReadResult:
        try:
            parsed = parse_remediation_id(id_)
        except ValueError as e:
            raise RemediationError(f"reading Policy Remediation: {e}", id_) from e

        try:
            outs = self._read_outputs(self._client(), parsed)
        except NotFoundError:
            log.info(f"{parsed} does not exist - removing from state")
            return ReadResult("", {})
        return ReadResult(parsed.id(), outs)

    def update(self, id_: str, _olds: Any, news: Any) -> UpdateResult:
        parsed = _parse(id_)
        client = self._client()
        self._create_or_update(client, parsed, news)
        return UpdateResult(self._read_outputs(client, parsed))

    def delete(self, _id: str, _props: Any) -> None:
        deadline = Deadline(self.settings.delete_timeout)
        id_ = _parse(_id)
        client = self._client()

        # Remediations that re-evaluate compliance must be canceled before they can be deleted, so
        # fetch the current discovery mode first.
        try:
            existing = client.get(id_)
        except NotFoundError:
            log.debug(f"{id_} is already gone")
            return
        except Exception as e:
            raise RemediationError(f"retrieving {id_}: {e}", id_.id()) from e

        wait_for_remediation_to_delete(
            existing,
            id_.id(),
            deadline,
            lambda: client.cancel(id_),
            RemediationStateRefresher(client, id_),
            poll_interval=self.settings.poll_interval,
            fail_on_failed_state=self.settings.fail_on_failed_state,
        )

        try:
            client.delete(id_)
        except NotFoundError:
            return
        except Exception as e:
            raise RemediationError(f"deleting {id_}: {e}", id_.id()) from e

    def _create_or_update(self, client: RemediationsClient, id_: RemediationId, props: Any) -> None:
        try:
            client.create_or_update(id_, RemediationProperties.from_inputs(props))
        except Exception as e:
            raise RemediationError(f"creating/updating {id_}: {e}", id_.id()) from e

    def _read_outputs(self, client: RemediationsClient, id_: RemediationId) -> Dict[str, Any]:
        try:
            properties = client.get(id_)
        except NotFoundError:
            raise
        except Exception as e:
            raise RemediationError(f"reading {id_}: {e}", id_.id()) from e

        outs = {
            "name": id_.name,
            "subscription_id": f"/subscriptions/{id_.subscription_id}",
        }
        outs.update(properties.to_outputs())
        return outs


def _parse(id_: str) -> RemediationId:
    try:
        return parse_remediation_id(id_)
    except ValueError as e:
        raise RemediationError(str(e), id_) from e


def _is_unknown(value: Any) -> bool:
    if isinstance(value, list):
        return any(_is_unknown(v) for v in value)
    return isinstance(value, str) and value == rpc.UNKNOWN


def _changed(key: str, old: Any, new: Any) -> bool:
    # Values computed by other resources are unknown during preview.
    if _is_unknown(new) or _is_unknown(old):
        return True
    return _normalize(key, old) != _normalize(key, new)


def _normalize(key: str, value: Any) -> Any:
    if value is None:
        if key == "location_filters":
            return []
        if key == "policy_definition_reference_id":
            return ""
        if key == "resource_discovery_mode":
            return ResourceDiscoveryMode.EXISTING_NON_COMPLIANT.value
        return value
    if key == "subscription_id":
        return subscription_id_from(value).lower()
    if key == "location_filters":
        return list(value)
    if key in ("parallel_deployments", "resource_count", "failure_percentage"):
        return float(value)
    return value
