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
Provider-wide settings, read from the stack configuration under the `policyinsights` namespace.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pulumi import ConfigTypeError
from pulumi.dynamic import Config

from .waiter import DEFAULT_POLL_INTERVAL

CONFIG_NAMESPACE = "policyinsights"

DEFAULT_DELETE_TIMEOUT = 30 * 60.0


@dataclass
class ProviderSettings:
    subscription_id: Optional[str] = None
    """The subscription to use when a resource doesn't name one."""
    poll_interval: float = DEFAULT_POLL_INTERVAL
    """Seconds between polls while waiting for a remediation to be canceled."""
    delete_timeout: float = DEFAULT_DELETE_TIMEOUT
    """Seconds to wait for a remediation to be canceled before deleting it."""
    fail_on_failed_state: bool = False
    """Fail the delete when the canceled remediation settles as "Failed"."""

    @staticmethod
    def from_config(config: Config) -> "ProviderSettings":
        settings = ProviderSettings()
        subscription_id = _get(config, "subscriptionId")
        if subscription_id is not None:
            settings.subscription_id = str(subscription_id)

        poll_interval = _get_float(config, "pollInterval")
        if poll_interval is not None:
            settings.poll_interval = poll_interval

        delete_timeout = _get_float(config, "deleteTimeout")
        if delete_timeout is not None:
            settings.delete_timeout = delete_timeout

        fail_on_failed_state = _get_bool(config, "failOnFailedState")
        if fail_on_failed_state is not None:
            settings.fail_on_failed_state = fail_on_failed_state
        return settings


def _full_key(key: str) -> str:
    return f"{CONFIG_NAMESPACE}:{key}"


def _get(config: Config, key: str) -> Any:
    return config.get(_full_key(key))


def _get_float(config: Config, key: str) -> Optional[float]:
    v = _get(config, key)
    if v is None:
        return None
    try:
        result = float(v)
    except (TypeError, ValueError) as e:
        raise ConfigTypeError(_full_key(key), v, "float") from e
    if result <= 0:
        raise ConfigTypeError(_full_key(key), v, "positive float")
    return result


def _get_bool(config: Config, key: str) -> Optional[bool]:
    v = _get(config, key)
    if v is None:
        return None
    if isinstance(v, bool):
        return v
    if v in ["true", "True"]:
        return True
    if v in ["false", "False"]:
        return False
    raise ConfigTypeError(_full_key(key), v, "bool")
