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
Errors raised by the remediation provider.  Every error carries the ID of the remediation it
concerns so that it can be surfaced to the Pulumi CLI without further context.
"""

from typing import Optional

from pulumi import RunError


class RemediationError(RunError):
    """
    Base class for all errors raised while managing a policy remediation.
    """

    resource_id: str
    """
    The ID of the remediation the error is about.
    """

    def __init__(self, message: str, resource_id: str) -> None:
        super().__init__(message)
        self.resource_id = resource_id


class NotFoundError(RemediationError):
    """
    The remediation does not exist in the remote service.
    """

    def __init__(self, resource_id: str) -> None:
        super().__init__(f"{resource_id} was not found", resource_id)


class ResourceExistsError(RemediationError):
    """
    A remediation with the same ID already exists and needs to be imported instead of created.
    """

    def __init__(self, resource_id: str) -> None:
        super().__init__(
            f"A resource with the ID \"{resource_id}\" already exists - to be managed via Pulumi "
            + "this resource needs to be imported into the state, for example with `pulumi import`",
            resource_id,
        )


class MissingFieldError(RemediationError):
    """
    A required field was absent from a response returned by the remote service.
    """

    field: str
    """
    The path of the missing field, e.g. `properties.provisioningState`.
    """

    def __init__(self, field: str, resource_id: str) -> None:
        super().__init__(f"`{field}` was nil for {resource_id}", resource_id)
        self.field = field


class TransientFetchError(RemediationError):
    """
    Fetching the current state failed while polling.  The wait is abandoned; it is not retried.
    """


class CancelFailure(RemediationError):
    """
    The request to cancel a running remediation failed.
    """


class WaitTimeoutError(RemediationError):
    """
    The remediation did not reach a terminal state before the deadline.
    """

    elapsed: float
    """
    Seconds spent waiting before giving up.
    """

    timeout: Optional[float]
    """
    The configured timeout in seconds, if the deadline had one.
    """

    def __init__(self, resource_id: str, elapsed: float, timeout: Optional[float], last_state: str = "") -> None:
        message = f"timeout while waiting for {resource_id} after {elapsed:.1f}s"
        if timeout is not None:
            message += f" (timeout: {timeout:.1f}s)"
        if last_state:
            message += f", last state: {last_state!r}"
        super().__init__(message, resource_id)
        self.elapsed = elapsed
        self.timeout = timeout
        self.last_state = last_state


class RemediationFailedError(RemediationError):
    """
    The remediation settled in a failed state and the provider is configured to treat that as an error.
    """

    def __init__(self, resource_id: str, state: str) -> None:
        super().__init__(f"{resource_id} finished in state {state!r}", resource_id)
        self.state = state
