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
Polling helpers used to wait for a remediation to settle before it is deleted.
"""

import threading
import time
from typing import Any, Callable, Collection, NamedTuple, Optional, Protocol, Tuple, Union

from pulumi import log

from .client import RemediationsClient
from .errors import (
    CancelFailure,
    MissingFieldError,
    RemediationFailedError,
    TransientFetchError,
    WaitTimeoutError,
)
from .remediation import RemediationId, RemediationProperties, ResourceDiscoveryMode

DEFAULT_POLL_INTERVAL = 10.0
"""Seconds between two polls of the remediation state."""

DEFAULT_TARGET_STATES = frozenset(["Succeeded", "Canceled", "Cancelled", "Failed"])
"""Provisioning states in which a cancelled remediation no longer runs."""

FAILED_STATES = frozenset(["Failed"])


class PollResult(NamedTuple):
    snapshot: Any
    state: str


class StateRefresher(Protocol):
    """
    A source of the current state of a remote operation.
    """

    def poll(self) -> Tuple[Any, str]:
        """
        Fetches the current state and returns a snapshot of the remote object along with its state
        string.  Raises if the state can't be retrieved.
        """
        ...


class Deadline:
    """
    Deadline is an absolute point in time after which waiting should stop, paired with a signal that
    can end the wait early from another thread.
    """

    timeout: Optional[float]
    """
    The number of seconds the deadline was created with, or None if it never expires on its own.
    """

    def __init__(self, timeout: Optional[float] = None, clock: Callable[[], float] = time.monotonic) -> None:
        if timeout is not None and timeout < 0:
            raise ValueError(f"timeout must not be negative, got {timeout}")
        self.timeout = timeout
        self._clock = clock
        self._start = clock()
        self._expires_at = None if timeout is None else self._start + timeout
        self._cancelled = threading.Event()

    @staticmethod
    def after(seconds: float) -> "Deadline":
        return Deadline(seconds)

    def elapsed(self) -> float:
        return self._clock() - self._start

    def remaining(self) -> Optional[float]:
        """
        Seconds left before the deadline, or None if it has no timeout.  Never negative.
        """
        if self._expires_at is None:
            return None
        return max(0.0, self._expires_at - self._clock())

    def cancel(self) -> None:
        self._cancelled.set()

    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def expired(self) -> bool:
        if self._cancelled.is_set():
            return True
        remaining = self.remaining()
        return remaining is not None and remaining <= 0

    def sleep(self, seconds: float) -> bool:
        """
        Blocks for `seconds`, or until the deadline passes or is cancelled, whichever comes first.
        Returns False if the deadline expired.
        """
        remaining = self.remaining()
        if remaining is not None:
            seconds = min(seconds, remaining)
        if seconds > 0:
            self._cancelled.wait(seconds)
        return not self.expired()


class _FuncRefresher:
    def __init__(self, func: Callable[[], Tuple[Any, str]]) -> None:
        self._func = func

    def poll(self) -> Tuple[Any, str]:
        return self._func()


def _as_refresher(refresher: Union[StateRefresher, Callable[[], Tuple[Any, str]]]) -> StateRefresher:
    if hasattr(refresher, "poll"):
        return refresher  # type: ignore
    if callable(refresher):
        return _FuncRefresher(refresher)
    raise TypeError(f"Expected a StateRefresher or a callable, got {type(refresher).__name__}")


def _as_deadline(deadline: Union[Deadline, float, None]) -> Deadline:
    if isinstance(deadline, Deadline):
        return deadline
    return Deadline(deadline)


def wait_for_state(
    refresher: Union[StateRefresher, Callable[[], Tuple[Any, str]]],
    target_states: Collection[str],
    deadline: Union[Deadline, float, None],
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    description: str = "resource",
) -> PollResult:
    """
    Polls `refresher` until it reports one of `target_states` and returns that poll's result.

    The first poll happens immediately, later ones every `poll_interval` seconds.  A failing poll
    stops the wait with a `TransientFetchError`; it is not retried.  Once the deadline has passed or
    was cancelled no further poll is made and a `WaitTimeoutError` is raised.
    """
    if poll_interval <= 0:
        raise ValueError(f"poll_interval must be positive, got {poll_interval}")
    refresher = _as_refresher(refresher)
    deadline = _as_deadline(deadline)

    state = ""
    while not deadline.expired():
        try:
            snapshot, state = refresher.poll()
        except Exception as e:
            raise TransientFetchError(f"waiting for {description}: {e}", description) from e

        if state in target_states:
            log.debug(f"{description} reached state {state!r} after {deadline.elapsed():.1f}s")
            return PollResult(snapshot, state)

        log.debug(f"{description} is in state {state!r}, checking again in {poll_interval}s")
        if not deadline.sleep(poll_interval):
            break

    raise WaitTimeoutError(description, deadline.elapsed(), deadline.timeout, state)


class RemediationStateRefresher:
    """
    Reads the provisioning state of a remediation through a `RemediationsClient`.
    """

    def __init__(self, client: RemediationsClient, id_: RemediationId) -> None:
        self._client = client
        self._id = id_

    def poll(self) -> Tuple[Any, str]:
        properties = self._client.get(self._id)
        if properties is None:
            raise MissingFieldError("properties", self._id.id())
        if properties.provisioning_state is None:
            raise MissingFieldError("properties.provisioningState", self._id.id())
        return properties, properties.provisioning_state


def wait_for_remediation_to_delete(
    properties: Optional[RemediationProperties],
    resource_id: str,
    deadline: Union[Deadline, float, None],
    cancel: Callable[[], Any],
    refresher: Union[StateRefresher, Callable[[], Tuple[Any, str]]],
    *,
    poll_interval: float = DEFAULT_POLL_INTERVAL,
    target_states: Collection[str] = DEFAULT_TARGET_STATES,
    fail_on_failed_state: bool = False,
) -> None:
    """
    A remediation that re-evaluates compliance has to be cancelled before it can be deleted.  For
    such remediations this calls `cancel` once and then waits until `refresher` reports one of
    `target_states`.  Remediations in any other discovery mode, or that are already gone
    (`properties` is None), need no waiting and this returns immediately.

    :param properties: The last known properties of the remediation.
    :param resource_id: The remediation's ID, used in messages only.
    :param deadline: A `Deadline`, or a timeout in seconds.
    :param cancel: Requests the cancellation.  Any exception aborts the wait.
    :param refresher: Reports the remediation's current provisioning state.
    :param fail_on_failed_state: Raise `RemediationFailedError` if the remediation settles as "Failed"
           instead of treating it as done.
    """
    if properties is None:
        return
    if properties.resource_discovery_mode != ResourceDiscoveryMode.RE_EVALUATE_COMPLIANCE:
        return

    log.debug(f"cancelling {resource_id} before deleting it, since it re-evaluates compliance")
    try:
        cancel()
    except Exception as e:
        raise CancelFailure(f"cancelling {resource_id}: {e}", resource_id) from e

    log.debug(f"waiting for {resource_id} to be canceled")
    result = wait_for_state(
        refresher,
        target_states,
        deadline,
        poll_interval=poll_interval,
        description=resource_id,
    )

    if result.state in FAILED_STATES:
        if fail_on_failed_state:
            raise RemediationFailedError(resource_id, result.state)
        log.warn(f"{resource_id} finished in state {result.state!r}, deleting it anyway")
