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


from typing import Protocol

from .remediation import RemediationId, RemediationProperties


class RemediationsClient(Protocol):
    """
    The operations the provider needs from the Policy Insights remediations API.  Transport,
    authentication and retries of transient HTTP failures are the implementation's concern.

    Implementations raise `NotFoundError` when the remediation does not exist.
    """

    def get(self, id_: RemediationId) -> RemediationProperties:
        ...

    def create_or_update(self, id_: RemediationId, properties: RemediationProperties) -> RemediationProperties:
        ...

    def cancel(self, id_: RemediationId) -> None:
        ...

    def delete(self, id_: RemediationId) -> None:
        ...
