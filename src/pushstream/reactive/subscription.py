# SPDX-FileCopyrightText: Copyright (c) 2025, NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import typing
from typing import Generic
from typing import TypeVar

if typing.TYPE_CHECKING:
    from pushstream.reactive.observer import Observer

_T = TypeVar("_T")  # pylint: disable=invalid-name


class Subscription(Generic[_T]):
    """
    Represents a single subscription to an Observable.
    Unsubscribing closes the Observer that was created for it and runs its teardown action.
    """

    __slots__ = ("_observer", )

    def __init__(self, observer: "Observer[_T]"):  # noqa: F821
        self._observer = observer

    @property
    def closed(self) -> bool:
        return self._observer.closed

    def unsubscribe(self) -> None:
        """
        Stop receiving further events. Calling this after the stream has completed or errored is a no-op.
        """
        self._observer.unsubscribe()
