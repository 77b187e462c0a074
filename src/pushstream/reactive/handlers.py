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
from collections.abc import Callable
from collections.abc import Mapping

from pydantic import BaseModel
from pydantic import ConfigDict

from pushstream.reactive.base.observer_base import ObserverBase


class ObserverHandlers(BaseModel):
    """
    The set of callbacks an Observer delivers signals to. Each callback is independently optional; an absent
    callback is `None`, which is distinct from a callback that does nothing.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    on_next: Callable[[typing.Any], None] | None = None
    on_error: Callable[[typing.Any], None] | None = None
    on_complete: Callable[[], None] | None = None

    @property
    def has_next(self) -> bool:
        return self.on_next is not None

    @property
    def has_error(self) -> bool:
        return self.on_error is not None

    @property
    def has_complete(self) -> bool:
        return self.on_complete is not None

    @classmethod
    def from_observer(cls, observer: ObserverBase) -> "ObserverHandlers":
        """
        Build a handler record which forwards every signal to an existing observer.
        """
        return cls(on_next=observer.on_next, on_error=observer.on_error, on_complete=observer.on_complete)


def as_handlers(on_next: typing.Any = None,
                on_error: Callable[[typing.Any], None] | None = None,
                on_complete: Callable[[], None] | None = None) -> ObserverHandlers:
    """
    Normalize the arguments accepted by `Observable.subscribe` into an `ObserverHandlers` record.

    Args:
        on_next: A callback, an `ObserverHandlers` record, a mapping of handler names to callbacks, an
            `ObserverBase` or `None`.
        on_error: The error callback. Only valid when `on_next` is a callback or `None`.
        on_complete: The completion callback. Only valid when `on_next` is a callback or `None`.

    Raises:
        TypeError: If a record, mapping or observer is combined with separate callbacks.
        pydantic.ValidationError: If a mapping has unknown keys or a value is not callable.
    """
    if isinstance(on_next, (ObserverHandlers, Mapping, ObserverBase)):
        if (on_error is not None or on_complete is not None):
            raise TypeError(f"Cannot combine {type(on_next).__name__} with separate on_error/on_complete callbacks")

        if isinstance(on_next, ObserverHandlers):
            return on_next
        if isinstance(on_next, ObserverBase):
            return ObserverHandlers.from_observer(on_next)
        return ObserverHandlers.model_validate(dict(on_next))

    return ObserverHandlers(on_next=on_next, on_error=on_error, on_complete=on_complete)
