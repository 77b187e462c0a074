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

import logging
import typing
from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Mapping
from typing import TypeVar

from pushstream.reactive.base.observable_base import ObservableBase
from pushstream.reactive.base.observer_base import ObserverBase
from pushstream.reactive.handlers import ObserverHandlers
from pushstream.reactive.observer import Observer
from pushstream.reactive.observer import Teardown
from pushstream.reactive.subscription import Subscription
from pushstream.utils.type_utils import override

logger = logging.getLogger(__name__)

# Covariant type param: An Observable producing type X can also produce
# a subtype of X.
_T_out_co = TypeVar("_T_out_co", covariant=True)  # pylint: disable=invalid-name
_T = TypeVar("_T")  # pylint: disable=invalid-name

OnNext = Callable[[_T], None]
OnError = Callable[[typing.Any], None]
OnComplete = Callable[[], None]

SubscribeFn = Callable[[Observer[_T]], Teardown | None]


class Observable(ObservableBase[_T_out_co]):
    """
    A reusable description of a synchronous, push-based production process.

    The subscribe function is stored and only runs when `subscribe` is called, once per call, with a fresh
    Observer. All of its emissions happen before `subscribe` returns. Subclasses may override
    `_subscribe_core` instead of passing a subscribe function.
    """

    __slots__ = ("_subscribe_fn", )

    def __init__(self, subscribe_fn: "SubscribeFn[_T_out_co] | None" = None) -> None:
        if (subscribe_fn is not None and not callable(subscribe_fn)):
            raise TypeError(f"Subscribe function must be callable, not {type(subscribe_fn)}")

        self._subscribe_fn = subscribe_fn

    @classmethod
    def from_iterable(cls, values: Iterable[_T]) -> "Observable[_T]":
        """
        Create an Observable which emits every item of `values` in order and then completes.

        The values are captured when the Observable is created so that every subscription replays the same
        sequence, even when `values` is a one-shot iterator.
        """
        snapshot = tuple(values)

        def _emit_all(observer: Observer[_T]) -> Teardown:
            for value in snapshot:
                if observer.closed:
                    break
                observer.on_next(value)

            observer.on_complete()

            def _teardown() -> None:
                logger.debug("Unsubscribed from iterable source of %d items", len(snapshot))

            return _teardown

        return cls(_emit_all)

    @classmethod
    def of(cls, *values: _T) -> "Observable[_T]":
        return cls.from_iterable(values)

    def _subscribe_core(self, observer: Observer) -> Teardown | None:
        """
        Runs the production logic for one subscription and returns its teardown action. By default this
        calls the subscribe function given to the constructor.
        """
        if self._subscribe_fn is None:
            raise NotImplementedError("Observable._subscribe_core must be implemented by subclasses "
                                      "when no subscribe function is provided")

        return self._subscribe_fn(observer)

    @override
    def subscribe(self,
                  on_next: ObserverBase[_T_out_co] | ObserverHandlers | Mapping[str, typing.Any] | OnNext[_T_out_co]
                  | None = None,
                  on_error: OnError | None = None,
                  on_complete: OnComplete | None = None) -> Subscription:

        observer: Observer[_T_out_co] = Observer(on_next, on_error, on_complete)

        teardown = self._subscribe_core(observer)
        observer.set_teardown(teardown)

        return Subscription(observer)
