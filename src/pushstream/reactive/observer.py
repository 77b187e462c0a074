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
from enum import StrEnum
from typing import TypeVar

from pushstream.reactive.base.observer_base import ObserverBase
from pushstream.reactive.handlers import ObserverHandlers
from pushstream.reactive.handlers import as_handlers
from pushstream.utils.type_utils import override

logger = logging.getLogger(__name__)

# Contravariant type param: An Observer that can accept type X can also
# accept any supertype of X.
_T_in_contra = TypeVar("_T_in_contra", contravariant=True)  # pylint: disable=invalid-name

Teardown = Callable[[], None]


class ObserverState(StrEnum):
    OPEN = "open"
    CLOSED = "closed"


class Observer(ObserverBase[_T_in_contra]):
    """
    Concrete Observer that delivers signals for a single subscription to an `ObserverHandlers` record.

    The observer starts OPEN and moves to CLOSED exactly once, on the first of `on_error`, `on_complete` or
    `unsubscribe`. A CLOSED observer ignores every further signal. The teardown action installed with
    `set_teardown` runs at most once, when the observer closes, or immediately if it is installed after the
    observer has already closed.

    Exceptions raised by the handlers are not caught and propagate to whoever emitted the signal.
    """

    def __init__(self,
                 on_next: typing.Any = None,
                 on_error: Callable[[typing.Any], None] | None = None,
                 on_complete: Callable[[], None] | None = None) -> None:
        self._handlers: ObserverHandlers = as_handlers(on_next, on_error, on_complete)
        self._state = ObserverState.OPEN
        self._teardown: Teardown | None = None
        self._teardown_installed = False
        self._teardown_ran = False

    @property
    def handlers(self) -> ObserverHandlers:
        return self._handlers

    @property
    def state(self) -> ObserverState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._state is ObserverState.CLOSED

    @override
    def on_next(self, value: _T_in_contra) -> None:
        if self.closed or not self._handlers.has_next:
            return

        self._handlers.on_next(value)

    @override
    def on_error(self, error: object) -> None:
        if self.closed:
            return

        # Close before delivering so the handler cannot trigger a second terminal signal
        self._state = ObserverState.CLOSED
        try:
            if self._handlers.has_error:
                self._handlers.on_error(error)
            else:
                logger.debug("Dropping error with no on_error handler: %r", error)
        finally:
            self._run_teardown()

    @override
    def on_complete(self) -> None:
        if self.closed:
            return

        self._state = ObserverState.CLOSED
        try:
            if self._handlers.has_complete:
                self._handlers.on_complete()
        finally:
            self._run_teardown()

    def unsubscribe(self) -> None:
        """
        Close the observer and run its teardown action. Safe to call any number of times.
        """
        if not self.closed:
            logger.debug("Closing observer %s on unsubscribe", id(self))
            self._state = ObserverState.CLOSED

        self._run_teardown()

    def set_teardown(self, teardown: Teardown | None) -> None:
        """
        Install the action to run when this observer closes. `None` means there is nothing to release.

        Raises:
            RuntimeError: If a teardown has already been installed.
            TypeError: If `teardown` is neither callable nor `None`.
        """
        if self._teardown_installed:
            raise RuntimeError("A teardown action has already been installed on this observer")

        if (teardown is not None and not callable(teardown)):
            raise TypeError(f"Teardown must be a callable or None, not {type(teardown)}")

        self._teardown_installed = True
        self._teardown = teardown

        # Sources that finish synchronously close the observer before returning their teardown
        if self.closed:
            self._run_teardown()

    def _run_teardown(self) -> None:
        if self._teardown is None or self._teardown_ran:
            return

        self._teardown_ran = True
        logger.debug("Running teardown for observer %s", id(self))
        self._teardown()
