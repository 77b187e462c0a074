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

import pytest
from pydantic import ValidationError

from pushstream.reactive.base.observer_base import ObserverBase
from pushstream.reactive.handlers import ObserverHandlers
from pushstream.reactive.handlers import as_handlers


class NullObserver(ObserverBase[int]):

    def on_next(self, value: int) -> None:
        pass

    def on_error(self, error: object) -> None:
        pass

    def on_complete(self) -> None:
        pass


def test_handlers_presence():
    handlers = ObserverHandlers(on_next=print)
    assert handlers.has_next
    assert not handlers.has_error
    assert not handlers.has_complete


def test_handlers_explicit_no_op_is_present():
    handlers = ObserverHandlers(on_complete=lambda: None)
    assert handlers.has_complete


def test_handlers_reject_non_callable():
    with pytest.raises(ValidationError):
        ObserverHandlers(on_next="print")


def test_handlers_reject_unknown_field():
    with pytest.raises(ValidationError):
        ObserverHandlers(next=print)


def test_handlers_frozen():
    handlers = ObserverHandlers()
    with pytest.raises(ValidationError):
        handlers.on_next = print


def test_as_handlers_from_callbacks():
    handlers = as_handlers(print, None, print)
    assert handlers.on_next is print
    assert handlers.on_complete is print
    assert not handlers.has_error


def test_as_handlers_passes_record_through():
    handlers = ObserverHandlers(on_error=print)
    assert as_handlers(handlers) is handlers


def test_as_handlers_from_observer():
    observer = NullObserver()
    handlers = as_handlers(observer)
    assert handlers.on_next == observer.on_next
    assert handlers.on_error == observer.on_error
    assert handlers.on_complete == observer.on_complete


@pytest.mark.parametrize("source", [ObserverHandlers(), {"on_next": print}, NullObserver()])
def test_as_handlers_rejects_mixed_arguments(source):
    with pytest.raises(TypeError):
        as_handlers(source, on_error=print)
