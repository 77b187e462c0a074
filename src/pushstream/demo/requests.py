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
from collections.abc import Sequence

from pydantic import TypeAdapter

from pushstream.data_models.http import HTTP_STATUS_INTERNAL_SERVER_ERROR
from pushstream.data_models.http import HTTP_STATUS_OK
from pushstream.data_models.http import GetRequest
from pushstream.data_models.http import PostRequest
from pushstream.data_models.http import Request
from pushstream.data_models.http import Response
from pushstream.data_models.http import User
from pushstream.data_models.http import UserRole
from pushstream.reactive.observable import Observable
from pushstream.utils.io.yaml_tools import yaml_load
from pushstream.utils.type_utils import StrPath

logger = logging.getLogger(__name__)

_REQUEST_LIST_ADAPTER = TypeAdapter(list[Request])


def build_mock_requests() -> list[Request]:
    user = User(name="User Name", age=26, roles=[UserRole.USER, UserRole.ADMIN])

    return [
        PostRequest(host="service.example", path="user", body=user),
        GetRequest(host="service.example", path="user", params={"id": "3f5h67s4s"}),
    ]


def load_requests(path: StrPath) -> list[Request]:
    """
    Load a list of requests from a YAML file. Each entry is validated against the request models, using the
    `method` field to select between GET and POST.

    Raises:
        ValueError: If the file is not valid YAML.
        pydantic.ValidationError: If an entry does not describe a valid request.
    """
    document = yaml_load(path)

    if document is None:
        return []

    return _REQUEST_LIST_ADAPTER.validate_python(document)


def handle_request(request: Request) -> Response:
    logger.info("Request handled: %s %s/%s", request.method, request.host, request.path)
    return Response(status=HTTP_STATUS_OK)


def handle_error(error: object) -> Response:
    logger.error("Error occurred: %s", error)
    return Response(status=HTTP_STATUS_INTERNAL_SERVER_ERROR)


def handle_complete() -> None:
    logger.info("complete")


def run_request_stream(requests: Sequence[Request], keep_subscribed: bool = False) -> list[Response]:
    """
    Stream `requests` through an Observable, handling each one and collecting the responses.

    Args:
        requests (Sequence[Request]): The requests to emit, in order.
        keep_subscribed (bool): When False, the subscription is explicitly unsubscribed once the stream has
            been consumed.

    Returns:
        list[Response]: One response per request, followed by an error response if the stream errored.
    """
    responses: list[Response] = []

    requests_stream = Observable.from_iterable(requests)
    subscription = requests_stream.subscribe(on_next=lambda request: responses.append(handle_request(request)),
                                             on_error=lambda error: responses.append(handle_error(error)),
                                             on_complete=handle_complete)

    if not keep_subscribed:
        subscription.unsubscribe()

    return responses
