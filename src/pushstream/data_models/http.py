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
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel
from pydantic import Discriminator
from pydantic import Field

HTTP_STATUS_OK = 200
HTTP_STATUS_INTERNAL_SERVER_ERROR = 500


class HttpMethod(StrEnum):
    """
    The HTTP methods a request in the demo stream can carry.
    """
    GET = "GET"
    POST = "POST"


class UserRole(StrEnum):
    USER = "user"
    ADMIN = "admin"


class User(BaseModel):
    name: str
    age: int = Field(ge=0)
    roles: list[UserRole] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    is_deleted: bool = False


class RequestBase(BaseModel):
    host: str
    path: str
    params: dict[str, typing.Any] = Field(default_factory=dict)


class GetRequest(RequestBase):
    method: typing.Literal[HttpMethod.GET] = HttpMethod.GET


class PostRequest(RequestBase):
    method: typing.Literal[HttpMethod.POST] = HttpMethod.POST
    body: User


Request = typing.Annotated[GetRequest | PostRequest, Discriminator("method")]


class Response(BaseModel):
    status: int
