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

import os
import sys
import textwrap

import pytest

TESTS_DIR = os.path.dirname(__file__)
PROJECT_DIR = os.path.dirname(TESTS_DIR)
SRC_DIR = os.path.join(PROJECT_DIR, "src")
sys.path.append(SRC_DIR)


@pytest.fixture(name="restore_environ")
def restore_environ_fixture():
    orig_vars = os.environ.copy()
    yield os.environ

    # Iterating over a copy of the keys as we will potentially be deleting keys in the loop
    for key in list(os.environ.keys()):
        orig_val = orig_vars.get(key)
        if orig_val is not None:
            os.environ[key] = orig_val
        else:
            del (os.environ[key])


@pytest.fixture(name="requests_file")
def requests_file_fixture(tmp_path) -> str:
    requests_yaml = textwrap.dedent("""
        - method: POST
          host: ${REQUEST_HOST:-service.example}
          path: user
          body:
            name: User Name
            age: 26
            roles: [user, admin]
        - method: GET
          host: ${REQUEST_HOST:-service.example}
          path: user
          params:
            id: 3f5h67s4s
        """)

    path = tmp_path / "requests.yaml"
    path.write_text(requests_yaml, encoding="utf-8")
    return str(path)
