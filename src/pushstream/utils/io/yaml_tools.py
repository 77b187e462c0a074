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

import expandvars
import yaml

from pushstream.utils.type_utils import StrPath

logger = logging.getLogger(__name__)


def yaml_load(path: StrPath) -> typing.Any:
    """
    Load a YAML file, interpolating environment variables in the format ${VAR:-default_value}.

    Args:
        path (StrPath): The path to the YAML file to load.

    Returns:
        typing.Any: The parsed YAML document.
    """

    with open(path, "r", encoding="utf-8") as stream:
        return yaml_loads(stream.read())


def yaml_loads(document: str) -> typing.Any:
    """
    Parse a YAML string, interpolating environment variables in the format ${VAR:-default_value}. Unset
    variables without a default are replaced with an empty string.

    Raises:
        ValueError: If the document is not valid YAML.
    """

    interpolated = expandvars.expandvars(document)

    try:
        return yaml.safe_load(interpolated)
    except yaml.YAMLError as e:
        logger.error("Error loading YAML: %s", interpolated, exc_info=True)
        raise ValueError(f"Error loading YAML: {e}") from e
