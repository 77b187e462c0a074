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
from pathlib import Path

import click
from pydantic import ValidationError

# Define log level choices
LOG_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL
}


def setup_logging(log_level: str):
    """Configure logging with the specified level"""
    numeric_level = LOG_LEVELS.get(log_level.upper(), logging.INFO)
    logging.basicConfig(level=numeric_level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    return numeric_level


def get_version():
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version
    try:
        return version("pushstream")
    except PackageNotFoundError:
        return "unknown"


@click.group(name="pushstream", chain=False, invoke_without_command=True, no_args_is_help=True)
@click.version_option(version=get_version())
@click.option('--log-level',
              type=click.Choice(list(LOG_LEVELS.keys()), case_sensitive=False),
              default='INFO',
              help='Set the logging level')
@click.pass_context
def cli(ctx: click.Context, log_level: str):
    """Main entrypoint for the pushstream CLI"""

    ctx_dict = ctx.ensure_object(dict)

    numeric_level = setup_logging(log_level)
    logging.getLogger("pushstream").setLevel(numeric_level)

    ctx_dict["log_level"] = log_level


@cli.command(name="demo")
@click.option("--requests_file",
              type=click.Path(exists=True, file_okay=True, dir_okay=False, path_type=Path),
              default=None,
              help="YAML file with the list of requests to stream. Uses the built-in sample requests when omitted.")
@click.option("--keep_subscribed",
              is_flag=True,
              default=False,
              help="Skip the explicit unsubscribe once the stream has been consumed.")
def demo_command(requests_file: Path | None, keep_subscribed: bool):
    """Stream a list of requests through an Observable and print each response"""
    # load function level dependencies
    from pushstream.demo.requests import build_mock_requests
    from pushstream.demo.requests import load_requests
    from pushstream.demo.requests import run_request_stream

    if requests_file is None:
        requests = build_mock_requests()
    else:
        try:
            requests = load_requests(requests_file)
        except (ValueError, ValidationError) as e:
            click.echo(click.style(f"✗ Failed to load requests from {requests_file}", fg="red"))
            raise click.ClickException(str(e)) from e

    responses = run_request_stream(requests, keep_subscribed=keep_subscribed)

    for request, response in zip(requests, responses):
        click.echo(f"{request.method} {request.host}/{request.path} -> {response.status}")

    click.echo(f"Handled {len(responses)} request(s)")
