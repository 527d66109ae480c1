# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Shared pytest fixtures for quadbench tests.

Kept minimal: just the config files several test modules need.
"""

import textwrap
from pathlib import Path

import pytest


@pytest.fixture()
def tmp_config_file(tmp_path: Path) -> Path:
    """The smallest config that passes schema validation."""
    config_content = textwrap.dedent("""\
        global:
          config_version: "1.0.0"
          project_name: "quadbench-test"
          log_level: "DEBUG"
    """)
    config_file = tmp_path / "test_config.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def small_sweep_config_file(tmp_path: Path) -> Path:
    """A sweep small enough to run in a subprocess within a test: n = 64, 128, 256."""
    config_content = textwrap.dedent("""\
        global:
          config_version: "1.0.0"
          project_name: "quadbench-test"
          log_level: "WARNING"
        sweep:
          start_size: 64
          growth_factor: 2
          max_multiplier: 4
          chunk_size: 16
          workers: 2
    """)
    config_file = tmp_path / "small_sweep.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def invalid_config_file(tmp_path: Path) -> Path:
    """Valid YAML that fails schema validation (missing config_version)."""
    config_content = textwrap.dedent("""\
        global:
          project_name: "quadbench-test"
    """)
    config_file = tmp_path / "invalid_config.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def broken_yaml_file(tmp_path: Path) -> Path:
    """A file that isn't valid YAML at all."""
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("{{not: yaml: at: all:::", encoding="utf-8")
    return config_file
