"""Tests for package manager resolution."""

import pytest

from create_specra.core.init_impl.package_manager import (
    PackageManager,
    detect_package_manager,
    get_package_manager_command,
    resolve_package_manager,
)

PNPM_AGENT = {"npm_config_user_agent": "pnpm/9.1.0 npm/? node/v20.11.0 linux x64"}
YARN_AGENT = {"npm_config_user_agent": "yarn/1.22.22 npm/? node/v20.11.0 darwin arm64"}
NPM_AGENT = {"npm_config_user_agent": "npm/10.2.4 node/v20.11.0 linux x64 workspaces/false"}


@pytest.mark.parametrize(
    ("environ", "expected"),
    [
        (PNPM_AGENT, PackageManager.PNPM),
        (YARN_AGENT, PackageManager.YARN),
        (NPM_AGENT, PackageManager.NPM),
        ({"npm_config_user_agent": "bun/1.1.0"}, None),
        ({"npm_config_user_agent": ""}, None),
        ({}, None),
    ],
)
def test_detect_package_manager(environ, expected):
    assert detect_package_manager(environ) == expected


def test_override_beats_environment():
    assert resolve_package_manager(PackageManager.PNPM, YARN_AGENT) == PackageManager.PNPM
    assert resolve_package_manager(PackageManager.NPM, PNPM_AGENT) == PackageManager.NPM


def test_environment_beats_default():
    assert resolve_package_manager(None, YARN_AGENT) == PackageManager.YARN


def test_default_is_npm():
    assert resolve_package_manager(None, {}) == PackageManager.NPM


@pytest.mark.parametrize(
    ("kind", "install", "dev"),
    [
        (PackageManager.NPM, "npm install", "npm run dev"),
        (PackageManager.YARN, "yarn install", "yarn dev"),
        (PackageManager.PNPM, "pnpm install", "pnpm run dev"),
    ],
)
def test_commands(kind, install, dev):
    command = get_package_manager_command(kind)
    assert command.kind == kind
    assert command.install == install
    assert command.run("dev") == dev
