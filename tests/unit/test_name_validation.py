"""Tests for project name validation."""

import pytest

from create_specra.core.errors import InvalidNameError
from create_specra.core.init_impl.validation import (
    validate_package_name,
    validate_project_name,
)


@pytest.mark.parametrize(
    "name",
    [
        "my-docs",
        "docs",
        "my_docs",
        "my.docs",
        "docs2",
        "a",
        "@acme/docs",
        "x" * 214,
    ],
)
def test_valid_names(name: str):
    result = validate_package_name(name)
    assert result.is_valid
    assert result.errors == ()


@pytest.mark.parametrize("name", ["MyDocs", "my-Docs", "DOCS", "My Docs", "my docs", "docs\t", " docs"])
def test_uppercase_or_whitespace_is_an_error(name: str):
    assert validate_package_name(name).errors


@pytest.mark.parametrize(
    ("name", "message"),
    [
        ("", "name length must be greater than zero"),
        (".docs", "name cannot start with a period"),
        ("_docs", "name cannot start with an underscore"),
        (" docs ", "name cannot contain leading or trailing spaces"),
        ("node_modules", "node_modules is a blocked name"),
        ("favicon.ico", "favicon.ico is a blocked name"),
        ("docs/site", "name can only contain URL-friendly characters"),
        ("doc$", "name can only contain URL-friendly characters"),
        ("Docs", "name can no longer contain capital letters"),
        ("x" * 215, "name can no longer contain more than 214 characters"),
        ("fs", "fs is a core module name"),
        ("http", "http is a core module name"),
        ("docs!", "name can no longer contain special characters (\"~'!()*\")"),
        ("@acme/do(cs)", "name can no longer contain special characters (\"~'!()*\")"),
        ("@ac me/docs", "name can only contain URL-friendly characters"),
    ],
)
def test_error_messages(name: str, message: str):
    assert message in validate_package_name(name).errors


def test_space_separated_name_reports_every_problem():
    errors = validate_package_name("My Docs").errors
    assert "name can only contain URL-friendly characters" in errors
    assert "name can no longer contain capital letters" in errors


def test_discouraged_segments_are_warnings_only():
    result = validate_package_name("docs-js")
    assert result.is_valid
    assert result.warnings == ("name should not contain 'js' as it is redundant for npm packages",)

    assert validate_package_name("node-docs").warnings
    assert validate_package_name("nodejs-docs").warnings == ()


def test_validate_project_name_returns_warnings():
    result = validate_project_name("my-docs-js")
    assert result.warnings


def test_validate_project_name_raises_with_formatted_errors():
    with pytest.raises(InvalidNameError) as exc_info:
        validate_project_name("My Docs")

    error = exc_info.value
    assert error.name == "My Docs"
    assert not error.validation.is_valid
    assert "npm naming restrictions" in error.message
    assert "    * name can no longer contain capital letters" in error.message
