"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application
- Application services don't depend on adapters
- Only the CLI wires adapters and services together
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should only import the standard library, each other and domain errors."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("city_distance.domain.models*")
        .should_not_import("city_distance.adapters*")
        .should_not_import("city_distance.application*")
        .should_not_import("city_distance.domain.ports*")
        .should_not_import("city_distance.domain.distance")
        .may_import("city_distance.domain.models*")
        .may_import("city_distance.domain.errors")
        .check("city_distance")
    )


def test_domain_does_not_import_outer_layers() -> None:
    """Nothing in the domain layer should reach for adapters, application or the CLI."""
    (
        archrule("domain layer", comment="Domain should not depend on outer layers")
        .match("city_distance.domain*")
        .should_not_import("city_distance.adapters*")
        .should_not_import("city_distance.application*")
        .should_not_import("city_distance.cli")
        .should_not_import("aiohttp*")
        .check("city_distance")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("city_distance.application*")
        .should_not_import("city_distance.adapters*")
        .should_not_import("city_distance.cli")
        .check("city_distance")
    )


def test_adapters_dont_import_application_or_cli() -> None:
    """Adapters implement ports and must not call back into use cases or the CLI."""
    (
        archrule("adapters", comment="Adapters should only depend on the domain")
        .match("city_distance.adapters*")
        .should_not_import("city_distance.application*")
        .should_not_import("city_distance.cli")
        .check("city_distance")
    )
