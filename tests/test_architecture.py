"""Architectural boundary tests using pytest-archon.

These tests verify that the codebase follows clean architecture principles:
- Domain layer has no dependencies on adapters or application
- Application services don't depend on adapters
- Adapters can depend on domain and application
"""

from pytest_archon import archrule


def test_domain_models_have_no_dependencies() -> None:
    """Domain models should not import any other modules except standard library and domain itself."""
    (
        archrule("domain models", comment="Domain models should be independent")
        .match("session_coordination.domain.models*")
        .should_not_import("session_coordination.adapters*")
        .should_not_import("session_coordination.application*")
        .should_not_import("session_coordination.domain.contracts*")
        .may_import("session_coordination.domain.models*")
        .check("session_coordination")
    )


def test_domain_contracts_have_no_dependencies() -> None:
    """Domain contracts (protocols/interfaces) should not import adapters or application."""
    (
        archrule("domain contracts", comment="Domain contracts should be independent")
        .match("session_coordination.domain.contracts*")
        .should_not_import("session_coordination.adapters*")
        .should_not_import("session_coordination.application*")
        .may_import("session_coordination.domain.contracts*")
        .may_import("session_coordination.domain.models*")
        .check("session_coordination")
    )


def test_application_services_dont_import_adapters() -> None:
    """Application services should not depend on adapters (infrastructure layer)."""
    (
        archrule(
            "application services", comment="Application services should not depend on adapters"
        )
        .match("session_coordination.application*")
        .should_not_import("session_coordination.adapters*")
        .may_import("session_coordination.domain*")
        .may_import("session_coordination.application*")
        .check("session_coordination")
    )


def test_no_circular_dependencies_in_domain() -> None:
    """Domain layer should not have circular dependencies."""
    (
        archrule("domain no cycles", comment="Domain layer should not have circular dependencies")
        .match("session_coordination.domain*")
        .should_not_import("session_coordination.adapters*")
        .should_not_import("session_coordination.application*")
        .may_import("session_coordination.domain*")
        .check("session_coordination", only_direct_imports=True)
    )
