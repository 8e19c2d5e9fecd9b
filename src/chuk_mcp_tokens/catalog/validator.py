"""
Catalog Validator - checks a token catalog against a design file.

Validates:
- Theme ids are unique
- Themes carry at least one reference map
- Catalog variable ids exist in the design file
- Variable aliases resolve (no cycles, no missing targets)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chuk_mcp_tokens.catalog.index import TokenCatalog
from chuk_mcp_tokens.matching.alias import AliasResolver
from chuk_mcp_tokens.models.variables import VariableSet, is_alias


class ValidationSeverity(str, Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Catalog cannot be trusted
    WARNING = "warning"  # Some tokens will not match or apply
    INFO = "info"  # Informational only


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: ValidationSeverity
    code: str
    message: str
    location: str | None = None

    def __str__(self) -> str:
        prefix = f"[{self.severity.value.upper()}]"
        location = f" at {self.location}" if self.location else ""
        return f"{prefix} {self.code}: {self.message}{location}"

    def to_dict(self) -> dict[str, str | None]:
        return {
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "location": self.location,
        }


class ValidationResult:
    """Result of validating a catalog."""

    def __init__(self) -> None:
        self.issues: list[ValidationIssue] = []

    def add_error(self, code: str, message: str, location: str | None = None) -> None:
        self.issues.append(ValidationIssue(ValidationSeverity.ERROR, code, message, location))

    def add_warning(self, code: str, message: str, location: str | None = None) -> None:
        self.issues.append(ValidationIssue(ValidationSeverity.WARNING, code, message, location))

    def add_info(self, code: str, message: str, location: str | None = None) -> None:
        self.issues.append(ValidationIssue(ValidationSeverity.INFO, code, message, location))

    @property
    def is_valid(self) -> bool:
        """Return True if no errors (warnings/info are OK)."""
        return not any(i.severity == ValidationSeverity.ERROR for i in self.issues)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    def codes(self) -> list[str]:
        """Issue codes in discovery order."""
        return [i.code for i in self.issues]

    def __bool__(self) -> bool:
        return self.is_valid

    def __str__(self) -> str:
        if not self.issues:
            return "Validation passed: no issues found"
        return "\n".join(str(issue) for issue in self.issues)


class CatalogValidator:
    """Validates a token catalog, optionally against the design file's variables."""

    def validate(
        self,
        catalog: TokenCatalog,
        variables: VariableSet | None = None,
    ) -> ValidationResult:
        """
        Validate a catalog.

        Args:
            catalog: The catalog to validate
            variables: The design file's variables; cross-checks are skipped without it

        Returns:
            ValidationResult with any issues found
        """
        result = ValidationResult()

        self._validate_themes(catalog, result)
        if variables is not None:
            self._validate_references(catalog, variables, result)
            self._validate_aliases(variables, result)

        return result

    def _validate_themes(self, catalog: TokenCatalog, result: ValidationResult) -> None:
        if not catalog.themes:
            result.add_warning("NO_THEMES", "Catalog has no themes", "themes")
            return

        seen: set[str] = set()
        for theme in catalog.themes:
            if theme.id:
                if theme.id in seen:
                    result.add_error(
                        "DUPLICATE_THEME_ID",
                        f"Duplicate theme id: {theme.id}",
                        f"themes/{theme.name}",
                    )
                seen.add(theme.id)

            if not theme.variable_references and not theme.style_references:
                result.add_info(
                    "THEME_WITHOUT_REFERENCES",
                    f"Theme '{theme.name}' has no variable or style references",
                    f"themes/{theme.name}",
                )

    def _validate_references(
        self,
        catalog: TokenCatalog,
        variables: VariableSet,
        result: ValidationResult,
    ) -> None:
        for variable_id in catalog.variable_ids:
            if variables.get(variable_id) is not None:
                continue
            paths = ", ".join(t.token_path for t in catalog.tokens_for_variable(variable_id))
            result.add_warning(
                "UNKNOWN_VARIABLE",
                f"Variable {variable_id} is not in the design file (tokens: {paths})",
                f"variables/{variable_id}",
            )

    def _validate_aliases(self, variables: VariableSet, result: ValidationResult) -> None:
        resolver = AliasResolver(variables)
        for variable in variables.variables:
            for mode_id, value in variable.values_by_mode.items():
                if not is_alias(value):
                    continue
                # The variable itself counts as visited so self-cycles are caught
                if not resolver.is_resolvable(value, visited={variable.id}):
                    result.add_warning(
                        "UNRESOLVED_ALIAS",
                        f"Alias on '{variable.name}' does not resolve",
                        f"variables/{variable.name}/{mode_id}",
                    )
