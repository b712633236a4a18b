"""
================================================================================
Fixture Loader Module
================================================================================

Loads static scenario input data (credentials and known-bad values) from
JSON or YAML files in the fixtures directory.

Key Features:
- Name-based lookup (`loader.load("users")` -> users.json / users.yaml)
- Loaded once per run and cached
- Structural validation of the user fixture

================================================================================
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from loguru import logger


DEFAULT_FIXTURES_DIR = Path(__file__).parent.parent / "fixtures"

FIXTURE_EXTENSIONS = (".json", ".yaml", ".yml")


class FixtureError(Exception):
    """Raised when a fixture file is missing, malformed or fails validation."""
    pass


# ================================================================================
# Data Models
# ================================================================================

@dataclass(frozen=True)
class Credential:
    """Email/password pair typed into the authentication forms."""
    email: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class UserFixtures:
    """The `users` fixture: one known account, one sign-up template, bad values."""
    valid_user: Credential
    new_user: Credential
    invalid_emails: List[str]
    invalid_passwords: List[str]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserFixtures":
        """
        Build from the raw fixture mapping.

        Raises:
            FixtureError: When a record is missing or a value list repeats itself
        """
        if not isinstance(data, dict):
            raise FixtureError("users fixture must be a mapping")

        return cls(
            valid_user=_credential(data, "validUser"),
            new_user=_credential(data, "newUser"),
            invalid_emails=_distinct_values(data, "invalidEmails"),
            invalid_passwords=_distinct_values(data, "invalidPasswords"),
        )


def _credential(data: Dict[str, Any], key: str) -> Credential:
    record = data.get(key)
    if not isinstance(record, dict):
        raise FixtureError(f"users fixture is missing the '{key}' record")

    missing = [name for name in ("email", "password") if not isinstance(record.get(name), str)]
    if missing:
        raise FixtureError(f"'{key}' is missing string field(s): {', '.join(missing)}")

    return Credential(email=record["email"], password=record["password"])


def _distinct_values(data: Dict[str, Any], key: str) -> List[str]:
    values = data.get(key)
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise FixtureError(f"'{key}' must be a list of strings")
    if not values:
        raise FixtureError(f"'{key}' must not be empty")

    seen = set()
    duplicates = []
    for value in values:
        if value in seen:
            duplicates.append(value)
        seen.add(value)
    if duplicates:
        raise FixtureError(f"'{key}' contains duplicate values: {duplicates!r}")

    return list(values)


# ================================================================================
# Loader
# ================================================================================

class FixtureLoader:
    """
    Resolves fixtures by name inside a directory and caches the parsed data.

    Example:
        loader = FixtureLoader()
        users = loader.users()
        print(users.valid_user.email)
    """

    def __init__(self, fixtures_directory: Optional[Union[str, Path]] = None):
        self.fixtures_dir = Path(fixtures_directory or DEFAULT_FIXTURES_DIR)
        self._cache: Dict[str, Any] = {}

    def resolve(self, name: str) -> Path:
        """Find the file backing fixture `name`, trying each supported extension."""
        for extension in FIXTURE_EXTENSIONS:
            candidate = self.fixtures_dir / f"{name}{extension}"
            if candidate.exists():
                return candidate

        raise FixtureError(
            f"Fixture '{name}' not found in {self.fixtures_dir} "
            f"(tried {', '.join(FIXTURE_EXTENSIONS)})"
        )

    def load(self, name: str) -> Any:
        """
        Load raw fixture data.

        Args:
            name: Fixture name without extension

        Returns:
            Parsed JSON/YAML content
        """
        if name in self._cache:
            return self._cache[name]

        path = self.resolve(name)
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise FixtureError(f"Failed to parse fixture {path}: {e}") from e

        logger.debug(f"Loaded fixture '{name}' from {path}")
        self._cache[name] = data
        return data

    def users(self) -> UserFixtures:
        """Load and validate the `users` fixture."""
        return UserFixtures.from_dict(self.load("users"))

    def clear_cache(self) -> None:
        self._cache.clear()


__all__ = [
    "Credential",
    "UserFixtures",
    "FixtureLoader",
    "FixtureError",
]
