"""Shared pytest fixtures for sdkmodels tests."""

from fixtures.declaration_fixtures import provider_texts  # noqa: F401
from fixtures.fs_fixtures import (  # noqa: F401
    default_config,
    project_env,
    settings_factory,
)
from fixtures.registry_fixtures import query, registry  # noqa: F401
