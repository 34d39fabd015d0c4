"""Test module imports and package functionality."""

from __future__ import annotations

import importlib
from types import ModuleType

import pytest

MODULES = [
    "webhook_service",
    "webhook_service.exceptions",
    "webhook_service.config",
    "webhook_service.config.loader",
    "webhook_service.config.settings",
    "webhook_service.delivery",
    "webhook_service.delivery.classifier",
    "webhook_service.delivery.dispatcher",
    "webhook_service.delivery.rate_limit",
    "webhook_service.delivery.transport",
    "webhook_service.payload",
    "webhook_service.payload.color",
    "webhook_service.payload.embed",
    "webhook_service.payload.message",
    "webhook_service.payload.models",
    "webhook_service.payload.validation",
    "webhook_service.types",
    "webhook_service.types.models",
    "webhook_service.types.protocols",
    "webhook_service.utils",
    "webhook_service.utils.logging",
    "webhook_service.utils.sanitization",
]


class TestCoreImports:
    """Test that every module can be imported successfully."""

    @pytest.mark.parametrize("name", MODULES)
    def test_import_module(self, name: str) -> None:
        module = importlib.import_module(name)
        assert isinstance(module, ModuleType)


class TestPackageAttributes:
    """Test that the package exposes its public API."""

    def test_version(self) -> None:
        import webhook_service

        assert webhook_service.__version__ == "1.0.0"

    def test_public_names_resolve(self) -> None:
        import webhook_service

        for name in webhook_service.__all__:
            assert getattr(webhook_service, name) is not None
