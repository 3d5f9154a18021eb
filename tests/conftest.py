# tests/conftest.py
# Stub HTTP transport and sample SPDX payloads shared by the test modules.
# pyproject.toml puts src/ on sys.path, so `cli`, `core` and `adapters` import directly.

from __future__ import annotations

import httpx
import pytest

from core.config import SPDX_LICENSES_URL, AppSettings
from core.domain.models import LicenseSummary

MIT_DETAILS_URL = "https://spdx.org/licenses/MIT.json"
APACHE_DETAILS_URL = "https://spdx.org/licenses/Apache-2.0.json"
NOTEXT_DETAILS_URL = "https://spdx.org/licenses/NoText.json"

MIT_TEXT = (
    "MIT License\n\nCopyright (c) <year> <copyright holders>\n\n"
    "Permission is hereby granted, free of charge, to any person obtaining a copy "
    "of this software and associated documentation files (the \"Software\"), to deal "
    "in the Software without restriction, including without limitation the rights "
    "to use, copy, modify, merge, publish, distribute, sublicense, and/or sell "
    "copies of the Software.\n"
)


def registry_payload() -> dict:
    return {
        "licenseListVersion": "3.24",
        "releaseDate": "2024-05-22",
        "licenses": [
            {
                "reference": "https://spdx.org/licenses/Apache-2.0.html",
                "isDeprecatedLicenseId": False,
                "detailsUrl": APACHE_DETAILS_URL,
                "referenceNumber": 1,
                "name": "Apache License 2.0",
                "licenseId": "Apache-2.0",
                "seeAlso": ["https://www.apache.org/licenses/LICENSE-2.0"],
                "isOsiApproved": True,
            },
            {
                "reference": "https://spdx.org/licenses/MIT.html",
                "isDeprecatedLicenseId": False,
                "detailsUrl": MIT_DETAILS_URL,
                "referenceNumber": 2,
                "name": "MIT License",
                "licenseId": "MIT",
                "seeAlso": ["https://opensource.org/license/mit/"],
                "isOsiApproved": True,
            },
            {
                "isDeprecatedLicenseId": True,
                "detailsUrl": NOTEXT_DETAILS_URL,
                "name": "License Without Text",
                "licenseId": "NoText",
                "isOsiApproved": False,
            },
        ],
    }


def mit_detail_payload() -> dict:
    return {
        "isDeprecatedLicenseId": False,
        "isFsfLibre": True,
        "licenseText": MIT_TEXT,
        "name": "MIT License",
        "licenseId": "MIT",
        "seeAlso": [
            "https://opensource.org/license/mit/",
            "http://opensource.org/licenses/MIT",
        ],
        "isOsiApproved": True,
    }


def notext_detail_payload() -> dict:
    return {
        "name": "License Without Text",
        "licenseId": "NoText",
        "isOsiApproved": False,
        "isDeprecatedLicenseId": True,
    }


class StubRegistry:
    """Routes GET requests to canned responses and records every requested URL."""

    def __init__(self, routes: dict[str, object] | None = None) -> None:
        self.routes: dict[str, object] = routes if routes is not None else {
            SPDX_LICENSES_URL: registry_payload(),
            MIT_DETAILS_URL: mit_detail_payload(),
            NOTEXT_DETAILS_URL: notext_detail_payload(),
        }
        self.requested: list[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)
        route = self.routes.get(url)
        if route is None:
            return httpx.Response(404, text="not found")
        if isinstance(route, Exception):
            raise route
        if isinstance(route, httpx.Response):
            return route
        return httpx.Response(200, json=route)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport())


@pytest.fixture
def stub_registry() -> StubRegistry:
    return StubRegistry()


@pytest.fixture
def settings(tmp_path) -> AppSettings:
    return AppSettings(cache_enabled=False, cache_dir=tmp_path / "cache")


@pytest.fixture
def summaries() -> list[LicenseSummary]:
    return [LicenseSummary.model_validate(item) for item in registry_payload()["licenses"]]
