"""Shared pytest fixtures for headless-forms tests."""

from pathlib import Path
from typing import Any

import pytest

from headless_forms.core.decorator import FormDefinitionDecorator


@pytest.fixture
def fixtures_dir() -> Path:
    """Return path to fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def contact_definition() -> dict[str, Any]:
    """Return a two-page contact form as built by the form framework."""
    return {
        "identifier": "contact",
        "type": "Form",
        "label": "Contact",
        "prototypeName": "standard",
        "renderingOptions": {"submitButtonLabel": "Submit"},
        "i18n": {"properties": {"form.submit": "Send"}},
        "renderables": [
            {
                "identifier": "page-1",
                "type": "Page",
                "label": "Your details",
                "renderingOptions": {"nextButtonLabel": "Next"},
                "renderables": [
                    {
                        "identifier": "name",
                        "type": "Text",
                        "label": "Name",
                        "defaultValue": "",
                        "properties": {
                            "fluidAdditionalAttributes": {"placeholder": "Jane Doe"},
                            "elementDescription": "Your full name",
                        },
                        "validators": [{"identifier": "NotEmpty"}],
                    },
                    {
                        "identifier": "email",
                        "type": "Email",
                        "label": "Email",
                        "validators": [
                            {"identifier": "NotEmpty"},
                            {"identifier": "EmailAddress"},
                        ],
                    },
                    {
                        "identifier": "row-1",
                        "type": "GridRow",
                        "properties": {"gridColumnClassAutoConfiguration": {}},
                        "renderables": [
                            {
                                "identifier": "topic",
                                "type": "SingleSelect",
                                "label": "Topic",
                                "defaultValue": "sales",
                                "properties": {
                                    "options": {"sales": "Sales", "support": "Support"},
                                    "prependOptionLabel": "Please choose",
                                },
                            },
                            {
                                "identifier": "phone",
                                "type": "Telephone",
                                "label": "",
                            },
                        ],
                    },
                ],
            },
            {
                "identifier": "page-2",
                "type": "Page",
                "label": "Attachments",
                "renderables": [
                    {
                        "identifier": "attachment",
                        "type": "FileUpload",
                        "label": "Attachment",
                        "properties": {
                            "saveToFileMount": "1:/user_upload/",
                            "allowedMimeTypes": ["image/png", "image/jpeg"],
                        },
                    },
                    {
                        "identifier": "honeypot",
                        "type": "Honeypot",
                    },
                ],
            },
        ],
    }


@pytest.fixture
def decorator() -> FormDefinitionDecorator:
    """Return a decorator with an empty status payload."""
    return FormDefinitionDecorator()
