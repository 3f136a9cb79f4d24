"""Shared fixtures for the jvalid test suite."""
import pytest

from jvalid import jv
from jvalid.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate each test from JVALID_* environment and the settings cache."""
    for name in ("JVALID_LOG_LEVEL", "JVALID_LOG_JSON", "JVALID_UNION_DEBUG_ERRORS", "JVALID_MAX_RECEIVED_LENGTH"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def union_debug(monkeypatch):
    monkeypatch.setenv("JVALID_UNION_DEBUG_ERRORS", "true")
    get_settings.cache_clear()


@pytest.fixture
def user_schema():
    return jv.object({
        "id": jv.string().uuid(),
        "name": jv.string().min(2).max(50),
        "email": jv.email(),
        "age": jv.number().int().min(0).max(120),
        "isActive": jv.boolean(),
        "tags": jv.array(jv.string()).opt(),
        "metadata": jv.object({
            "createdAt": jv.datetime(),
            "updatedAt": jv.datetime().opt(),
        }).opt(),
    })


@pytest.fixture
def invoice_schema():
    return jv.object({
        "invoice_id": jv.string(),
        "invoice_date": jv.date(),
        "invoice_currency": jv.enum(["USD", "EUR", "GBP"]),
        "invoice_total_amount": jv.number().positive(),
        "items": jv.array(jv.object({
            "invoice_item_no": jv.number().int().positive(),
            "invoice_item_quantity": jv.number().int().positive(),
            "invoice_item_unit_price": jv.number().positive(),
            "invoice_item_description": jv.string().min(1),
        })).nonempty(),
    })


@pytest.fixture
def valid_user():
    return {
        "id": "123e4567-e89b-12d3-a456-426614174000",
        "name": "Jo",
        "email": "jo@example.com",
        "age": 31,
        "isActive": True,
    }
