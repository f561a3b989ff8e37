"""Shared fixtures for beangraph tests."""

from typing import Any, Callable

import pytest

from beangraph.domain.bean import DynamicBean
from beangraph.metadata import Customer


def _association(name: str, target: str) -> dict:
    return {"name": name, "kind": "association", "document_name": target}


def _collection(name: str, target: str) -> dict:
    return {"name": name, "kind": "collection", "document_name": target}


ADMIN_DOCUMENTS = {
    "Contact": {
        "attributes": [
            {"name": "name"},
            _collection("addresses", "Address"),
            {"name": "user", "kind": "inverseOne", "document_name": "User"},
        ]
    },
    "User": {
        "attributes": [
            {"name": "userName"},
            _association("contact", "Contact"),
            _collection("groups", "Group"),
        ]
    },
    "Group": {
        "attributes": [
            {"name": "name"},
            {"name": "users", "kind": "inverseMany", "document_name": "User"},
        ]
    },
    "Address": {
        "attributes": [{"name": "street"}, _association("country", "Country")]
    },
    "Country": {"attributes": [{"name": "code"}]},
    "Shipment": {
        "attributes": [
            _collection("stops", "Address"),
            _association("destination", "Country"),
        ]
    },
    "Party": {"attributes": [{"name": "name"}, _association("contact", "Contact")]},
    "Person": {
        "attributes": [
            {"name": "name"},
            _association("contact", "Contact"),
            _association("employer", "Party"),
        ]
    },
    "Organisation": {
        "attributes": [
            {"name": "name"},
            _association("contact", "Contact"),
            _collection("members", "Person"),
        ]
    },
    "Account": {"attributes": [_association("owner", "Party")]},
    "Register": {"attributes": [_collection("parties", "Party")]},
    "Order": {"attributes": [{"name": "number"}, _collection("lines", "OrderLine")]},
    "OrderLine": {
        "attributes": [{"name": "quantity", "type": "integer"}],
        "parent_document_name": "Order",
    },
    "Category": {
        "attributes": [{"name": "name"}],
        "parent_document_name": "Category",
    },
    "Note": {
        "attributes": [{"name": "text"}],
        "parent_document_name": "Party",
    },
    "Employee": {"attributes": [_association("manager", "Employee")]},
    "Braid": {
        "attributes": [
            _association("a", "Braid"),
            _association("b", "Braid"),
            _association("c", "Braid"),
        ]
    },
}


@pytest.fixture
def customer() -> Customer:
    """Customer with a single 'admin' module describing every test document."""
    return Customer.model_validate(
        {
            "name": "demo",
            "modules": {"admin": {"name": "admin", "documents": ADMIN_DOCUMENTS}},
        }
    )


@pytest.fixture
def make_bean() -> Callable[..., DynamicBean]:
    """Factory creating admin beans: make_bean("Contact", name="mike")."""

    def factory(document_name: str, **values: Any) -> DynamicBean:
        return DynamicBean(biz_module="admin", biz_document=document_name, **values)

    return factory


@pytest.fixture
def user_and_contact(make_bean):
    """A user and its contact referencing each other."""
    contact = make_bean("Contact", name="mike", addresses=[])
    user = make_bean("User", userName="mike", contact=contact, groups=[])
    contact.user = user
    return user, contact
