"""Tests for PropertyService."""

from decimal import Decimal

import pytest

from rentflow.database.base import PROPERTIES_NAMESPACE
from rentflow.domain.entities import PropertyStatus
from rentflow.domain.errors import NotFoundError, ValidationError
from rentflow.domain.property import PropertyService

from conftest import MemoryDatabase


def test_empty_store_falls_back_to_demo_properties(temp_db):
    """Test that demo properties are used when nothing is stored."""
    service = PropertyService(temp_db)
    assert [p.id for p in service.list_properties()] == ["p1", "p3"]


def test_unreadable_store_falls_back_to_demo_properties():
    """Test that a corrupt property list is replaced by demo data."""
    service = PropertyService(MemoryDatabase({PROPERTIES_NAMESPACE: "garbage"}))
    assert [p.id for p in service.list_properties()] == ["p1", "p3"]


def test_add_property(property_service, empty_db):
    """Test adding a property appends it and persists it."""
    prop = property_service.add_property(
        "Maple Court 2A",
        "12 Maple Ct",
        Decimal("1850"),
        bedrooms=2,
        bathrooms=Decimal("1.5"),
    )

    assert prop.status == PropertyStatus.VACANT
    assert property_service.list_properties() == [prop]
    assert PropertyService(empty_db).require_property(prop.id) == prop


def test_add_property_requires_name(property_service):
    """Test that a blank property name is rejected."""
    with pytest.raises(ValidationError):
        property_service.add_property("  ", "Somewhere", Decimal("100"))


def test_add_property_rejects_negative_rent(property_service):
    """Test that negative rent is rejected."""
    with pytest.raises(ValidationError):
        property_service.add_property("Flat", "Somewhere", Decimal("-1"))


def test_list_properties_by_status(property_service):
    """Test filtering properties by status."""
    vacant = property_service.add_property("A", "1 St", Decimal("100"))
    occupied = property_service.add_property(
        "B", "2 St", Decimal("100"), status=PropertyStatus.OCCUPIED
    )

    assert property_service.list_properties(PropertyStatus.VACANT) == [vacant]
    assert property_service.list_properties(PropertyStatus.OCCUPIED) == [occupied]
    assert property_service.list_properties(PropertyStatus.MAINTENANCE) == []


def test_set_status(property_service):
    """Test changing a property's status."""
    prop = property_service.add_property("A", "1 St", Decimal("100"))
    updated = property_service.set_status(prop.id, PropertyStatus.MAINTENANCE)

    assert updated.status == PropertyStatus.MAINTENANCE
    assert property_service.get_property(prop.id).status == PropertyStatus.MAINTENANCE


def test_update_property(property_service):
    """Test overwriting property fields."""
    prop = property_service.add_property("A", "1 St", Decimal("100"))
    updated = property_service.update_property(prop.id, description="Bright", rent_amount=Decimal("120"))

    assert updated.description == "Bright"
    assert updated.rent_amount == Decimal("120")
    assert updated.id == prop.id


def test_update_property_cannot_change_id(property_service):
    """Test that the id is not editable."""
    prop = property_service.add_property("A", "1 St", Decimal("100"))
    with pytest.raises(ValidationError):
        property_service.update_property(prop.id, id="other")


def test_update_unknown_property_raises(property_service):
    """Test that editing a missing property raises NotFoundError."""
    with pytest.raises(NotFoundError):
        property_service.update_property("nope", description="x")


def test_delete_property(property_service):
    """Test deleting a property and ignoring unknown ids."""
    prop = property_service.add_property("A", "1 St", Decimal("100"))
    property_service.delete_property("nope")
    assert len(property_service.list_properties()) == 1

    property_service.delete_property(prop.id)
    assert property_service.list_properties() == []


@pytest.mark.parametrize(
    "changes",
    [
        {"name": ""},
        {"name": "   "},
        {"bedrooms": -3},
        {"bathrooms": Decimal("-0.5")},
        {"rent_amount": Decimal("-1")},
    ],
)
def test_update_property_validates_like_add(property_service, changes):
    """Test that edits go through the same checks as new properties."""
    prop = property_service.add_property("A", "1 St", Decimal("100"))
    with pytest.raises(ValidationError):
        property_service.update_property(prop.id, **changes)
    assert property_service.get_property(prop.id) == prop


def test_update_property_strips_name(property_service):
    prop = property_service.add_property("A", "1 St", Decimal("100"))
    assert property_service.update_property(prop.id, name="  Loft  ").name == "Loft"
