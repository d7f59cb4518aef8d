"""Property domain service."""

import dataclasses
import logging
from decimal import Decimal
from typing import Any, Optional

from rentflow.database.base import Database, PROPERTIES_NAMESPACE
from rentflow.database.mappers import MappingError, properties_from_payload, properties_to_payload
from rentflow.domain.entities import Property, PropertyStatus, generate_id
from rentflow.domain.errors import NotFoundError, ValidationError, property_not_found
from rentflow.domain.seed import seed_properties

logger = logging.getLogger(__name__)


def _check_fields(**fields: Any) -> None:
    """Validate the subset of property fields that is present."""
    if "name" in fields and (not fields["name"] or not fields["name"].strip()):
        raise ValidationError("Property name is required")
    if fields.get("rent_amount") is not None and fields["rent_amount"] < 0:
        raise ValidationError("Rent amount cannot be negative")
    for key in ("bedrooms", "bathrooms"):
        if fields.get(key) is not None and fields[key] < 0:
            raise ValidationError("Bedroom and bathroom counts cannot be negative")


class PropertyService:
    """Service for managing the property list."""

    def __init__(self, db: Database):
        """Initialize property service and load the property list.

        Args:
            db: Database instance
        """
        self.db = db
        self.properties = self._load_properties()

    def _load_properties(self) -> list[Property]:
        payload = self.db.load(PROPERTIES_NAMESPACE)
        if payload is None:
            logger.info("No stored properties, starting from demo data")
            return seed_properties()
        try:
            return properties_from_payload(payload)
        except MappingError as e:
            logger.warning("Stored properties are unreadable (%s), starting from demo data", e)
            return seed_properties()

    def _commit(self, properties: list[Property]) -> None:
        self.properties = properties
        if not self.db.save(PROPERTIES_NAMESPACE, properties_to_payload(properties)):
            logger.error("Property list was not saved; changes are kept for this session only")

    def list_properties(self, status: Optional[PropertyStatus] = None) -> list[Property]:
        """List properties, optionally filtered by status."""
        if status is None:
            return list(self.properties)
        return [p for p in self.properties if p.status == status]

    def get_property(self, property_id: str) -> Optional[Property]:
        """Get property by ID.

        Returns:
            Property entity or None if not found
        """
        for prop in self.properties:
            if prop.id == property_id:
                return prop
        return None

    def require_property(self, property_id: str) -> Property:
        """Get property by ID.

        Raises:
            NotFoundError: If the property does not exist
        """
        prop = self.get_property(property_id)
        if prop is None:
            raise NotFoundError(property_not_found(property_id))
        return prop

    def add_property(
        self,
        name: str,
        address: str,
        rent_amount: Decimal,
        bedrooms: int = 1,
        bathrooms: Decimal = Decimal("1"),
        description: str = "",
        image_url: Optional[str] = None,
        status: PropertyStatus = PropertyStatus.VACANT,
    ) -> Property:
        """Add a property. New properties start out vacant unless stated otherwise.

        Raises:
            ValidationError: If the name is blank or an amount/count is negative
        """
        _check_fields(name=name, rent_amount=rent_amount, bedrooms=bedrooms, bathrooms=bathrooms)

        existing = {p.id for p in self.properties}
        prop = Property(
            id=generate_id(existing),
            name=name.strip(),
            address=address,
            rent_amount=rent_amount,
            status=status,
            bedrooms=bedrooms,
            bathrooms=bathrooms,
            description=description,
            image_url=image_url,
        )
        self._commit([*self.properties, prop])
        logger.info("Added property %s (%s)", prop.id, prop.name)
        return prop

    def update_property(self, property_id: str, **changes: Any) -> Property:
        """Overwrite property fields.

        Raises:
            NotFoundError: If the property does not exist
            ValidationError: If the id is among the changes, the name is blank
                or an amount/count is negative
        """
        if "id" in changes:
            raise ValidationError("Cannot change a property id")
        _check_fields(**changes)
        if "name" in changes:
            changes["name"] = changes["name"].strip()
        prop = dataclasses.replace(self.require_property(property_id), **changes)
        self._commit([prop if p.id == property_id else p for p in self.properties])
        return prop

    def set_status(self, property_id: str, status: PropertyStatus) -> Property:
        """Change the occupancy status of a property."""
        return self.update_property(property_id, status=status)

    def delete_property(self, property_id: str) -> None:
        """Delete a property. Tenants referencing it keep their reference."""
        if self.get_property(property_id) is None:
            return
        self._commit([p for p in self.properties if p.id != property_id])
        logger.info("Deleted property %s", property_id)
