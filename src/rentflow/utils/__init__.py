"""Utility functions for rentflow."""

from rentflow.utils.date_parser import parse_date
from rentflow.utils.amount_parser import parse_amount
from rentflow.utils.image_reference import image_to_data_uri
from rentflow.utils.tenant_resolver import resolve_tenant

__all__ = ["parse_date", "parse_amount", "image_to_data_uri", "resolve_tenant"]
