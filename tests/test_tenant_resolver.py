"""Tests for tenant name resolution and image references."""

import pytest

from rentflow.domain.errors import ConflictError, NotFoundError
from rentflow.utils.image_reference import image_to_data_uri
from rentflow.utils.tenant_resolver import resolve_tenant


def test_resolve_by_id(tenant_service):
    tenant = tenant_service.add_tenant("Yab", 1000)
    assert resolve_tenant(tenant_service, tenant.id) == tenant.id


def test_resolve_by_name_case_insensitive(tenant_service):
    tenant = tenant_service.add_tenant("Mike Johnson", 1200)
    assert resolve_tenant(tenant_service, "mike johnson") == tenant.id


def test_resolve_ambiguous_name(tenant_service):
    tenant_service.add_tenant("Yab", 1000)
    tenant_service.add_tenant("Yab", 900)
    with pytest.raises(ConflictError):
        resolve_tenant(tenant_service, "Yab")


def test_resolve_unknown(tenant_service):
    with pytest.raises(NotFoundError):
        resolve_tenant(tenant_service, "Nobody")


def test_image_to_data_uri(tmp_path):
    image = tmp_path / "photo.png"
    image.write_bytes(b"\x89PNG")
    assert image_to_data_uri(image) == "data:image/png;base64,iVBORw=="


def test_image_to_data_uri_rejects_other_files(tmp_path):
    notes = tmp_path / "notes.txt"
    notes.write_text("hello")
    with pytest.raises(ValueError):
        image_to_data_uri(notes)
