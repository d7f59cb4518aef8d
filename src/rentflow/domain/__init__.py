"""Domain layer for rentflow application."""


# Services are imported lazily: they depend on rentflow.database, whose
# mappers import rentflow.domain.entities.
def __getattr__(name):
    if name == "TenantService":
        from rentflow.domain.tenant import TenantService
        return TenantService
    if name == "PropertyService":
        from rentflow.domain.property import PropertyService
        return PropertyService
    if name == "PreferencesService":
        from rentflow.domain.preferences import PreferencesService
        return PreferencesService
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = ["TenantService", "PropertyService", "PreferencesService"]
