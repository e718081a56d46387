from registry.models import Collection
from registry.collections import DEFAULT_COLLECTIONS, Registry, RegistryError, build_registry
