from .generator import MetadataGenerator
from .store import MetadataStore, XmlMetadataStore

__all__ = ["MetadataGenerator", "MetadataStore", "XmlMetadataStore"]
