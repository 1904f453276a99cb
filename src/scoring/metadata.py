"""
Content metadata supplied alongside a document.

The engine never infers these values from the document itself.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union


# Accepted key spellings for each field
_FIELD_ALIASES = {
    "target_keyword": ("target_keyword", "targetKeyword"),
    "domain_authority": ("domain_authority", "domainAuthority"),
    "meta_description": ("meta_description", "metaDescription"),
}


@dataclass(frozen=True)
class ContentMetadata:
    """Optional side-channel facts about a document."""
    target_keyword: Optional[str] = None
    domain_authority: Optional[float] = None  # 0-100
    meta_description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ContentMetadata":
        """
        Build metadata from a mapping with snake_case or camelCase keys.

        Unknown keys are ignored. Values are kept as given; extractors
        treat wrongly-typed values as absent.
        """
        if not data or not isinstance(data, Mapping):
            return cls()

        values = {}
        for field_name, aliases in _FIELD_ALIASES.items():
            for alias in aliases:
                if data.get(alias) is not None:
                    values[field_name] = data[alias]
                    break
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "target_keyword": self.target_keyword,
            "domain_authority": self.domain_authority,
            "meta_description": self.meta_description,
        }


MetadataInput = Union[ContentMetadata, Mapping[str, Any], None]


def coerce_metadata(metadata: MetadataInput) -> ContentMetadata:
    """Accept a ContentMetadata, a plain mapping, or None."""
    if isinstance(metadata, ContentMetadata):
        return metadata
    return ContentMetadata.from_dict(metadata)
