"""Field Definition — immutable snapshot of one administrator-defined custom field.

Invariants:
    - options is non-empty iff field_type is enumerated (SELECT, RADIO, CHECKBOX)
    - options are unique, order-preserving, non-blank and never padded with whitespace
    - CHECKBOX options never contain the separator used to join selections
    - name is non-blank
    - Frozen: AttributeSet entries reference the snapshot taken at submission time

Design Decisions:
    - Frozen dataclass over pydantic model: core stays dependency-free and hashable
    - Invariant violations raise ValueError at construction, so an invalid definition never exists
"""

from dataclasses import dataclass, field

from wallride.core.domain_types import CHECKBOX_SEPARATOR, FieldId, FieldType


@dataclass(frozen=True)
class FieldDefinition:
    """Schema for one custom attribute — name, type and enumerated options."""

    id: FieldId
    name: str
    field_type: FieldType
    description: str | None = None
    options: tuple[str, ...] = field(default_factory=tuple)
    code: str | None = None
    idx: int = 0
    language: str | None = None
    default_value: str | None = None

    def __post_init__(self):
        # Accept any iterable from callers; store a tuple
        object.__setattr__(self, "options", tuple(self.options))
        object.__setattr__(self, "field_type", FieldType(self.field_type))

        if not self.name or not self.name.strip():
            raise ValueError(f"Field {self.id}: name cannot be empty")
        if self.field_type.is_enumerated and not self.options:
            raise ValueError(
                f"Field {self.id}: {self.field_type.value} requires at least one option",
            )
        if not self.field_type.is_enumerated and self.options:
            raise ValueError(
                f"Field {self.id}: {self.field_type.value} does not take options",
            )
        if len(set(self.options)) != len(self.options):
            raise ValueError(f"Field {self.id}: options must be unique")
        if any(not option or option != option.strip() for option in self.options):
            raise ValueError(
                f"Field {self.id}: options must be non-blank with no surrounding whitespace",
            )
        if self.field_type is FieldType.CHECKBOX and any(
            CHECKBOX_SEPARATOR in option for option in self.options
        ):
            raise ValueError(
                f"Field {self.id}: checkbox options cannot contain '{CHECKBOX_SEPARATOR}'",
            )

    @property
    def is_enumerated(self) -> bool:
        return self.field_type.is_enumerated

    def matches_keyword(self, keyword: str) -> bool:
        """Case-insensitive substring match on name, code and description."""
        needle = keyword.casefold()
        haystack = (self.name, self.code or "", self.description or "")
        return any(needle in value.casefold() for value in haystack)

    def applies_to(self, language: str) -> bool:
        """Language-neutral definitions (language None) apply to every language."""
        return self.language is None or self.language == language
