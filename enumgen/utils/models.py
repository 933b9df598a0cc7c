"""Intermediate representation handed from extraction to rendering."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EnumMember:
    """One value of a string enumeration."""

    value: str
    key: str
    label: str


@dataclass(frozen=True)
class EnumSchema:
    """A named string enumeration found under components/schemas.

    Members keep the declaration order of the source document.
    """

    name: str
    members: tuple[EnumMember, ...]
    description: str = ""
    deprecated: bool = False
    since: str = ""

    @property
    def keys(self) -> list[str]:
        """Member keys in declaration order."""
        return [member.key for member in self.members]
