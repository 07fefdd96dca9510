"""Registry of resource families, keyed by document kind and type."""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Tuple

from ..helpers.logger import get_logger
from .raw import RawResource

logger = get_logger("manifest.registry")

Decoder = Callable[[RawResource], Any]


@dataclass(frozen=True)
class ResourceFamily:
    """
    A resource schema and the documents it owns.

    A family owns a document when the document's kind equals ``kind`` and,
    unless ``type`` is None, its type equals ``type``. Both comparisons are
    exact and case-sensitive.
    """

    kind: str
    type: Optional[str]
    decode: Decoder

    @property
    def key(self) -> Tuple[str, Optional[str]]:
        return (self.kind, self.type)

    def match(self, raw: RawResource) -> bool:
        if raw.kind != self.kind:
            return False
        return self.type is None or raw.type == self.type

    def parse(self, raw: RawResource) -> Tuple[Any, bool]:
        """
        Decode the document if this family owns it.

        Returns:
            ``(resource, True)`` on success, ``(None, False)`` when the
            document belongs to someone else. Decode and lint errors raise.
        """
        if not self.match(raw):
            return None, False
        return self.decode(raw), True


class ResourceRegistry:
    """
    Ordered, read-only list of resource families.

    Families are tried in registration order and the first one that matches
    decodes the document. A family keyed ``(kind, None)`` therefore shadows
    any later ``(kind, type)`` family of the same kind.
    """

    def __init__(self, families: Iterable[ResourceFamily] = ()):
        seen = set()
        ordered = []
        for family in families:
            if family.key in seen:
                raise ValueError(
                    f"Resource family already registered for kind={family.kind!r} type={family.type!r}"
                )
            seen.add(family.key)
            ordered.append(family)
            logger.debug(f"Registered resource family {family.kind}/{family.type or '*'}")
        self._families = tuple(ordered)

    @property
    def families(self) -> Tuple[ResourceFamily, ...]:
        return self._families

    def lookup(self, raw: RawResource) -> Optional[ResourceFamily]:
        """Return the first family that owns the document, if any."""
        for family in self._families:
            if family.match(raw):
                return family
        return None

    def parse(self, raw: RawResource) -> Tuple[Any, bool]:
        """Decode with the owning family; ``(None, False)`` if there is none."""
        family = self.lookup(raw)
        if family is None:
            return None, False
        return family.parse(raw)

    def __len__(self) -> int:
        return len(self._families)
