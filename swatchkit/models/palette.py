from __future__ import annotations

from typing import Dict, Iterator, Optional, Tuple

from ..core.types import ROLES, Role
from .swatch import Swatch


class Palette:
    """Six named roles, each holding a swatch or ``None`` until assigned."""

    def __init__(self, **swatches: Optional[Swatch]) -> None:
        self._swatches: Dict[str, Optional[Swatch]] = {role: None for role in ROLES}
        for role, swatch in swatches.items():
            self[role] = swatch

    def __getitem__(self, role: Role) -> Optional[Swatch]:
        return self._swatches[role]

    def __setitem__(self, role: Role, swatch: Optional[Swatch]) -> None:
        if role not in self._swatches:
            raise KeyError(f"Unknown palette role: {role!r}")
        self._swatches[role] = swatch

    def __iter__(self) -> Iterator[str]:
        return iter(ROLES)

    def __len__(self) -> int:
        return len(ROLES)

    def get(self, role: str, default: Optional[Swatch] = None) -> Optional[Swatch]:
        swatch = self._swatches.get(role)
        return default if swatch is None else swatch

    def items(self) -> Iterator[Tuple[str, Optional[Swatch]]]:
        for role in ROLES:
            yield role, self._swatches[role]

    def is_selected(self, swatch: Swatch) -> bool:
        return any(assigned is swatch for assigned in self._swatches.values())

    def to_dict(self) -> Dict[str, Optional[dict]]:
        return {role: (s.to_dict() if s is not None else None) for role, s in self.items()}

    def __repr__(self) -> str:
        inner = ", ".join(f"{role}={swatch!r}" for role, swatch in self.items())
        return f"Palette({inner})"
