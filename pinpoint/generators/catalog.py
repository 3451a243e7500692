"""
PIN Generator Catalog
======================

:class:`PinGenerator` pairs a formula variant with a checksum flag and
turns the variant's base PIN into a final 8-digit WPS PIN.  Checksum
handling and PIN assembly are shared; variants differ only in the
formula they name.

The catalog holds the eight known vendor formulas, each instantiated
with and without the WPS checksum.  ``Linear`` and ``Static`` generators
are never in the catalog; the scoring engine builds them from data.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Callable

from pinpoint.core.checksum import checksum as wps_checksum
from pinpoint.core.codec import pin_to_str
from pinpoint.generators import formulas
from pinpoint.generators.formulas import BASE_MODULUS, PIN_MODULUS


class GeneratorError(ValueError):
    """Raised when a generator is constructed with invalid parameters."""


class GeneratorKind(str, enum.Enum):
    """Formula variants known to the predictor."""

    FIXED_OFFSET_24 = "FixedOffset24"
    FIXED_OFFSET_28 = "FixedOffset28"
    FIXED_OFFSET_32 = "FixedOffset32"
    DLINK = "DLink"
    DLINK_PLUS_ONE = "DLinkPlusOne"
    EASYBOX = "Easybox"
    ASUS = "Asus"
    AIROCON_REALTEK = "AiroconRealtek"
    LINEAR = "Linear"
    STATIC = "Static"


_FORMULAS: dict[GeneratorKind, Callable[..., int]] = {
    GeneratorKind.FIXED_OFFSET_24: formulas.fixed_offset_24,
    GeneratorKind.FIXED_OFFSET_28: formulas.fixed_offset_28,
    GeneratorKind.FIXED_OFFSET_32: formulas.fixed_offset_32,
    GeneratorKind.DLINK: formulas.dlink,
    GeneratorKind.DLINK_PLUS_ONE: formulas.dlink_plus_one,
    GeneratorKind.EASYBOX: formulas.easybox,
    GeneratorKind.ASUS: formulas.asus,
    GeneratorKind.AIROCON_REALTEK: formulas.airocon_realtek,
    GeneratorKind.LINEAR: formulas.linear,
    GeneratorKind.STATIC: formulas.static,
}

DISPLAY_NAMES: dict[GeneratorKind, str] = {
    GeneratorKind.FIXED_OFFSET_24: "24-bit PIN",
    GeneratorKind.FIXED_OFFSET_28: "28-bit PIN",
    GeneratorKind.FIXED_OFFSET_32: "32-bit PIN",
    GeneratorKind.DLINK: "D-Link PIN",
    GeneratorKind.DLINK_PLUS_ONE: "D-Link PIN +1",
    GeneratorKind.EASYBOX: "Vodafone EasyBox PIN",
    GeneratorKind.ASUS: "ASUS PIN",
    GeneratorKind.AIROCON_REALTEK: "Airocon Realtek PIN",
    GeneratorKind.LINEAR: "Linear sequence",
    GeneratorKind.STATIC: "Static PIN",
}

# Order matters: it is the ranking tie-break between equal scores.
CATALOG_KINDS: tuple[GeneratorKind, ...] = (
    GeneratorKind.FIXED_OFFSET_24,
    GeneratorKind.ASUS,
    GeneratorKind.DLINK_PLUS_ONE,
    GeneratorKind.FIXED_OFFSET_32,
    GeneratorKind.FIXED_OFFSET_28,
    GeneratorKind.AIROCON_REALTEK,
    GeneratorKind.DLINK,
    GeneratorKind.EASYBOX,
)


@dataclass(frozen=True, slots=True)
class PinGenerator:
    """An immutable WPS PIN generator.

    Attributes:
        kind:     Formula variant.
        checksum: Whether the final PIN carries a WPS check digit.
        params:   Variant parameters: ``(k, x0)`` for ``Linear``,
                  ``(value,)`` for ``Static``, empty otherwise.
    """

    kind: GeneratorKind
    checksum: bool
    params: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        expected = {GeneratorKind.LINEAR: 2, GeneratorKind.STATIC: 1}.get(self.kind, 0)
        if len(self.params) != expected:
            raise GeneratorError(
                f"{self.kind.value} takes {expected} parameter(s), "
                f"got {len(self.params)}"
            )
        if self.kind is GeneratorKind.LINEAR and self.params[0] == 0:
            raise GeneratorError("Linear generator slope k must be non-zero")

    @property
    def name(self) -> str:
        return DISPLAY_NAMES[self.kind]

    def base_pin(self, bssid: str) -> int:
        """Formula output for a canonical BSSID, before checksum handling."""
        return _FORMULAS[self.kind](bssid, *self.params)

    def pin(self, bssid: str) -> int:
        """Final WPS PIN as an integer."""
        if self.checksum:
            base = self.base_pin(bssid) % BASE_MODULUS
            return base * 10 + wps_checksum(base)
        return self.base_pin(bssid) % PIN_MODULUS

    def pin_str(self, bssid: str) -> str:
        """Final WPS PIN as an 8-digit string."""
        return pin_to_str(self.pin(bssid))

    def describe(self) -> str:
        """Short human-readable form, e.g. ``"D-Link PIN (checksum)"``."""
        suffix = "checksum" if self.checksum else "no checksum"
        if self.kind is GeneratorKind.LINEAR:
            k, x0 = self.params
            return f"{self.name} k={k} x0={x0} ({suffix})"
        if self.kind is GeneratorKind.STATIC:
            return f"{self.name} {self.params[0]} ({suffix})"
        return f"{self.name} ({suffix})"


# ---------------------------------------------------------------------------
# Constructors
# ---------------------------------------------------------------------------


def linear_generator(k: Fraction | int, x0: Fraction | int, checksum: bool) -> PinGenerator:
    """Build a ``Linear`` generator; ``k == 0`` raises :class:`GeneratorError`."""
    return PinGenerator(GeneratorKind.LINEAR, checksum, (Fraction(k), Fraction(x0)))


def static_generator(value: int, checksum: bool) -> PinGenerator:
    return PinGenerator(GeneratorKind.STATIC, checksum, (int(value),))


def build_catalog() -> list[PinGenerator]:
    """Fresh list of the 16 catalog generators, checksum variants first."""
    return [
        PinGenerator(kind, use_checksum)
        for use_checksum in (True, False)
        for kind in CATALOG_KINDS
    ]
