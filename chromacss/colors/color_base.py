from __future__ import annotations
from typing import Any, Callable, ClassVar, Optional, Tuple, Union
from ..types.color_types import ColorSpace, Scalar, RgbaRecord, HslaRecord, is_hue_space
from ..types.css_syntax import CssSyntax


class ColorBase:
    """
    Immutable color value: three space-specific components plus alpha.

    Components are stored as given (coerced to float), without clamping.
    ``has_alpha`` records whether the caller supplied alpha; it only affects
    CSS output and takes no part in equality.
    Only the RgbSpace and HslSpace subclasses can be instantiated.
    """
    __slots__ = ('_value', '_explicit_alpha', '_is_frozen')  # no __dict__ → immutability

    mode: ClassVar[ColorSpace]
    channels: ClassVar[Tuple[str, str, str]]

    # Attached by .color and ..css_format
    convert: Callable[[ColorBase, ColorSpace], ColorBase]
    to_rgba: Callable[[ColorBase], RgbaRecord]
    to_hsla: Callable[[ColorBase], HslaRecord]
    to_css: Callable[[ColorBase, Optional[Union[CssSyntax, str]]], str]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, c0: Scalar, c1: Scalar, c2: Scalar, alpha: Scalar = 1.0, *, explicit_alpha: bool = True) -> None:
        if type(self) is ColorBase:
            raise TypeError("ColorBase cannot be instantiated directly; use RgbSpace or HslSpace")
        self._value = (float(c0), float(c1), float(c2), float(alpha))
        self._explicit_alpha = bool(explicit_alpha)

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[float, float, float, float]:
        return self._value

    @property
    def alpha(self) -> float:
        return self._value[3]

    @property
    def has_alpha(self) -> bool:
        """Check if alpha was given explicitly rather than defaulted."""
        return self._explicit_alpha

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return is_hue_space(self.mode)

    def with_alpha(self, alpha: Scalar) -> ColorBase:
        """Return a new color in the same space with an explicit alpha."""
        c0, c1, c2, _ = self._value
        return self.__class__(c0, c1, c2, alpha)

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        # Structural: an RGB red never equals an HSL red
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={v!r}" for name, v in zip(self.channels + ("alpha",), self._value)
        )
        return f"{self.__class__.__name__}({fields})"

    def __str__(self) -> str:
        return self.to_css()

    def __reduce__(self):
        c0, c1, c2, alpha = self._value
        return (_rebuild, (self.__class__, c0, c1, c2, alpha, self._explicit_alpha))


def _rebuild(cls, c0, c1, c2, alpha, explicit_alpha):
    return cls(c0, c1, c2, alpha, explicit_alpha=explicit_alpha)
