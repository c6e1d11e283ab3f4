"""
Blur configuration: filter families, padding policies and validated options.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Mapping

from .errors import ConfigurationError, InvalidFilter


DEFAULT_KERNEL_SIZE = 3
DEFAULT_SIGMA = 1.0
DEFAULT_WORKERS = 1


class FilterKind(str, Enum):
    """Supported kernel families. Values match the legacy option tags."""

    GAUSSIAN = "GAUSSIAN"
    MOVING_AVERAGE = "MOVING_AVG"

    @classmethod
    def parse(cls, value: Any) -> "FilterKind":
        """
        Resolve a filter tag from configuration.

        Accepts enum members, the legacy tags and a few readable aliases
        (case-insensitive).

        Raises:
            InvalidFilter: If the value names no supported filter
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise InvalidFilter(value)

        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        kind = _FILTER_ALIASES.get(key)
        if kind is None:
            raise InvalidFilter(value)
        return kind


_FILTER_ALIASES: Dict[str, FilterKind] = {
    "GAUSSIAN": FilterKind.GAUSSIAN,
    "GAUSS": FilterKind.GAUSSIAN,
    "MOVING_AVG": FilterKind.MOVING_AVERAGE,
    "MOVING_AVERAGE": FilterKind.MOVING_AVERAGE,
    "MOVINGAVERAGE": FilterKind.MOVING_AVERAGE,
    "BOX": FilterKind.MOVING_AVERAGE,
}


class PaddingPolicy(str, Enum):
    """How the working buffer is extended past the image border."""

    # Legacy behavior: shift pixels by p into a (w + p, h + p) buffer,
    # everything outside the copied region samples as zero.
    ZERO_TRAILING = "zero_trailing"
    EDGE_CLAMP = "edge_clamp"
    MIRROR = "mirror"

    @classmethod
    def parse(cls, value: Any) -> "PaddingPolicy":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "_").replace(" ", "_")
            for policy in cls:
                if policy.value == key:
                    return policy
        raise ConfigurationError(f"Unknown padding policy: {value!r}")


@dataclass(frozen=True)
class BlurOptions:
    """
    Options for a single blur call.

    Zero values for ``kernel_size``, ``sigma`` and ``workers`` mean "use the
    default"; call :meth:`with_defaults` before :meth:`validate`.

    Attributes:
        kernel_size: Odd kernel side length
        filter: Kernel family
        sigma: Gaussian standard deviation (ignored by moving average)
        padding: Border policy, legacy zero padding by default
        preserve_alpha: Blur alpha instead of forcing opaque output
        centered_gaussian: Use the center-relative, normalized Gaussian
        workers: Number of threads used for row blocks
    """

    kernel_size: int = DEFAULT_KERNEL_SIZE
    filter: FilterKind = FilterKind.GAUSSIAN
    sigma: float = DEFAULT_SIGMA
    padding: PaddingPolicy = PaddingPolicy.ZERO_TRAILING
    preserve_alpha: bool = False
    centered_gaussian: bool = False
    workers: int = DEFAULT_WORKERS

    def __post_init__(self) -> None:
        # Reject unknown tags at the boundary, not deep in the kernel code.
        object.__setattr__(self, "filter", FilterKind.parse(self.filter))
        object.__setattr__(self, "padding", PaddingPolicy.parse(self.padding))

    @property
    def padding_size(self) -> int:
        return self.kernel_size // 2

    def with_defaults(self) -> "BlurOptions":
        """Return a copy with zero-valued fields replaced by defaults."""
        return replace(
            self,
            kernel_size=self.kernel_size or DEFAULT_KERNEL_SIZE,
            sigma=self.sigma or DEFAULT_SIGMA,
            workers=self.workers or DEFAULT_WORKERS,
        )

    def validate(self) -> "BlurOptions":
        """
        Check option consistency.

        Returns:
            self, to allow chaining

        Raises:
            ConfigurationError: On even/non-positive kernel size, non-positive
                sigma for the Gaussian filter or non-positive worker count
        """
        if not isinstance(self.kernel_size, int) or isinstance(self.kernel_size, bool):
            raise ConfigurationError(f"kernel size must be an integer, got {self.kernel_size!r}")
        if self.kernel_size % 2 != 1:
            raise ConfigurationError("kernel size must be odd number")
        if self.kernel_size < 1:
            raise ConfigurationError(f"kernel size must be positive, got {self.kernel_size}")
        if self.filter is FilterKind.GAUSSIAN and not self.sigma > 0:
            raise ConfigurationError(f"sigma must be positive, got {self.sigma}")
        if self.workers < 1:
            raise ConfigurationError(f"workers must be positive, got {self.workers}")
        return self

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "BlurOptions":
        """
        Build options from a settings mapping (see ``load_settings``).

        Reads the ``blur`` section; missing keys keep their defaults.
        """
        blur_cfg = settings.get("blur", {})
        if blur_cfg is None:
            blur_cfg = {}
        if not isinstance(blur_cfg, Mapping):
            raise ConfigurationError("'blur' settings section must be a mapping")

        try:
            kernel_size = int(blur_cfg.get("kernel_size", DEFAULT_KERNEL_SIZE))
            sigma = float(blur_cfg.get("sigma", DEFAULT_SIGMA))
            workers = int(blur_cfg.get("workers", DEFAULT_WORKERS))
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Malformed blur settings: {exc}") from exc

        return cls(
            kernel_size=kernel_size,
            filter=blur_cfg.get("filter", FilterKind.GAUSSIAN),
            sigma=sigma,
            padding=blur_cfg.get("padding", PaddingPolicy.ZERO_TRAILING),
            preserve_alpha=bool(blur_cfg.get("preserve_alpha", False)),
            centered_gaussian=bool(blur_cfg.get("centered_gaussian", False)),
            workers=workers,
        )
