"""Configuration types for building generators."""

from __future__ import annotations

from dataclasses import dataclass

XORSHIFT64 = "xorshift64"
PCG32_KIND = "pcg32"
GENERATOR_KINDS = (XORSHIFT64, PCG32_KIND)


@dataclass
class GeneratorConfig:
    kind: str = PCG32_KIND
    seed: int | None = None  # None = seed from entropy
    sequence: int = 0  # PCG32 stream selector; ignored by xorshift64

    def __post_init__(self) -> None:
        if self.kind not in GENERATOR_KINDS:
            raise ValueError(
                f"unknown generator kind {self.kind!r}; "
                f"expected one of {', '.join(GENERATOR_KINDS)}"
            )

    @staticmethod
    def from_dict(d: dict | None) -> GeneratorConfig:
        if not d:
            return GeneratorConfig()
        return GeneratorConfig(
            kind=d.get("kind", PCG32_KIND),
            seed=d.get("seed"),
            sequence=d.get("sequence", 0),
        )

    def to_dict(self) -> dict:
        d: dict = {"kind": self.kind, "sequence": self.sequence}
        if self.seed is not None:
            d["seed"] = self.seed
        return d
