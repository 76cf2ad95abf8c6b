"""Prover/verifier parameters."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StarkConfig:
    """STARK protocol parameters shared by prover and verifier.

    Attributes:
        security_parameter: Target lambda; the query count is ceil(lambda / log2(domain))
        blowup_factor: Domain size is the next power of two >= blowup_factor * degree(C)
        min_domain_size: Floor on the domain size (needs at least 2 for log2 > 0)
        max_generator_candidates: Iteration cap on the subgroup generator search
    """
    security_parameter: int = 128
    blowup_factor: int = 4
    min_domain_size: int = 2
    max_generator_candidates: int = 1 << 16

    def __post_init__(self) -> None:
        if self.security_parameter < 1:
            raise ValueError(f"security_parameter must be positive, got {self.security_parameter}")
        if self.blowup_factor < 1:
            raise ValueError(f"blowup_factor must be positive, got {self.blowup_factor}")
        if self.min_domain_size < 2:
            raise ValueError(f"min_domain_size must be at least 2, got {self.min_domain_size}")
        if self.max_generator_candidates < 1:
            raise ValueError(
                f"max_generator_candidates must be positive, got {self.max_generator_candidates}"
            )
