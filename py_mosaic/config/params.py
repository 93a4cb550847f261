"""
Parameters of a single mosaic run.

The six values fully determine the output image; they also name the files
written for the run.
"""

from pydantic import BaseModel, ConfigDict, Field


def format_fraction(value: float) -> str:
    """Shortest decimal text for ``value`` without a trailing ``.0``."""
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


class MosaicParams(BaseModel):
    """Validated parameter set for one run."""

    model_config = ConfigDict(frozen=True)

    size: int = Field(default=1000, gt=0, description="Width and height of the grid")
    num_samples: int = Field(default=100, gt=0, description="Records sampled per growth attempt")
    num_seeds: int = Field(default=20, ge=0, description="Attempts spent scattering seeds")
    circle_frac: float = Field(default=0.01, gt=0, description="Fraction of the circumference walked")
    timeout: int = Field(default=10000, ge=1, description="Consecutive misses that end the run")
    seed: int = Field(default=0, description="Random seed")

    def output_stem(self) -> str:
        """File name stem ``size-samples-seeds-fraction-timeout-seed``."""
        return "-".join(
            [
                str(self.size),
                str(self.num_samples),
                str(self.num_seeds),
                format_fraction(self.circle_frac),
                str(self.timeout),
                str(self.seed),
            ]
        )

    def filename(self, extension: str = "png") -> str:
        return f"{self.output_stem()}.{extension}"
