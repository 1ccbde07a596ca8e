"""UsageMetrics value object — token usage reported for one model turn."""

from pydantic import BaseModel, ConfigDict


class UsageMetrics(BaseModel, frozen=True):
    """Immutable value object capturing token usage from a single model call."""

    model_config = ConfigDict(frozen=True)

    input_tokens: int = 0
    output_tokens: int = 0

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens

    def __add__(self, other: "UsageMetrics") -> "UsageMetrics":
        return UsageMetrics(
            input_tokens=self.input_tokens + other.input_tokens,
            output_tokens=self.output_tokens + other.output_tokens,
        )
