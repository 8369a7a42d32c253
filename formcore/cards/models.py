"""Card classification models."""

from pydantic import BaseModel, ConfigDict, Field

from formcore.cards.enums import CardNetwork


class NetworkPrefix(BaseModel):
    """Inclusive numeric range over the leading digits of a card number."""

    model_config = ConfigDict(frozen=True)

    network: CardNetwork = Field(..., description="Network owning the range")
    start: int = Field(..., ge=0, description="First prefix in range")
    end: int = Field(..., ge=0, description="Last prefix in range")

    @property
    def width(self) -> int:
        """Number of leading digits compared against the range."""
        return len(str(self.start))

    def matches(self, digits: str) -> bool:
        if len(digits) < self.width:
            return False
        return self.start <= int(digits[: self.width]) <= self.end


class CardClassification(BaseModel):
    """Result of classifying a raw card number."""

    model_config = ConfigDict(frozen=True)

    valid: bool = Field(..., description="Passes checksum and length bound")
    network: CardNetwork = Field(
        default=CardNetwork.UNKNOWN, description="Detected issuer network"
    )
    digits: str = Field(default="", description="Normalized digit string")
