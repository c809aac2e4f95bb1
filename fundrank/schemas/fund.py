"""
Fund schema
Read-only snapshot of a fund as supplied by the fund repository.
"""

from typing import Any, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class RedemptionTerms(BaseModel):
    """Redemption terms"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    frequency: Optional[str] = Field(
        default=None,
        description="Redemption frequency",
        examples=["Quarterly", "End of term"]
    )
    minimum_holding_period: Optional[float] = Field(
        default=None,
        description="Minimum holding period (months)",
        examples=[12]
    )


class Fund(BaseModel):
    """
    Fund snapshot

    Input to every engine in this package. Every numeric and governance
    field may be missing; engines degrade to neutral values instead of
    failing. Accepts both snake_case names and the repository's camelCase
    keys.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "atlantic-income-fund",
                "name": "Atlantic Income Fund",
                "managerName": "Atlantic Capital SCR",
                "category": "Debt",
                "tags": ["Golden Visa Eligible", "Closed-end Fund"],
                "managementFee": 1.5,
                "performanceFee": 10,
                "minimumInvestment": 500000,
                "term": 6,
                "redemptionTerms": {"frequency": "End of term", "minimumHoldingPeriod": 12},
                "cmvmId": "1234",
                "description": "Senior secured lending to Portuguese SMEs.",
            }
        },
    )

    # === Identity ===
    id: str = Field(
        description="Fund identifier (slug)",
        examples=["atlantic-income-fund"]
    )
    name: str = Field(
        default="",
        description="Fund name"
    )
    manager_name: Optional[str] = Field(
        default=None,
        description="Fund manager name"
    )
    category: Optional[str] = Field(
        default=None,
        description="Strategy category",
        examples=["Venture Capital", "Debt", "Infrastructure"]
    )
    tags: list[str] = Field(
        default_factory=list,
        description="Free-form tags",
        examples=[["Golden Visa Eligible", "No Lock-Up"]]
    )
    is_verified: bool = Field(
        default=False,
        description="Fund data verified by the directory"
    )

    # === Fees (percent) ===
    management_fee: Optional[float] = Field(
        default=None,
        description="Annual management fee (%)",
        examples=[1.5]
    )
    performance_fee: Optional[float] = Field(
        default=None,
        description="Performance fee (% of profits)",
        examples=[20]
    )
    subscription_fee: Optional[float] = Field(
        default=None,
        description="Subscription fee (%)"
    )
    redemption_fee: Optional[float] = Field(
        default=None,
        description="Redemption fee (%)"
    )

    # === Terms ===
    minimum_investment: Optional[float] = Field(
        default=None,
        description="Minimum subscription (EUR)",
        examples=[500000]
    )
    term: Optional[float] = Field(
        default=None,
        description="Fund term (years)",
        examples=[8]
    )
    redemption_terms: Optional[RedemptionTerms] = Field(
        default=None,
        description="Redemption terms"
    )
    risk_band: Optional[str] = Field(
        default=None,
        description="Risk label",
        examples=["Conservative"]
    )

    # === Governance disclosure (presence only) ===
    cmvm_id: Optional[str] = Field(default=None, description="CMVM registration number")
    auditor: Optional[str] = Field(default=None, description="Auditor")
    custodian: Optional[str] = Field(default=None, description="Custodian bank")
    nav_frequency: Optional[str] = Field(default=None, description="NAV publication frequency")
    isin: Optional[str] = Field(default=None, description="ISIN")
    website_url: Optional[str] = Field(default=None, description="Manager website")
    documents: list[Any] = Field(
        default_factory=list,
        description="Published documents"
    )
    faqs: list[Any] = Field(
        default_factory=list,
        description="Published FAQs"
    )

    # === Copy ===
    description: Optional[str] = Field(
        default=None,
        description="Short marketing description"
    )
    detailed_description: Optional[str] = Field(
        default=None,
        description="Long marketing description"
    )

    @field_validator("tags", "documents", "faqs", mode="before")
    @classmethod
    def null_list_as_empty(cls, v):
        """The repository stores absent lists as null."""
        return [] if v is None else v

    @property
    def redemption_frequency(self) -> Optional[str]:
        if self.redemption_terms is None:
            return None
        return self.redemption_terms.frequency

    @property
    def minimum_holding_period(self) -> Optional[float]:
        if self.redemption_terms is None:
            return None
        return self.redemption_terms.minimum_holding_period

    def has_tag(self, tag: str) -> bool:
        """Exact tag membership"""
        return tag in self.tags

    def to_summary(self) -> str:
        """One-line fund summary"""
        parts = [self.name or self.id]
        if self.category:
            parts.append(self.category)
        if self.management_fee is not None:
            parts.append(f"{self.management_fee}% mgmt")
        if self.minimum_investment is not None:
            parts.append(f"min €{self.minimum_investment:,.0f}")
        return " | ".join(parts)
