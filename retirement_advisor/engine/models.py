"""Data model shared by the engine, the profile store, and the tools."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional

from retirement_advisor.engine.errors import InvalidArgumentError


DEFAULT_INFLATION_RATE = 0.03
DEFAULT_LIFE_EXPECTANCY = 95
# 25x annual expenses, i.e. a 4% withdrawal rate.
FOUR_PERCENT_RULE_MULTIPLIER = 25


class MaritalStatus(str, Enum):
    SINGLE = "single"
    MARRIED = "married"


class RiskTolerance(str, Enum):
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


class IncomeFlowType(str, Enum):
    SOCIAL_SECURITY = "social_security"
    PENSION = "pension"
    ANNUITY = "annuity"
    PART_TIME_WORK = "part_time_work"
    OTHER = "other"


class WithdrawalStrategyType(str, Enum):
    CONSTANT_DOLLAR = "constant_dollar"
    CONSTANT_PERCENTAGE = "constant_percentage"
    GUARDRAILS = "guardrails"
    BUCKET = "bucket"


RISK_TOLERANCE_RATES: Dict[RiskTolerance, float] = {
    RiskTolerance.CONSERVATIVE: 0.05,
    RiskTolerance.MODERATE: 0.07,
    RiskTolerance.AGGRESSIVE: 0.09,
}


@dataclass(frozen=True)
class AssetAllocation:
    """Portfolio split across four asset classes, in percent."""

    us_stocks: float
    international_stocks: float
    bonds: float
    cash: float

    @property
    def stock_percentage(self) -> float:
        return self.us_stocks + self.international_stocks

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "AssetAllocation":
        if not isinstance(payload, dict):
            raise InvalidArgumentError("Asset allocation must be an object")
        try:
            return cls(
                us_stocks=float(payload["us_stocks"]),
                international_stocks=float(payload["international_stocks"]),
                bonds=float(payload["bonds"]),
                cash=float(payload["cash"]),
            )
        except KeyError as exc:
            raise InvalidArgumentError(f"Asset allocation is missing '{exc.args[0]}'") from exc
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError("Asset allocation percentages must be numbers") from exc

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


# Historical nominal returns per asset class.
ASSET_CLASS_RETURNS: Dict[str, float] = {
    "us_stocks": 0.10,
    "international_stocks": 0.08,
    "bonds": 0.04,
    "cash": 0.02,
}

PRESET_ALLOCATIONS: Dict[RiskTolerance, AssetAllocation] = {
    RiskTolerance.CONSERVATIVE: AssetAllocation(us_stocks=20, international_stocks=10, bonds=60, cash=10),
    RiskTolerance.MODERATE: AssetAllocation(us_stocks=40, international_stocks=20, bonds=35, cash=5),
    RiskTolerance.AGGRESSIVE: AssetAllocation(us_stocks=55, international_stocks=30, bonds=12, cash=3),
}


@dataclass(frozen=True)
class IncomeFlow:
    """A guaranteed retirement income source such as Social Security or a pension."""

    id: str
    name: str
    type: IncomeFlowType
    monthly_amount: float
    start_age: int
    end_age: Optional[int] = None  # exclusive; None means lifetime
    inflation_adjusted: bool = False

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "IncomeFlow":
        if not isinstance(payload, dict):
            raise InvalidArgumentError("Income flow must be an object")
        try:
            end_age = payload.get("end_age")
            return cls(
                id=str(payload["id"]),
                name=str(payload["name"]),
                type=IncomeFlowType(payload["type"]),
                monthly_amount=float(payload["monthly_amount"]),
                start_age=int(payload["start_age"]),
                end_age=int(end_age) if end_age is not None else None,
                inflation_adjusted=bool(payload.get("inflation_adjusted", False)),
            )
        except KeyError as exc:
            raise InvalidArgumentError(f"Income flow is missing '{exc.args[0]}'") from exc
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"Invalid income flow: {exc}") from exc

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "monthly_amount": self.monthly_amount,
            "start_age": self.start_age,
            "inflation_adjusted": self.inflation_adjusted,
        }
        if self.end_age is not None:
            payload["end_age"] = self.end_age
        return payload


@dataclass(frozen=True)
class UserProfile:
    """The user's persisted financial profile."""

    age: int
    target_retirement_age: int
    marital_status: MaritalStatus
    current_savings: float
    monthly_contribution: float
    risk_tolerance: RiskTolerance
    expected_monthly_expenses: Optional[float] = None
    asset_allocation: Optional[AssetAllocation] = None
    income_flows: List[IncomeFlow] = field(default_factory=list)
    saved_at: str = ""

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "UserProfile":
        if not isinstance(payload, dict):
            raise InvalidArgumentError("Profile must be a JSON object")
        try:
            expenses = payload.get("expected_monthly_expenses")
            allocation = payload.get("asset_allocation")
            return cls(
                age=int(payload["age"]),
                target_retirement_age=int(payload["target_retirement_age"]),
                marital_status=MaritalStatus(payload["marital_status"]),
                current_savings=float(payload["current_savings"]),
                monthly_contribution=float(payload["monthly_contribution"]),
                risk_tolerance=RiskTolerance(payload["risk_tolerance"]),
                expected_monthly_expenses=float(expenses) if expenses is not None else None,
                asset_allocation=AssetAllocation.from_dict(allocation) if allocation else None,
                income_flows=[IncomeFlow.from_dict(item) for item in payload.get("income_flows") or []],
                saved_at=str(payload.get("saved_at") or ""),
            )
        except KeyError as exc:
            raise InvalidArgumentError(f"Profile is missing required field '{exc.args[0]}'") from exc
        except InvalidArgumentError:
            raise
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"Invalid profile: {exc}") from exc

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "age": self.age,
            "target_retirement_age": self.target_retirement_age,
            "marital_status": self.marital_status.value,
            "current_savings": self.current_savings,
            "monthly_contribution": self.monthly_contribution,
            "risk_tolerance": self.risk_tolerance.value,
        }
        if self.expected_monthly_expenses is not None:
            payload["expected_monthly_expenses"] = self.expected_monthly_expenses
        if self.asset_allocation is not None:
            payload["asset_allocation"] = self.asset_allocation.to_dict()
        payload["income_flows"] = [flow.to_dict() for flow in self.income_flows]
        payload["saved_at"] = self.saved_at
        return payload

    def with_changes(self, **changes: Any) -> "UserProfile":
        return replace(self, **changes)


@dataclass(frozen=True)
class GuardrailsConfig:
    """Spending guardrails; by convention floor > initial > ceiling, all in (0, 1)."""

    initial_rate: float
    floor_guardrail: float
    ceiling_guardrail: float
    adjustment_percent: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


DEFAULT_GUARDRAILS_CONFIG = GuardrailsConfig(
    initial_rate=0.05,
    floor_guardrail=0.06,
    ceiling_guardrail=0.04,
    adjustment_percent=0.10,
)


@dataclass(frozen=True)
class CompoundGrowthResult:
    future_value: int
    total_contributions: int
    total_growth: int

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class WithdrawalRateGuidance:
    standard_rate: float
    conservative_rate: float
    description: str


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class IncomeFlowBreakdown:
    name: str
    monthly_amount: float
    lifetime_value: int


@dataclass(frozen=True)
class IncomeFlowSummary:
    total_monthly_income: float
    total_lifetime_value: int
    savings_reduction: int
    breakdown: List[IncomeFlowBreakdown]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class YearlyWithdrawal:
    year: int
    starting_balance: int
    withdrawal: int
    ending_balance: int
    withdrawal_rate: float


@dataclass(frozen=True)
class StrategySimulationResult:
    """Outcome of simulating one withdrawal strategy; recomputed, never stored."""

    strategy_type: WithdrawalStrategyType
    initial_portfolio: float
    years: int
    annual_return: float
    yearly_results: List[YearlyWithdrawal]
    total_withdrawn: int
    final_balance: int
    average_withdrawal: int
    min_withdrawal: int
    max_withdrawal: int
    ran_out_of_money: bool
    depletion_year: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["strategy_type"] = self.strategy_type.value
        return payload


@dataclass(frozen=True)
class ProjectionResult:
    target_age: int
    projected_savings: int
    target_amount: int
    gap: int
    on_track: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
