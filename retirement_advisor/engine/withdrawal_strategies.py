"""Year-by-year simulation of retirement withdrawal strategies.

Three strategies are simulated deterministically against a fixed annual
return:

* constant dollar: a fixed first-year amount raised by inflation each year
  (the classic 4% rule);
* constant percentage: a fixed fraction of the current balance;
* guardrails: a starting rate whose dollar amount is cut or raised when the
  realized withdrawal rate crosses the configured guardrails.

Every simulation withdraws at the start of the year, grows the remainder,
and rounds the balance to whole units. The loop always runs ``years``
iterations; a depleted portfolio simply withdraws zero.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from retirement_advisor.engine.errors import InvalidArgumentError, UnsupportedStrategyError
from retirement_advisor.engine.models import (
    DEFAULT_GUARDRAILS_CONFIG,
    DEFAULT_INFLATION_RATE,
    GuardrailsConfig,
    StrategySimulationResult,
    WithdrawalStrategyType,
    YearlyWithdrawal,
)
from retirement_advisor.engine.rounding import round_currency


DEFAULT_WITHDRAWAL_RATE = 0.04


@dataclass(frozen=True)
class WithdrawalStrategy:
    """Catalog entry describing a strategy to the user."""

    type: WithdrawalStrategyType
    name: str
    description: str
    pros: List[str]
    cons: List[str]
    example: str
    simulatable: bool = True


WITHDRAWAL_STRATEGIES: List[WithdrawalStrategy] = [
    WithdrawalStrategy(
        type=WithdrawalStrategyType.CONSTANT_DOLLAR,
        name="Constant Dollar (4% Rule)",
        description=(
            "Withdraw a fixed percentage of the starting portfolio in year one, then raise "
            "that dollar amount by inflation every year regardless of market performance."
        ),
        pros=[
            "Predictable, stable income",
            "Simple to follow and explain",
            "Historically sustained 30-year retirements",
        ],
        cons=[
            "Ignores market performance",
            "Can deplete the portfolio after poor early returns",
            "May leave a large unspent balance after strong returns",
        ],
        example="With $1,000,000 saved, withdraw $40,000 in year one, $41,200 in year two, and so on.",
    ),
    WithdrawalStrategy(
        type=WithdrawalStrategyType.CONSTANT_PERCENTAGE,
        name="Constant Percentage",
        description=(
            "Withdraw the same percentage of the current portfolio balance every year, so "
            "income rises and falls with the market."
        ),
        pros=[
            "Portfolio can never be fully depleted",
            "Spending adapts automatically to market performance",
        ],
        cons=[
            "Income can vary significantly from year to year",
            "Hard to budget fixed expenses",
        ],
        example="At 4%, a $1,000,000 portfolio pays $40,000; if it falls to $800,000 it pays $32,000.",
    ),
    WithdrawalStrategy(
        type=WithdrawalStrategyType.GUARDRAILS,
        name="Guardrails (Variable Withdrawal)",
        description=(
            "Start with a base withdrawal rate and adjust spending when the current withdrawal "
            "rate drifts outside upper and lower guardrails."
        ),
        pros=[
            "Balances stable income with portfolio protection",
            "Allows higher initial withdrawals than the 4% rule",
            "Raises spending when the portfolio grows",
        ],
        cons=[
            "More complex to follow",
            "Requires spending cuts after poor markets",
        ],
        example=(
            "Start at 5%. If the withdrawal rises above 6% of the portfolio, cut spending by 10%; "
            "if it falls below 4%, raise spending by 10%."
        ),
    ),
    WithdrawalStrategy(
        type=WithdrawalStrategyType.BUCKET,
        name="Bucket Strategy",
        description=(
            "Split savings into buckets by time horizon: cash for near-term spending, bonds for "
            "the medium term, and stocks for long-term growth, refilling buckets over time."
        ),
        pros=[
            "Avoids selling stocks during downturns",
            "Psychologically reassuring",
        ],
        cons=[
            "Requires ongoing rebalancing decisions",
            "Cash buckets can drag on returns",
        ],
        example="Keep 2 years of expenses in cash, 5-8 years in bonds, and the rest in stocks.",
        simulatable=False,
    ),
]

_STRATEGIES_BY_TYPE: Dict[WithdrawalStrategyType, WithdrawalStrategy] = {
    strategy.type: strategy for strategy in WITHDRAWAL_STRATEGIES
}


def get_strategy_info(strategy_type: str) -> Optional[WithdrawalStrategy]:
    try:
        return _STRATEGIES_BY_TYPE.get(WithdrawalStrategyType(strategy_type))
    except ValueError:
        return None


def get_all_strategies() -> List[WithdrawalStrategy]:
    return list(WITHDRAWAL_STRATEGIES)


@dataclass
class _SimulationLedger:
    """Per-call accumulator of yearly records and totals."""

    yearly_results: List[YearlyWithdrawal] = field(default_factory=list)
    total_withdrawn: int = 0
    min_withdrawal: Optional[int] = None
    max_withdrawal: int = 0
    ran_out_of_money: bool = False
    depletion_year: Optional[int] = None

    def record(self, year: int, starting_balance: int, withdrawal: int, ending_balance: int) -> float:
        rate = withdrawal / starting_balance if starting_balance > 0 else 0.0
        self.yearly_results.append(
            YearlyWithdrawal(
                year=year,
                starting_balance=starting_balance,
                withdrawal=withdrawal,
                ending_balance=ending_balance,
                withdrawal_rate=rate,
            )
        )
        self.total_withdrawn += withdrawal
        self.min_withdrawal = withdrawal if self.min_withdrawal is None else min(self.min_withdrawal, withdrawal)
        self.max_withdrawal = max(self.max_withdrawal, withdrawal)
        return rate

    def mark_depleted(self, year: int) -> None:
        self.ran_out_of_money = True
        if self.depletion_year is None:
            self.depletion_year = year

    def result(
        self,
        strategy_type: WithdrawalStrategyType,
        initial_portfolio: float,
        years: int,
        annual_return: float,
        final_balance: int,
    ) -> StrategySimulationResult:
        return StrategySimulationResult(
            strategy_type=strategy_type,
            initial_portfolio=initial_portfolio,
            years=years,
            annual_return=annual_return,
            yearly_results=self.yearly_results,
            total_withdrawn=self.total_withdrawn,
            final_balance=final_balance,
            average_withdrawal=round_currency(self.total_withdrawn / years) if years > 0 else 0,
            min_withdrawal=self.min_withdrawal or 0,
            max_withdrawal=self.max_withdrawal,
            ran_out_of_money=self.ran_out_of_money,
            depletion_year=self.depletion_year,
        )


def _grow(balance: float, withdrawal: float, annual_return: float) -> int:
    return round_currency(max(0.0, (balance - withdrawal) * (1 + annual_return)))


def simulate_constant_percentage(
    initial_portfolio: float,
    withdrawal_rate: float,
    years: int,
    annual_return: float,
) -> StrategySimulationResult:
    """Withdraw ``withdrawal_rate`` of the current balance every year.

    The withdrawal is always a fraction of a non-negative balance, so this
    strategy never runs out of money.
    """

    ledger = _SimulationLedger()
    balance = round_currency(initial_portfolio)
    for year in range(1, years + 1):
        starting_balance = balance
        withdrawal = round_currency(balance * withdrawal_rate)
        balance = _grow(balance, withdrawal, annual_return)
        ledger.record(year, starting_balance, withdrawal, balance)

    return ledger.result(
        WithdrawalStrategyType.CONSTANT_PERCENTAGE, initial_portfolio, years, annual_return, balance
    )


def simulate_constant_dollar(
    initial_portfolio: float,
    initial_withdrawal: float,
    years: int,
    annual_return: float,
    inflation_rate: float = DEFAULT_INFLATION_RATE,
) -> StrategySimulationResult:
    """Withdraw a fixed amount raised by ``inflation_rate`` every year.

    When the balance cannot cover the withdrawal, the withdrawal is clamped to
    the balance and the first such year is recorded as the depletion year.
    """

    ledger = _SimulationLedger()
    balance = round_currency(initial_portfolio)
    withdrawal = round_currency(initial_withdrawal)
    for year in range(1, years + 1):
        starting_balance = balance
        if balance < withdrawal:
            withdrawal = balance
            ledger.mark_depleted(year)

        balance = _grow(balance, withdrawal, annual_return)
        ledger.record(year, starting_balance, withdrawal, balance)

        withdrawal = round_currency(withdrawal * (1 + inflation_rate))
        if balance == 0:
            withdrawal = 0

    return ledger.result(
        WithdrawalStrategyType.CONSTANT_DOLLAR, initial_portfolio, years, annual_return, balance
    )


def next_guardrail_withdrawal(withdrawal: int, realized_rate: float, config: GuardrailsConfig) -> int:
    """Decide next year's base withdrawal from this year's realized rate.

    A rate above the floor guardrail means spending is too aggressive for the
    portfolio and is cut; a rate below the ceiling guardrail means it is too
    conservative and is raised.
    """

    if realized_rate > config.floor_guardrail:
        return round_currency(withdrawal * (1 - config.adjustment_percent))
    if realized_rate < config.ceiling_guardrail:
        return round_currency(withdrawal * (1 + config.adjustment_percent))
    return withdrawal


def simulate_guardrails(
    initial_portfolio: float,
    years: int,
    annual_return: float,
    config: GuardrailsConfig = DEFAULT_GUARDRAILS_CONFIG,
) -> StrategySimulationResult:
    """Simulate guardrail spending.

    Each year runs two steps in order: withdraw the current base amount and
    grow the remainder, then set the next year's base from the rate realized
    this year.
    """

    ledger = _SimulationLedger()
    balance = round_currency(initial_portfolio)
    withdrawal = round_currency(initial_portfolio * config.initial_rate)
    for year in range(1, years + 1):
        starting_balance = balance
        if balance < withdrawal:
            withdrawal = balance
            ledger.mark_depleted(year)

        balance = _grow(balance, withdrawal, annual_return)
        realized_rate = ledger.record(year, starting_balance, withdrawal, balance)

        withdrawal = next_guardrail_withdrawal(withdrawal, realized_rate, config)
        if balance == 0:
            withdrawal = 0

    return ledger.result(WithdrawalStrategyType.GUARDRAILS, initial_portfolio, years, annual_return, balance)


def compare_strategies(
    initial_portfolio: float,
    years: int,
    annual_return: float,
    monthly_expenses: float,
) -> List[StrategySimulationResult]:
    """Run every simulatable strategy against the same starting conditions."""

    return [
        simulate_constant_dollar(initial_portfolio, monthly_expenses * 12, years, annual_return),
        simulate_constant_percentage(initial_portfolio, DEFAULT_WITHDRAWAL_RATE, years, annual_return),
        simulate_guardrails(initial_portfolio, years, annual_return),
    ]


def simulate_strategy(
    strategy: str,
    initial_portfolio: float,
    years: int,
    annual_return: float,
    *,
    annual_withdrawal: Optional[float] = None,
    withdrawal_rate: Optional[float] = None,
    inflation_rate: float = DEFAULT_INFLATION_RATE,
    guardrails_config: Optional[GuardrailsConfig] = None,
) -> StrategySimulationResult:
    """Dispatch to the simulation for ``strategy``.

    Raises:
        UnsupportedStrategyError: for strategies without a simulation (bucket).
        InvalidArgumentError: for unknown strategy names or negative years.
    """

    try:
        strategy_type = WithdrawalStrategyType(strategy)
    except ValueError as exc:
        allowed = ", ".join(item.value for item in WithdrawalStrategyType)
        raise InvalidArgumentError(f"Unknown strategy '{strategy}'. Expected one of: {allowed}") from exc
    if years < 0:
        raise InvalidArgumentError("Years to simulate cannot be negative")

    if strategy_type is WithdrawalStrategyType.CONSTANT_DOLLAR:
        withdrawal = (
            annual_withdrawal if annual_withdrawal is not None else initial_portfolio * DEFAULT_WITHDRAWAL_RATE
        )
        return simulate_constant_dollar(initial_portfolio, withdrawal, years, annual_return, inflation_rate)
    if strategy_type is WithdrawalStrategyType.CONSTANT_PERCENTAGE:
        rate = withdrawal_rate if withdrawal_rate is not None else DEFAULT_WITHDRAWAL_RATE
        return simulate_constant_percentage(initial_portfolio, rate, years, annual_return)
    if strategy_type is WithdrawalStrategyType.GUARDRAILS:
        return simulate_guardrails(
            initial_portfolio, years, annual_return, guardrails_config or DEFAULT_GUARDRAILS_CONFIG
        )
    raise UnsupportedStrategyError(
        f"Strategy '{strategy_type.value}' cannot be simulated. Ask for an explanation of it instead."
    )


def format_simulation_summary(result: StrategySimulationResult) -> str:
    info = _STRATEGIES_BY_TYPE.get(result.strategy_type)
    name = info.name if info else result.strategy_type.value
    lines = [
        f"{name}:",
        f"  Initial portfolio: ${result.initial_portfolio:,.0f}",
        f"  Final balance: ${result.final_balance:,.0f}",
        f"  Total withdrawn: ${result.total_withdrawn:,.0f}",
        f"  Average annual withdrawal: ${result.average_withdrawal:,.0f}",
        f"  Withdrawal range: ${result.min_withdrawal:,.0f} - ${result.max_withdrawal:,.0f}",
    ]
    if result.ran_out_of_money:
        lines.append(f"  Money ran out in year {result.depletion_year}")
    else:
        lines.append(f"  Portfolio lasted all {result.years} years")
    return "\n".join(lines)
