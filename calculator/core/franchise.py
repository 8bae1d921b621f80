"""
Franchise earnings, loyalty and level rules.

Covers the 70/30 earning rule, validator eligibility, loyalty bonus
bands, coin lock discounts and bonus projections, and franchise level
requirement checks.
"""

from decimal import Decimal

from calculator.constants import (
    COIN_LOCK_BASE_RATE,
    COIN_LOCK_BONUS_RATES,
    DEFAULT_TIER_TABLES,
    FULL_EARNING_RATIO,
    LOYALTY_DISCOUNTS,
    get_level_requirements,
)
from calculator.core.models import (
    CoinLockQuote,
    CoinLockUpgradeOption,
    FranchiseEarnings,
    FranchiseInput,
    FranchisePerformance,
    TierTables,
)


def get_loyalty_bonus(
    locked_amount: Decimal,
    lock_duration: int,
    tables: TierTables = DEFAULT_TIER_TABLES,
) -> Decimal:
    """
    Loyalty bonus for a lock, first matching band wins.

    Example:
        >>> get_loyalty_bonus(Decimal("5000"), 12)
        Decimal('0.01')
        >>> get_loyalty_bonus(Decimal("20000"), 5)
        Decimal('0')
    """
    for band in tables.loyalty_bands:
        if locked_amount >= band.min_amount and lock_duration >= band.min_duration_months:
            return band.bonus_percent
    return Decimal("0")


def calculate_franchise_earnings(
    data: FranchiseInput,
    tables: TierTables = DEFAULT_TIER_TABLES,
) -> FranchiseEarnings:
    """
    Calculate earning ratio, validator eligibility and loyalty bonus.

    Wallets below the full earning balance earn the reduced ratio (30%).

    Args:
        data: Wallet balance and lock state
        tables: Tier tables to read from

    Returns:
        FranchiseEarnings

    Example:
        >>> result = calculate_franchise_earnings(FranchiseInput(
        ...     wallet_balance=Decimal("12000"),
        ...     locked_amount=Decimal("10000"),
        ...     lock_duration=36,
        ... ))
        >>> result.earning_ratio, result.validator_eligible, result.loyalty_bonus_percent
        (Decimal('1.0'), True, Decimal('0.011'))
    """
    if data.wallet_balance >= tables.full_earning_min_balance:
        ratio = FULL_EARNING_RATIO
    else:
        ratio = tables.reduced_earning_ratio

    return FranchiseEarnings(
        earning_ratio=ratio,
        validator_eligible=data.wallet_balance >= tables.validator_min_balance,
        loyalty_bonus_percent=get_loyalty_bonus(
            data.locked_amount, data.lock_duration, tables
        ),
    )


def calculate_loyalty_discount(coin_lock_amount: Decimal) -> Decimal:
    """
    Discount granted for a coin lock amount.

    Example:
        >>> calculate_loyalty_discount(Decimal("7500"))
        Decimal('0.1')
        >>> calculate_loyalty_discount(Decimal("999"))
        Decimal('0')
    """
    for threshold, discount in LOYALTY_DISCOUNTS:
        if coin_lock_amount >= threshold:
            return discount
    return Decimal("0")


def get_coin_lock_bonus_rate(duration_months: int) -> Decimal:
    """Monthly bonus rate for a lock duration."""
    for min_duration, rate in COIN_LOCK_BONUS_RATES:
        if duration_months >= min_duration:
            return rate
    return COIN_LOCK_BASE_RATE


def _no_lock_quote() -> CoinLockQuote:
    options = tuple(
        CoinLockUpgradeOption(duration=duration, bonus_rate=rate, additional_reward=Decimal("0"))
        for duration, rate in sorted(COIN_LOCK_BONUS_RATES)
    )
    return CoinLockQuote(
        locked_amount=Decimal("0"),
        lock_duration=0,
        bonus_rate=Decimal("0"),
        monthly_reward=Decimal("0"),
        total_reward=Decimal("0"),
        status="none",
        can_upgrade=False,
        upgrade_options=options,
    )


def quote_coin_lock(locked_amount: Decimal, lock_duration: int) -> CoinLockQuote:
    """
    Project rewards of a coin lock and the upgrades it can take.

    Args:
        locked_amount: Locked coins, 0 when the holder has no lock
        lock_duration: Lock duration in months

    Returns:
        CoinLockQuote; with no lock the status is "none" and the default
        duration tiers are listed with zero rewards

    Example:
        >>> quote = quote_coin_lock(Decimal("1000"), 12)
        >>> quote.monthly_reward, quote.total_reward
        (Decimal('50.00'), Decimal('600.00'))
        >>> [option.duration for option in quote.upgrade_options]
        [24, 36]
    """
    if locked_amount <= 0:
        return _no_lock_quote()

    rate = get_coin_lock_bonus_rate(lock_duration)
    monthly = locked_amount * rate

    options = tuple(
        CoinLockUpgradeOption(
            duration=duration,
            bonus_rate=new_rate,
            additional_reward=locked_amount * (new_rate - rate) * duration,
        )
        for duration, new_rate in sorted(COIN_LOCK_BONUS_RATES)
        if lock_duration < duration
    )

    return CoinLockQuote(
        locked_amount=locked_amount,
        lock_duration=lock_duration,
        bonus_rate=rate,
        monthly_reward=monthly,
        total_reward=monthly * lock_duration,
        status="active",
        can_upgrade=bool(options),
        upgrade_options=options,
    )


def check_level_requirements(
    level: int,
    performance: FranchisePerformance,
    tables: TierTables = DEFAULT_TIER_TABLES,
) -> list[str]:
    """
    List the requirements of a franchise level that are not met.

    Args:
        level: Franchise level, unknown levels use level 1 requirements
        performance: Current franchise metrics
        tables: Tier tables to read from

    Returns:
        Unmet requirement messages, empty when the level is held
    """
    req = get_level_requirements(level, tables)
    unmet: list[str] = []

    if performance.daily_orders < req.min_daily_orders:
        unmet.append(f"Daily orders below {req.min_daily_orders}")
    if performance.delivery_volume < req.min_delivery_volume:
        unmet.append(f"Delivery volume below {req.min_delivery_volume}")
    if performance.complaint_resolution_rate < req.min_complaint_resolution_rate:
        unmet.append(
            f"Complaint resolution rate below {req.min_complaint_resolution_rate}"
        )
    if performance.sql < req.min_sql:
        unmet.append(f"SQL level below {req.min_sql}")
    if performance.complaints > req.max_complaints:
        unmet.append(f"More than {req.max_complaints} complaints")

    return unmet
