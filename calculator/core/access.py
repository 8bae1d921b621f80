"""
SQL level access rules.

Tier comparison, next-tier lookup and named feature gates that combine
a minimum tier with account state checks.
"""

from decimal import Decimal
from types import MappingProxyType

from app.utils.exceptions import NotFoundError
from calculator.core.models import AccessGate, GateDecision, UserAccessState
from calculator.types import SqlLevel


def can_access(user_level: SqlLevel, required_level: SqlLevel) -> bool:
    """
    Check whether a user tier satisfies a required tier.

    Example:
        >>> can_access(SqlLevel.HIGH, SqlLevel.BASIC)
        True
        >>> can_access(SqlLevel.FREE, SqlLevel.VIP)
        False
    """
    return user_level.rank >= required_level.rank


def next_level(current: SqlLevel) -> SqlLevel | None:
    """
    Get the tier directly above current.

    Returns:
        Next SqlLevel, None when current is the top tier

    Example:
        >>> next_level(SqlLevel.NORMAL)
        <SqlLevel.HIGH: 'high'>
        >>> next_level(SqlLevel.VIP) is None
        True
    """
    levels = list(SqlLevel)
    position = current.rank + 1
    if position >= len(levels):
        return None
    return levels[position]


ACCESS_GATES: MappingProxyType[str, AccessGate] = MappingProxyType({
    "basic": AccessGate(
        name="basic",
        min_level=SqlLevel.BASIC,
        require_active=True,
    ),
    "intermediate": AccessGate(
        name="intermediate",
        min_level=SqlLevel.NORMAL,
        require_active=True,
        require_loyalty_lock=True,
    ),
    "advanced": AccessGate(
        name="advanced",
        min_level=SqlLevel.HIGH,
        require_active=True,
        require_loyalty_lock=True,
        min_wallet_balance=Decimal("1000"),
    ),
    "premium": AccessGate(
        name="premium",
        min_level=SqlLevel.VIP,
        require_active=True,
        require_loyalty_lock=True,
        min_wallet_balance=Decimal("5000"),
    ),
    "elite": AccessGate(
        name="elite",
        min_level=SqlLevel.VIP,
        require_active=True,
        require_loyalty_lock=True,
        min_wallet_balance=Decimal("10000"),
    ),
})


def get_gate(name: str) -> AccessGate:
    """
    Look up a gate profile by name.

    Raises:
        NotFoundError: If no gate has that name
    """
    gate = ACCESS_GATES.get(name.lower())
    if gate is None:
        raise NotFoundError(f"Unknown access gate: {name}")
    return gate


def evaluate_gate(gate: AccessGate, state: UserAccessState) -> GateDecision:
    """
    Evaluate every check of a gate against the caller state.

    All failing checks are reported, not only the first one.

    Args:
        gate: Gate profile
        state: Caller SQL level and account state

    Returns:
        GateDecision with passed flag and the failure reasons

    Example:
        >>> state = UserAccessState(sql_level=SqlLevel.BASIC, is_active=True)
        >>> evaluate_gate(ACCESS_GATES["basic"], state).passed
        True
    """
    reasons: list[str] = []

    if not can_access(state.sql_level, gate.min_level):
        reasons.append(
            f"SQL level {gate.min_level.value} required "
            f"(current: {state.sql_level.value})"
        )

    if gate.require_active and not state.is_active:
        reasons.append("Account must be active to access this feature")

    if gate.require_loyalty_lock and not state.has_loyalty_lock:
        reasons.append("Active loyalty lock required")

    if gate.min_wallet_balance is not None and state.wallet_balance < gate.min_wallet_balance:
        reasons.append(f"Minimum wallet balance of {gate.min_wallet_balance} required")

    return GateDecision(gate=gate.name, passed=not reasons, reasons=tuple(reasons))
