"""
Franchise and loyalty handlers.

POST /api/franchise/earnings
GET  /api/franchise/levels/{level}
POST /api/loyalty/coin-lock-quote
"""

from aiohttp import web
from loguru import logger

from api.handlers.common import decimal_str, ok, read_json
from app.validators import parse_coin_lock_request, parse_franchise_input, parse_level_number
from calculator.constants import get_level_benefits, get_level_requirements
from calculator.core.franchise import calculate_franchise_earnings, quote_coin_lock
from calculator.core.models import CoinLockQuote
from calculator.types import FranchiseEarningsDict
from calculator.utils import format_percentage, format_token_amount


async def franchise_earnings_handler(request: web.Request) -> web.Response:
    """Earning ratio, validator eligibility and loyalty bonus of a wallet."""
    data = parse_franchise_input(await read_json(request))
    result = calculate_franchise_earnings(data)
    return ok(FranchiseEarningsDict(
        earningRatio=decimal_str(result.earning_ratio),
        validatorEligible=result.validator_eligible,
        loyaltyBonusPercent=decimal_str(result.loyalty_bonus_percent),
    ))


async def franchise_level_handler(request: web.Request) -> web.Response:
    """Requirements and benefits of a franchise level."""
    level = parse_level_number(request.match_info["level"])
    requirements = get_level_requirements(level)
    benefits = get_level_benefits(level)
    return ok({
        "level": level,
        "requirements": {
            "minDailyOrders": requirements.min_daily_orders,
            "minDeliveryVolume": requirements.min_delivery_volume,
            "minComplaintResolutionRate": decimal_str(requirements.min_complaint_resolution_rate),
            "minSQL": requirements.min_sql,
            "territorySize": requirements.territory_size,
            "maxComplaints": requirements.max_complaints,
        },
        "benefits": {
            "commissionRate": decimal_str(benefits.commission_rate),
            "serviceAccess": list(benefits.service_access),
            "supportLevel": benefits.support_level,
            "marketingBudget": decimal_str(benefits.marketing_budget),
            "trainingAccess": list(benefits.training_access),
        },
    })


def serialize_quote(quote: CoinLockQuote) -> dict:
    return {
        "lockedAmount": decimal_str(quote.locked_amount),
        "lockDuration": quote.lock_duration,
        "bonusRate": decimal_str(quote.bonus_rate),
        "monthlyReward": decimal_str(quote.monthly_reward),
        "totalReward": decimal_str(quote.total_reward),
        "status": quote.status,
        "canUpgrade": quote.can_upgrade,
        "upgradeOptions": [
            {
                "duration": option.duration,
                "bonusRate": decimal_str(option.bonus_rate),
                "additionalReward": decimal_str(option.additional_reward),
            }
            for option in quote.upgrade_options
        ],
    }


async def coin_lock_quote_handler(request: web.Request) -> web.Response:
    """Project rewards of a coin lock."""
    quote_request = parse_coin_lock_request(await read_json(request))
    quote = quote_coin_lock(quote_request.locked_amount, quote_request.lock_duration)
    logger.debug(
        f"Coin lock quote: {format_token_amount(quote.locked_amount)} for {quote.lock_duration} months "
        f"at {format_percentage(quote.bonus_rate)} monthly"
    )
    return ok(serialize_quote(quote))


def setup_routes(app: web.Application) -> None:
    app.router.add_post(
        "/api/franchise/earnings", franchise_earnings_handler, name="franchise.earnings"
    )
    app.router.add_get(
        "/api/franchise/levels/{level}", franchise_level_handler, name="franchise.level"
    )
    app.router.add_post(
        "/api/loyalty/coin-lock-quote", coin_lock_quote_handler, name="loyalty.coin_lock_quote"
    )
