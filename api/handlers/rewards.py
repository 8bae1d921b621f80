"""
Reward handlers.

POST /api/rewards/calculate
"""

from aiohttp import web
from loguru import logger

from api.handlers.common import decimal_str, ok, read_json
from api.initialization.services import CALCULATOR_KEY
from app.validators import parse_reward_request
from calculator.core.models import RewardBreakdown
from calculator.types import RewardDataDict
from calculator.utils import format_percentage, format_token_amount


def serialize_breakdown(result: RewardBreakdown) -> RewardDataDict:
    """Convert a breakdown to the API shape, finalReward in 18-decimal units."""
    return RewardDataDict(
        validatorAddress=result.validator_address,
        baseReward=decimal_str(result.base_reward),
        sqlWeight=decimal_str(result.sql_weight),
        franchiseModifier=decimal_str(result.franchise_modifier),
        loyaltyMultiplier=decimal_str(result.loyalty_multiplier),
        finalReward=str(result.final_reward_wei),
    )


async def calculate_reward_handler(request: web.Request) -> web.Response:
    """Calculate a validator reward."""
    reward_input = parse_reward_request(await read_json(request))
    result = request.app[CALCULATOR_KEY].calculate_reward(reward_input)
    logger.info(
        f"Reward for {result.validator_address}: {format_token_amount(result.final_reward)} "
        f"(weight {format_percentage(result.sql_weight)}, "
        f"loyalty {format_percentage(result.loyalty_multiplier, show_sign=True)})"
    )
    return ok(serialize_breakdown(result))


def setup_routes(app: web.Application) -> None:
    app.router.add_post(
        "/api/rewards/calculate", calculate_reward_handler, name="rewards.calculate"
    )
