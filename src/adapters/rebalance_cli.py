"""CLI adapter printing this month's purchase plan and growth projection."""

from src.application.use_cases.get_growth_projection import (
    GetGrowthProjectionUseCase,
)
from src.application.use_cases.get_rebalance_plan import (
    GetRebalancePlanUseCase,
)
from src.infrastructure.container import (
    build_assets_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_app_logger


def _format_optional(value) -> str:
    return "-" if value is None else f"{value:,.2f}"


def main() -> None:
    """Print the rebalance plan for the configured monthly budget."""
    logger = get_app_logger()
    settings = build_settings()
    assets_repository = build_assets_repository()

    plan = GetRebalancePlanUseCase(
        assets_repository,
        logger=logger,
        monthly_budget=settings.monthly_budget,
    ).execute()

    print(f"Monthly budget: {plan.monthly_budget:,.2f}")
    if not plan.actions:
        print("No priced holdings; refresh prices first.")
    for action in plan.actions:
        print(
            f"{action.name}: weight {action.current_weight:.2f}% "
            f"-> target {action.target_weight:.2f}%, "
            f"delta {action.delta_value:,.2f}, "
            f"buy {action.monthly_buy_amount:,.2f} "
            f"({_format_optional(action.monthly_buy_quantity)} units)"
        )
    if plan.unallocated_amount:
        print(f"Unallocated: {plan.unallocated_amount:,.2f}")

    projection = GetGrowthProjectionUseCase(
        assets_repository,
        logger=logger,
    ).execute(
        monthly_contribution=settings.monthly_contribution,
        annual_return=settings.annual_return,
        years=settings.projection_years,
    )
    final = projection.final
    print(
        f"Projection after {final.year} years at "
        f"{settings.annual_return}%: total {final.total:,.2f}, "
        f"invested {final.invested:,.2f}, gain {projection.gain:,.2f} "
        f"({projection.roi_pct}%)"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
