"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal

import streamlit as st
import altair as alt

from src.application.use_cases.get_growth_projection import (
    GetGrowthProjectionUseCase,
    GrowthProjection,
)
from src.application.use_cases.get_history import (
    GetHistoryUseCase,
    HistoryView,
)
from src.application.use_cases.get_portfolio_summary import (
    GetPortfolioSummaryUseCase,
    PortfolioSummary,
)
from src.application.use_cases.get_rebalance_plan import (
    GetRebalancePlanUseCase,
    RebalancePlan,
)
from src.application.use_cases.get_wealth_summary import (
    GetWealthSummaryUseCase,
    WealthSummary,
)
from src.application.use_cases.manage_assets import (
    DeleteAssetUseCase,
    UpsertAssetUseCase,
)
from src.application.use_cases.manage_startups import (
    DeleteStartupUseCase,
    UpsertStartupUseCase,
)
from src.application.use_cases.refresh_prices import (
    RefreshPricesResult,
    RefreshPricesUseCase,
)
from src.application.use_cases.seed_assets import (
    SeedAssetsUseCase,
    SeedStartupsUseCase,
)
from src.domain.models import Asset, StartupInvestment
from src.infrastructure.container import (
    build_assets_repository,
    build_history_repository,
    build_quote_provider,
    build_settings,
    build_startups_repository,
)
from src.infrastructure.logging.logger import get_usage_logger


PAGES = ["Dashboard", "Rebalance", "Projection", "Assets", "Startups"]

PALETTE = [
    "#2563eb",
    "#10b981",
    "#f59e0b",
    "#ef4444",
    "#8b5cf6",
    "#14b8a6",
    "#f97316",
    "#22c55e",
]


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that numpy and pandas import completely before charting."""
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Chart dependencies are missing: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy import is incomplete (ndarray missing)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas import is incomplete (Timestamp missing)."
    return True, None


def _fetch_assets() -> Sequence[Asset]:
    """Fetch holdings, seeding the default portfolio on first run."""
    repository = build_assets_repository()
    SeedAssetsUseCase(repository).run()
    return repository.fetch_assets()


@st.cache_data(show_spinner=False)
def _load_assets() -> Sequence[Asset]:
    """Cached wrapper around _fetch_assets for Streamlit sessions."""
    return _fetch_assets()


def _fetch_summary() -> PortfolioSummary:
    """Compute the portfolio summary."""
    use_case = GetPortfolioSummaryUseCase(build_assets_repository())
    return use_case.execute()


@st.cache_data(show_spinner=False)
def _load_summary() -> PortfolioSummary:
    """Cached wrapper around _fetch_summary."""
    return _fetch_summary()


def _fetch_rebalance_plan(monthly_budget: Decimal) -> RebalancePlan:
    """Compute the rebalance plan for a monthly budget."""
    use_case = GetRebalancePlanUseCase(build_assets_repository())
    return use_case.execute(monthly_budget=monthly_budget)


@st.cache_data(show_spinner=False)
def _load_rebalance_plan(monthly_budget: Decimal) -> RebalancePlan:
    """Cached wrapper around _fetch_rebalance_plan."""
    return _fetch_rebalance_plan(monthly_budget)


def _fetch_projection(
    monthly_contribution: Decimal,
    annual_return: Decimal,
    years: int,
    starting_value: Decimal,
) -> GrowthProjection:
    """Compute the growth projection."""
    use_case = GetGrowthProjectionUseCase(build_assets_repository())
    return use_case.execute(
        monthly_contribution=monthly_contribution,
        annual_return=annual_return,
        years=years,
        starting_value=starting_value,
    )


@st.cache_data(show_spinner=False)
def _load_projection(
    monthly_contribution: Decimal,
    annual_return: Decimal,
    years: int,
    starting_value: Decimal,
) -> GrowthProjection:
    """Cached wrapper around _fetch_projection."""
    return _fetch_projection(
        monthly_contribution,
        annual_return,
        years,
        starting_value,
    )


def _fetch_history() -> HistoryView:
    """Fetch the value history."""
    return GetHistoryUseCase(build_history_repository()).execute()


@st.cache_data(show_spinner=False)
def _load_history() -> HistoryView:
    """Cached wrapper around _fetch_history."""
    return _fetch_history()


def _fetch_startups() -> Sequence[StartupInvestment]:
    """Fetch startup investments, seeding the defaults on first run."""
    repository = build_startups_repository()
    SeedStartupsUseCase(repository).run()
    return repository.fetch_startups()


@st.cache_data(show_spinner=False)
def _load_startups() -> Sequence[StartupInvestment]:
    """Cached wrapper around _fetch_startups."""
    return _fetch_startups()


def _fetch_wealth_summary(cash: Decimal) -> WealthSummary:
    """Combine holdings, startups and cash."""
    _fetch_startups()
    use_case = GetWealthSummaryUseCase(
        build_assets_repository(),
        build_startups_repository(),
    )
    return use_case.execute(cash=cash)


@st.cache_data(show_spinner=False)
def _load_wealth_summary(cash: Decimal) -> WealthSummary:
    """Cached wrapper around _fetch_wealth_summary."""
    return _fetch_wealth_summary(cash)


def _refresh_prices() -> RefreshPricesResult:
    """Refresh every price and drop cached computations."""
    settings = build_settings()
    use_case = RefreshPricesUseCase(
        assets_repository=build_assets_repository(),
        history_repository=build_history_repository(),
        quote_provider=build_quote_provider(settings),
    )
    result = use_case.run()
    st.cache_data.clear()
    return result


def _refresh_asset(asset_id: str) -> Asset | None:
    """Refresh one holding and drop cached computations."""
    settings = build_settings()
    use_case = RefreshPricesUseCase(
        assets_repository=build_assets_repository(),
        history_repository=build_history_repository(),
        quote_provider=build_quote_provider(settings),
    )
    asset = use_case.refresh_asset(asset_id)
    st.cache_data.clear()
    return asset


def _to_decimal(value) -> Decimal:
    """Convert Streamlit number inputs (floats) to Decimal."""
    return Decimal(str(value))


def _format_currency(value: Decimal | None, currency_code: str = "EUR") -> str:
    """Format currency values for display."""
    if value is None:
        return "—"
    symbol = "€" if currency_code == "EUR" else currency_code
    return f"{value:,.2f} {symbol}"


def _format_percent(value: Decimal | None) -> str:
    """Format percentages for display."""
    if value is None:
        return "—"
    return f"{value:.2f}%"


def _format_delta(value: Decimal) -> str:
    """Format delta values for display."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:,.2f}"


def _format_quantity(value: Decimal | None) -> str:
    """Format unit quantities, which may be unknown."""
    if value is None:
        return "—"
    return f"{value:,.2f}"


def _build_holdings_rows(
    assets: Sequence[Asset],
    summary: PortfolioSummary,
) -> list[dict[str, str]]:
    """Build table rows for the holdings overview."""
    weights = {item.id: item for item in summary.weights}
    performances = {item.id: item for item in summary.performances}
    rows = []
    for asset in assets:
        weight = weights.get(asset.id)
        performance = performances.get(asset.id)
        rows.append(
            {
                "Name": asset.name,
                "ISIN": asset.identifier,
                "Price": _format_currency(asset.last_price),
                "Value": _format_currency(weight.value if weight else None),
                "Perf. €": (
                    _format_delta(performance.gain) if performance else "—"
                ),
                "Perf. %": _format_percent(
                    performance.gain_pct if performance else None
                ),
                "Weight": _format_percent(weight.weight if weight else None),
                "Target": _format_percent(asset.target_weight),
                "Class": asset.asset_class or "—",
            }
        )
    return rows


def _build_rebalance_rows(plan: RebalancePlan) -> list[dict[str, str]]:
    """Build table rows for the rebalance plan."""
    return [
        {
            "Name": action.name,
            "ISIN": action.identifier,
            "Weight": _format_percent(action.current_weight),
            "Target": _format_percent(action.target_weight),
            "Δ value": _format_delta(action.delta_value),
            "Δ units": _format_quantity(action.quantity_delta),
            "Buy this month": _format_currency(action.monthly_buy_amount),
            "Units this month": _format_quantity(action.monthly_buy_quantity),
        }
        for action in plan.actions
    ]


def _build_startup_rows(
    startups: Sequence[StartupInvestment],
) -> list[dict[str, str]]:
    """Build table rows for the startup investments."""
    return [
        {
            "Startup": startup.name,
            "Fee": _format_currency(startup.fee),
            "Invested": _format_currency(startup.invested),
        }
        for startup in startups
    ]


def _prepare_donut_chart_data(
    items: Sequence[tuple[str, Decimal]],
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        items: (label, amount) pairs.
        max_categories: Maximum labels to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    sorted_items = sorted(
        (item for item in items if item[1] > 0),
        key=lambda item: item[1],
        reverse=True,
    )
    top_items = sorted_items[:max_categories]
    other_amount = sum(
        (amount for _, amount in sorted_items[max_categories:]),
        start=Decimal("0"),
    )
    if other_amount != 0:
        top_items = [*top_items, ("Other", other_amount)]
    total_amount = sum(
        (amount for _, amount in sorted_items),
        start=Decimal("0"),
    )
    data: list[dict[str, str | float]] = []
    for label, amount in top_items:
        share = (
            (amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": label,
                "amount": float(amount),
                "amount_label": _format_currency(amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def _render_donut_chart(
    items: Sequence[tuple[str, Decimal]],
    title: str,
    max_categories: int = 6,
    chart_size: int = 320,
) -> None:
    """Render a donut chart of amounts by label."""
    data, _ = _prepare_donut_chart_data(items, max_categories=max_categories)
    st.subheader(title)
    if not data:
        st.info("No priced holdings available for the chart.")
        return

    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="mouseover",
        clear="mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=6,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=PALETTE),
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    chart = base.add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    )
    st.altair_chart(chart, width="stretch")


def _build_projection_chart_data(
    projection: GrowthProjection,
) -> list[dict[str, str | float | int]]:
    """Flatten a projection into one row per (year, series)."""
    data: list[dict[str, str | float | int]] = []
    for point in projection.points:
        data.append(
            {"year": point.year, "series": "Invested", "value": float(point.invested)}
        )
        data.append(
            {"year": point.year, "series": "Total", "value": float(point.total)}
        )
    return data


def _render_projection_chart(projection: GrowthProjection) -> None:
    """Render invested capital vs. compounded value by year."""
    chart = alt.Chart(
        alt.Data(values=_build_projection_chart_data(projection))
    ).mark_line(point=True).encode(
        x=alt.X("year:Q", title="Year"),
        y=alt.Y("value:Q", title="Value (€)"),
        color=alt.Color("series:N", legend=alt.Legend(title=None)),
        tooltip=["year:Q", "series:N", alt.Tooltip("value:Q", format=",.2f")],
    )
    st.altair_chart(chart, width="stretch")


def _render_history_chart(history: HistoryView) -> None:
    """Render the portfolio value over the recorded refreshes."""
    st.subheader("Portfolio value history")
    if not history.snapshots:
        st.info("No history yet. Refresh prices to record a snapshot.")
        return
    data = [
        {
            "time": snapshot.taken_at.isoformat(),
            "value": float(snapshot.total_value),
        }
        for snapshot in history.snapshots
    ]
    chart = alt.Chart(alt.Data(values=data)).mark_line().encode(
        x=alt.X("time:T", title=None),
        y=alt.Y("value:Q", title="Value (€)", scale=alt.Scale(zero=False)),
        tooltip=["time:T", alt.Tooltip("value:Q", format=",.2f")],
    )
    st.altair_chart(chart, width="stretch")


def _render_wealth(cash: Decimal) -> None:
    """Render the grand total, the category donut and the startups table."""
    wealth = _load_wealth_summary(cash)
    total_col, startups_col, cash_col = st.columns(3)
    total_col.metric("Total wealth", _format_currency(wealth.total))
    startups_col.metric(
        "Startups",
        _format_currency(wealth.startups_invested),
    )
    cash_col.metric("Cash", _format_currency(wealth.cash))
    _render_donut_chart(
        [
            (item.asset_class, item.amount)
            for item in wealth.breakdown.categories
        ],
        "Wealth by category",
    )
    startups = _load_startups()
    if startups:
        st.subheader("Startup investments")
        st.caption(
            f"Invested {_format_currency(wealth.startups_invested)}, "
            f"fees {_format_currency(wealth.startups_fees)}"
        )
        st.dataframe(
            _build_startup_rows(startups),
            width="stretch",
            hide_index=True,
        )


def _render_dashboard(cash: Decimal) -> None:
    """Render totals, holdings and allocation charts."""
    assets = _load_assets()
    summary = _load_summary()
    totals = summary.totals

    value_col, cost_col, return_col = st.columns(3)
    value_col.metric("Total value", _format_currency(totals.total_value))
    cost_col.metric("Total cost", _format_currency(totals.total_cost))
    return_col.metric(
        "Total return",
        _format_percent(totals.total_return * Decimal("100")),
    )
    best_col, worst_col = st.columns(2)
    best_col.metric(
        "Best performer",
        totals.best.name if totals.best else "—",
        _format_percent(totals.best.perf * Decimal("100"))
        if totals.best
        else None,
    )
    worst_col.metric(
        "Worst performer",
        totals.worst.name if totals.worst else "—",
        _format_percent(totals.worst.perf * Decimal("100"))
        if totals.worst
        else None,
    )

    st.subheader("Holdings")
    st.dataframe(
        _build_holdings_rows(assets, summary),
        width="stretch",
        hide_index=True,
    )

    weights_col, classes_col = st.columns(2)
    with weights_col:
        _render_donut_chart(
            [(item.name, item.value) for item in summary.weights],
            "Weights by holding",
        )
    with classes_col:
        _render_donut_chart(
            [
                (item.asset_class, item.amount)
                for item in summary.breakdown.categories
            ],
            "Weights by asset class",
        )
    _render_wealth(cash)
    _render_history_chart(_load_history())


def _render_rebalance(default_budget: Decimal) -> None:
    """Render the monthly purchase plan."""
    budget = st.number_input(
        "Monthly budget (€)",
        min_value=1.0,
        value=float(default_budget),
        step=50.0,
    )
    plan = _load_rebalance_plan(_to_decimal(budget))
    if not plan.actions:
        st.warning("No priced holdings. Refresh prices first.")
        return
    st.caption(
        f"Allocated {_format_currency(plan.total_allocated)} of "
        f"{_format_currency(plan.monthly_budget)}"
    )
    if plan.unallocated_amount:
        st.warning(
            f"{_format_currency(plan.unallocated_amount)} could not be "
            "allocated: no holding has a target weight."
        )
    st.dataframe(
        _build_rebalance_rows(plan),
        width="stretch",
        hide_index=True,
    )
    st.caption(
        "Targets are normalized to sum to 100%. Quantities are estimates "
        "based on the last prices and exclude fees and slippage."
    )


def _render_projection(
    default_contribution: Decimal,
    default_return: Decimal,
    default_years: int,
) -> None:
    """Render the long-horizon projection with tunable assumptions."""
    summary = _load_summary()
    contribution = st.slider(
        "Monthly contribution (€)",
        min_value=0,
        max_value=5000,
        value=int(default_contribution),
        step=50,
    )
    annual_return = st.slider(
        "Annual return (%)",
        min_value=-10.0,
        max_value=20.0,
        value=float(default_return),
        step=0.5,
    )
    years = st.slider(
        "Horizon (years)",
        min_value=1,
        max_value=50,
        value=default_years,
    )
    projection = _load_projection(
        _to_decimal(contribution),
        _to_decimal(annual_return),
        int(years),
        summary.totals.total_value,
    )
    final = projection.final
    total_col, invested_col, gain_col = st.columns(3)
    total_col.metric("Projected value", _format_currency(final.total))
    invested_col.metric("Invested", _format_currency(final.invested))
    gain_col.metric(
        "Gain",
        _format_currency(projection.gain),
        _format_percent(projection.roi_pct),
    )
    _render_projection_chart(projection)


def _render_assets() -> None:
    """Render the add/edit form and the delete control."""
    assets = _load_assets()
    st.caption(f"{len(assets)} holdings stored")
    if not assets:
        st.warning("No holdings yet. Add one below.")

    with st.form("asset_form", clear_on_submit=True):
        st.subheader("Add or update a holding")
        name = st.text_input("Name")
        identifier = st.text_input("ISIN")
        quantity = st.number_input("Quantity", min_value=0.0, step=1.0)
        cost_basis = st.number_input("Average cost", min_value=0.0, step=1.0)
        target_weight = st.number_input(
            "Target weight (%)",
            min_value=0.0,
            step=1.0,
        )
        asset_class = st.text_input("Asset class", value="ETF")
        manual = st.checkbox("Manual price")
        last_price = st.number_input("Manual price", min_value=0.0, step=1.0)
        submitted = st.form_submit_button("Save")

    if submitted:
        if not name.strip() or not identifier.strip():
            st.error("Name and ISIN are required.")
        else:
            asset = UpsertAssetUseCase(build_assets_repository()).execute(
                name=name,
                identifier=identifier,
                quantity=_to_decimal(quantity),
                cost_basis=_to_decimal(cost_basis) if cost_basis else None,
                target_weight=(
                    _to_decimal(target_weight) if target_weight else None
                ),
                asset_class=asset_class.strip(),
                manual=manual,
                last_price=_to_decimal(last_price) if manual else None,
            )
            st.cache_data.clear()
            st.success(f"Saved {asset.name}.")

    if assets:
        names = {asset.id: asset.name for asset in assets}
        selected = st.selectbox(
            "Delete holding",
            options=list(names),
            format_func=lambda asset_id: names[asset_id],
        )
        if st.button("Delete"):
            DeleteAssetUseCase(build_assets_repository()).execute(selected)
            st.cache_data.clear()
            st.success(f"Deleted {names[selected]}.")

        to_refresh = st.selectbox(
            "Refresh holding",
            options=list(names),
            format_func=lambda asset_id: names[asset_id],
        )
        if st.button("Refresh price"):
            asset = _refresh_asset(to_refresh)
            if asset is None:
                st.warning(f"Price of {names[to_refresh]} is unavailable.")
            else:
                price = _format_currency(
                    asset.last_price,
                    asset.currency or "EUR",
                )
                st.success(f"{asset.name}: {price}")


def _render_startups() -> None:
    """Render the startup investments with their add and delete controls."""
    startups = _load_startups()
    if startups:
        st.dataframe(
            _build_startup_rows(startups),
            width="stretch",
            hide_index=True,
        )
    else:
        st.info("No startup investments yet.")

    with st.form("startup_form", clear_on_submit=True):
        st.subheader("Add or update a startup investment")
        name = st.text_input("Startup")
        invested = st.number_input("Amount invested", min_value=0.0, step=50.0)
        fee = st.number_input("Fee", min_value=0.0, step=1.0)
        submitted = st.form_submit_button("Save startup")

    if submitted:
        if not name.strip():
            st.error("Startup name is required.")
        else:
            startup = UpsertStartupUseCase(build_startups_repository()).execute(
                name=name,
                invested=_to_decimal(invested),
                fee=_to_decimal(fee),
            )
            st.cache_data.clear()
            st.success(f"Saved {startup.name}.")

    if startups:
        names = {startup.id: startup.name for startup in startups}
        selected = st.selectbox(
            "Delete startup",
            options=list(names),
            format_func=lambda startup_id: names[startup_id],
        )
        if st.button("Delete startup"):
            DeleteStartupUseCase(build_startups_repository()).execute(selected)
            st.cache_data.clear()
            st.success(f"Deleted {names[selected]}.")


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Portfolio Planner", layout="wide")
    st.title("Portfolio Planner")

    ok, message = _check_altair_dependencies()
    if not ok:
        st.error(message)
        return

    settings = build_settings()
    page = st.sidebar.selectbox("Page", PAGES)
    get_usage_logger().info(f"page_view page={page}")

    if st.sidebar.button("Refresh prices"):
        result = _refresh_prices()
        st.sidebar.caption(
            f"{result.refreshed_count} prices refreshed, "
            f"{len(result.failed_ids)} unknown"
        )

    if page == "Dashboard":
        _render_dashboard(settings.cash)
    elif page == "Rebalance":
        _render_rebalance(settings.monthly_budget)
    elif page == "Projection":
        _render_projection(
            settings.monthly_contribution,
            settings.annual_return,
            settings.projection_years,
        )
    elif page == "Startups":
        _render_startups()
    else:
        _render_assets()


if __name__ == "__main__":  # pragma: no cover
    main()
