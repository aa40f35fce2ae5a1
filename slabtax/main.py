import argparse
import logging
import os
import sys
from typing import Any, Literal

from fastapi import FastAPI, HTTPException
from fastapi.responses import RedirectResponse
from rich.console import Console
from rich.table import Table

from slabtax import __version__
from slabtax.config import get_settings
from slabtax.core.formatting import format_inr
from slabtax.core.inputs import InvalidInput, parse_bool, parse_income
from slabtax.estimator import EstimateRequest, compute_estimate_summary, estimate, slab_schedule
from slabtax.lifespan import build_application_lifespan
from slabtax.ui import router as ui_router

logger = logging.getLogger("slabtax")


async def _announce_schedule(_: FastAPI) -> None:
    schedule = slab_schedule()
    logger.info(
        "Slab estimator ready; schedule=%s slabs=%s standard_deduction=%s",
        schedule["schedule"],
        len(schedule["slabs"]),
        schedule["standard_deduction"],
    )


app = FastAPI(
    title="Slab Tax Estimator",
    version=__version__,
    description="Estimate income tax under the new-regime slab schedule. The browser form lives under /ui/.",
    lifespan=build_application_lifespan("estimator", startup_hook=_announce_schedule),
)

app.include_router(ui_router)


@app.get("/", include_in_schema=False)
def root() -> RedirectResponse:
    return RedirectResponse(url="/ui/")


@app.get("/tax/estimate")
def estimate_from_query(income: str, salaried: str = "false"):
    try:
        amount = parse_income(income)
        is_salaried = parse_bool(salaried)
    except InvalidInput as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return compute_estimate_summary(amount, is_salaried)


@app.post("/tax/estimate")
def estimate_from_body(payload: EstimateRequest):
    return estimate(payload)


@app.get("/tax/slabs")
def slabs():
    return slab_schedule()


@app.get("/health")
def health():
    settings = getattr(app.state, "settings", get_settings())
    return {
        "ok": True,
        "build": {
            "version": settings.build_version,
            "sha": settings.build_sha,
        },
    }


ColorPreference = Literal["auto", "always", "never"]


def _resolve_color_preference(pref: ColorPreference) -> ColorPreference:
    if pref == "auto" and os.getenv("NO_COLOR"):
        return "never"
    return pref


def _get_console(pref: ColorPreference, *, stderr: bool = False) -> Console:
    resolved = _resolve_color_preference(pref)
    if resolved == "never":
        return Console(stderr=stderr, no_color=True, highlight=False)
    return Console(stderr=stderr, force_terminal=True if resolved == "always" else None)


def _build_table(title: str, columns: list[str]) -> Table:
    table = Table(title=title, expand=False)
    for column in columns:
        table.add_column(column)
    return table


def _print_summary(summary: dict[str, Any], console: Console) -> None:
    display = summary["display"]
    rows = [("Gross income", display["income"])]
    if summary["salaried"]:
        rows.append(("Standard deduction", display["standard_deduction"]))
        rows.append(("Taxable income", display["taxable_income"]))
    rows.append(("Total tax", display["total_tax"]))
    rows.append(("Effective tax rate", display["effective_rate"]))

    if summary["breakdown"]:
        breakdown = _build_table("Tax Breakdown", ["Slab", "Tax"])
        for item in summary["breakdown"]:
            breakdown.add_row(item["label"], item["amount_display"])
        console.print(breakdown)
    else:
        console.print("Taxable income is within the rebate limit; no tax is payable.")

    table = _build_table("Summary", ["Metric", "Value"])
    for metric, value in rows:
        table.add_row(metric, value)
    console.print(table)


def _print_slabs(console: Console) -> None:
    schedule = slab_schedule()
    table = _build_table(f"Tax Slabs for {schedule['schedule']}", ["Slab", "Rate"])
    for slab in schedule["slabs"]:
        table.add_row(slab["label"], f"{slab['rate'] * 100:.0f}%")
    console.print(table)
    console.print(
        f"Standard deduction for salaried filers: {format_inr(schedule['standard_deduction'])}. "
        f"No tax is payable when taxable income is at most {format_inr(schedule['exemption_ceiling'])}."
    )


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="slabtax",
        description="Estimate income tax under the new-regime slab schedule.",
    )
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Color output preference (default: auto).",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_const",
        const="never",
        help="Alias for --color never.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    estimate_cmd = commands.add_parser("estimate", help="Estimate tax for an annual income.")
    estimate_cmd.add_argument("income", help="Annual income, e.g. 1500000, 15,00,000, 15L or 1.5cr.")
    estimate_cmd.add_argument(
        "--salaried",
        action="store_true",
        default=None,
        help="Apply the standard deduction for salaried filers.",
    )

    commands.add_parser("slabs", help="Show the slab schedule.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    console = _get_console(args.color)
    if args.command == "slabs":
        _print_slabs(console)
        return
    try:
        amount = parse_income(args.income)
    except InvalidInput as exc:
        _get_console(args.color, stderr=True).print(f"Error: {exc}", markup=False)
        sys.exit(2)
    salaried = args.salaried if args.salaried is not None else get_settings().default_salaried
    _print_summary(compute_estimate_summary(amount, salaried), console)


if __name__ == "__main__":
    main()
