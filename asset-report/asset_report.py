"""Print fixed asset reports from the depreciation API for a JSON file of asset records.

Usage:
    python asset-report/asset_report.py assets.json rollforward --start 2024-01-01 --end 2024-12-31
    python asset-report/asset_report.py assets.json schedule --asset-id FA-1001
    python asset-report/asset_report.py assets.json disposals --start 2024-01-01 --end 2024-12-31
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

import httpx


# ── Helpers ──────────────────────────────────────────────────────────────────

def _dollar(v) -> str:
    amount = float(v)
    if amount < 0:
        return f"(${-amount:,.2f})"
    return f"${amount:,.2f}"


def _pct(v) -> str:
    return f"{float(v) * 100:.1f}%"


def _header(title: str) -> None:
    print(f"\n{'=' * 78}")
    print(f"  {title}")
    print(f"{'=' * 78}")


# ── Report sections ──────────────────────────────────────────────────────────

def print_schedules(data: dict) -> None:
    for result in data["schedules"]:
        sched = result["schedule"]
        title = f"{sched['book']} Depreciation Schedule, asset {data['asset_id']}"
        if sched.get("tax_code"):
            title += f" ({sched['tax_code']})"
        _header(title)
        print(f"  Method: {sched['method']}  •  Life: {sched['life']} years  •  Convention: {sched['convention']}")
        print()
        print(f"  {'Year':>6}  {'Beginning NBV':>16}  {'Depreciation':>16}  {'Ending NBV':>16}")
        print(f"  {'-' * 6}  {'-' * 16}  {'-' * 16}  {'-' * 16}")
        for row in result["rows"]:
            print(
                f"  {row['year']:>6}  {_dollar(row['beginning_nbv']):>16}"
                f"  {_dollar(row['depreciation']):>16}  {_dollar(row['ending_nbv']):>16}"
            )
        print()
        print(f"  Total depreciation:  {_dollar(result['total_depreciation'])}")
        print(f"  Remaining value:     {_dollar(result['remaining_value'])}")


def print_rollforward(data: dict) -> None:
    period = data["period"]
    _header(f"Asset Rollforward {period['start']} to {period['end']}")
    print(
        f"  {'Category':<18}{'Beginning':>12}{'Additions':>12}"
        f"{'Disposals':>12}{'Depreciation':>14}{'Ending':>12}"
    )
    for row in [*data["rows"], data["total"]]:
        label = row["category"]
        if row is not data["total"]:
            label = f"{label} ({row['asset_count']})"
        print(
            f"  {label:<18}{_dollar(row['beginning_balance']):>12}{_dollar(row['additions']):>12}"
            f"{_dollar(row['disposals']):>12}{_dollar(row['depreciation']):>14}"
            f"{_dollar(row['ending_balance']):>12}"
        )


def print_disposals(data: dict) -> None:
    period = data["period"]
    _header(f"Asset Disposals {period['start']} to {period['end']}")
    if not data["rows"]:
        print("  No disposals in period")
        return
    for row in data["rows"]:
        print(f"  {row['asset_id']} {row['name']}  ({row['method']}, {row['disposal_date']})")
        print(f"    Cost:              {_dollar(row['cost'])}")
        print(f"    Accum. deprec.:    {_dollar(row['accumulated_depreciation'])}")
        print(f"    Net book value:    {_dollar(row['net_book_value'])}")
        print(f"    Proceeds:          {_dollar(row['proceeds'])}")
        print(f"    Gain/(loss):       {_dollar(row['gain_loss'])}")
    print()
    print(f"  Total cost:          {_dollar(data['total_cost'])}")
    print(f"  Total NBV:           {_dollar(data['total_net_book_value'])}")
    print(f"  Total gain/(loss):   {_dollar(data['total_gain_loss'])}")


def print_waterfall(data: dict) -> None:
    period = data["period"]
    _header(f"Depreciation Waterfall {period['start']} to {period['end']}")
    print(f"  Beginning balance:   {_dollar(data['beginning_balance'])}")
    print(f"  + Additions:         {_dollar(data['additions'])}")
    print(f"  - Depreciation:      {_dollar(data['depreciation'])}")
    print(f"  - Disposals:         {_dollar(data['disposals'])}")
    print(f"  Ending balance:      {_dollar(data['ending_balance'])}")
    if data["composition"]:
        print()
        print("  Composition:")
        for share in data["composition"]:
            print(f"    {share['category']:<20}{_dollar(share['net_book_value']):>16}  {_pct(share['share']):>7}")


PRINTERS = {
    "schedule": print_schedules,
    "rollforward": print_rollforward,
    "disposals": print_disposals,
    "waterfall": print_waterfall,
}


def build_request(args: argparse.Namespace, assets: list[dict]) -> tuple[str, dict]:
    """Endpoint path and JSON body for the requested report."""
    if args.report == "schedule":
        matches = [a for a in assets if a["id"] == args.asset_id]
        if not matches:
            raise SystemExit(f"Error: asset {args.asset_id!r} not found in file")
        return "/api/v1/schedules", {"asset": matches[0]}

    if not (args.start and args.end):
        raise SystemExit("Error: --start and --end are required for period reports")
    payload: dict = {"assets": assets, "period": {"start": args.start, "end": args.end}}
    if args.category:
        payload["filter"] = {"category": args.category}
    return f"/api/v1/reports/{args.report}", payload


# ── Main ─────────────────────────────────────────────────────────────────────

async def main() -> None:
    parser = argparse.ArgumentParser(
        description="Print fixed asset reports via the depreciation API"
    )
    parser.add_argument("assets_file", type=Path, help="JSON file with a list of asset records")
    parser.add_argument("report", choices=sorted(PRINTERS), help="Report to print")
    parser.add_argument("--asset-id", help="Asset to print schedules for")
    parser.add_argument("--start", help="Reporting period start (YYYY-MM-DD)")
    parser.add_argument("--end", help="Reporting period end (YYYY-MM-DD)")
    parser.add_argument("--category", help="Only include this category")
    parser.add_argument(
        "--api-url",
        default="http://localhost:8000",
        help="API base URL (default: http://localhost:8000)",
    )

    args = parser.parse_args()
    assets = json.loads(args.assets_file.read_text())
    path, payload = build_request(args, assets)

    async with httpx.AsyncClient(timeout=30) as client:
        try:
            resp = await client.post(f"{args.api_url}{path}", json=payload)
        except httpx.ConnectError:
            print(f"Error: Could not connect to API at {args.api_url}", file=sys.stderr)
            print("Is the server running? Start with: uvicorn fixed_assets.api.app:app --reload", file=sys.stderr)
            sys.exit(1)

        if resp.status_code != 200:
            print(f"Error: API returned {resp.status_code}", file=sys.stderr)
            try:
                body = resp.json()
                detail = body.get("detail", resp.text)
                context = body.get("context")
            except ValueError:
                detail, context = resp.text, None
            print(f"  {detail}", file=sys.stderr)
            if context:
                print(f"  {context}", file=sys.stderr)
            sys.exit(1)

        data = resp.json()

    PRINTERS[args.report](data)
    print()


if __name__ == "__main__":
    asyncio.run(main())
