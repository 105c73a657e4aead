"""
Demo script: walk through the bucket list planner in the console.

Usage:
    python demo_planner.py [year]

Walks you through:
  1. Load (or seed) the saved bucket list
  2. Show the dashboard numbers and the savings projection
  3. Build a year and optionally accept the suggestions
  4. Print the exportable plan
"""

import sys
from datetime import date

# Ensure UTF-8 output on Windows
sys.stdout.reconfigure(encoding="utf-8")

from travel_bucket_list.config import initialize_config
from travel_bucket_list.data.storage import JsonFileStore, PlannerStateStore
from travel_bucket_list.services import aggregation
from travel_bucket_list.services.planner_service import PlannerService
from travel_bucket_list.utils.helpers import format_price, month_label
from travel_bucket_list.utils.logging import setup_logging


def load_service() -> PlannerService:
    """Step 1: Load state from the configured data directory."""
    print("=" * 60)
    print("STEP 1: Loading the bucket list")
    print("=" * 60)

    cfg = initialize_config()
    setup_logging(cfg.system.log_level, cfg.system.log_file)
    store = JsonFileStore(cfg.storage.data_dir, cfg.storage.save_retry_attempts)
    service = PlannerService(PlannerStateStore(store), cfg).load()
    print(f"\n{len(service.trips)} trips loaded from {store.data_dir}")
    return service


def show_dashboard(service: PlannerService) -> None:
    """Step 2: Headline numbers."""
    print("\n" + "=" * 60)
    print("STEP 2: Dashboard")
    print("=" * 60)

    totals = aggregation.totals(service.trips)
    stats = aggregation.budget_stats(service.trips)
    print(f"\nTrips: {totals.count}  Nights: {totals.total_nights}")
    print(f"Total budget: {format_price(totals.total_cost)}")
    print(f"Average per night: {format_price(stats.average_per_night)}")
    for status, count in aggregation.by_status(service.trips).items():
        print(f"  {status.value:<9} {count}")

    projection = service.savings_projection()
    print(f"\nSaved {projection.percent:.0f}% of the planned budget")
    if projection.funded_date:
        print(f"Fully funded by {projection.funded_date:%B %Y}")
    else:
        print("Set a monthly saving to see a funded date")


def build_year(service: PlannerService, year: int) -> None:
    """Step 3: Suggest trips for a year."""
    print("\n" + "=" * 60)
    print(f"STEP 3: Build {year}")
    print("=" * 60)

    plan = service.build_year(year)
    print(f"\nLeave used: {plan.used_leave}, free: {max(plan.remaining_leave, 0)}")
    if not plan.recommendations:
        print(f"No suggestions ({plan.reason})")
        return

    for rec in plan.recommendations:
        print(
            f"  {month_label(rec.month):<4} {rec.trip.name} "
            f"({rec.trip.nights}n, score {rec.score:g})"
        )

    answer = input("\nAccept all suggestions? [y/N] ").strip().lower()
    if answer == "y":
        accepted, unlocked = service.accept_recommendations(plan)
        print(f"Accepted {accepted.count} trips, {accepted.total_nights} nights")
        for achievement_id in unlocked:
            print(f"  Unlocked: {achievement_id}")


def main() -> None:
    year = int(sys.argv[1]) if len(sys.argv) > 1 else date.today().year + 1

    service = load_service()
    show_dashboard(service)
    build_year(service, year)

    print("\n" + "=" * 60)
    print("STEP 4: Exported plan")
    print("=" * 60)
    print(service.export_plan())


if __name__ == "__main__":
    main()
