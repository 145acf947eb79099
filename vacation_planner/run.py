# vacation_planner/run.py

import argparse
import datetime
import sys

import uvicorn
from rich import print

from vacation_planner import config
from vacation_planner.core.errors import PlannerError
from vacation_planner.core.models import VacationRequest
from vacation_planner.itinerary import plan
from vacation_planner.log import setup_logging
from vacation_planner.services.packing import PackingStore


def main(argv=None):
    p = argparse.ArgumentParser(description="Weather, country facts and a packing list for a trip.")
    p.add_argument("--city")
    p.add_argument("--start")                   # YYYY-MM-DD
    p.add_argument("--end")                     # YYYY-MM-DD
    p.add_argument("--activity", default="sightseeing")
    p.add_argument("--vacation", default="city")
    p.add_argument("--serve", action="store_true", help="run the web app instead")
    p.add_argument("--init-db", action="store_true", help="create and seed the packing tables")
    args = p.parse_args(argv)

    setup_logging(config.LOG_LEVEL)

    if args.serve:
        uvicorn.run("vacation_planner.main:app", host="0.0.0.0", port=config.PORT)
        return 0

    req = None
    if not args.init_db:
        if not (args.city and args.start and args.end):
            p.error("--city, --start and --end are required")
        try:
            req = VacationRequest(
                city=args.city,
                start_date=datetime.date.fromisoformat(args.start),
                end_date=datetime.date.fromisoformat(args.end),
                activity_type=args.activity,
                vacation_type=args.vacation,
            )
        except ValueError as e:
            p.error(f"bad date: {e}")

    try:
        with PackingStore.connect(config.DATABASE_URL) as store:
            if args.init_db:
                store.init_schema(seed=True)
                print("[green]Packing tables ready.[/]")
                return 0

            print("[cyan]→ Planning…[/]")
            itin = plan(req, store)
    except PlannerError as e:
        print(f"[bold red]Error:[/] {e}")
        return 1

    c = itin.country_data
    print(f"\n[bold green]{itin.city}, {itin.country}[/]")
    for d in itin.weather:
        rain = f" ({d.precip_type})" if d.precip_type else ""
        print(f"[yellow]{d.date}[/]  {d.temperature_avg}°  {d.summary}{rain}")

    print(f"\nCapital    : {c.capital}")
    print(f"Population : {c.population:,}")
    print(f"Borders    : {', '.join(c.borders) or '-'}")
    print(f"Languages  : {', '.join(c.languages)}")
    print(f"Currencies : {itin.currency}")

    print("\n[bold]To pack:[/]")
    for item in itin.items or ["[dim]nothing suggested[/]"]:
        print(f"  - {item}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
