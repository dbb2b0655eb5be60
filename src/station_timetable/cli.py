"""Command-line interface for browsing stations, timetables and trains."""

import argparse
import asyncio
import sys
from datetime import UTC, datetime

from station_timetable.adapters.config import AppConfig
from station_timetable.adapters.location import FixedLocationService
from station_timetable.application.controllers.stations import StationsEvent
from station_timetable.application.controllers.timetable import TimetableEvent
from station_timetable.application.controllers.train_details import TrainDetailsEvent
from station_timetable.domain.models import Station, Stop, TimetableRow, Train
from station_timetable.domain.ports import StationNameMapper
from station_timetable.main import configure_logging, create_application, create_session


def _format_time(time: datetime | None) -> str:
    return time.astimezone().strftime("%H:%M") if time is not None else "--:--"


def _format_row(row: TimetableRow | None) -> str:
    if row is None:
        return " " * 13
    if row.cancelled:
        return "cancelled".ljust(13)
    time = row.actual_time or row.estimated_time
    if time is None or row.difference_in_minutes == 0:
        return f"{_format_time(row.scheduled_time)}".ljust(13)
    return f"{_format_time(row.scheduled_time)} ({row.difference_in_minutes:+d})".ljust(13)


def _station_name(mapper: StationNameMapper | None, station_code: int | None) -> str:
    if station_code is None:
        return "-"
    name = mapper.station_name(station_code) if mapper is not None else None
    return name or str(station_code)


def _train_label(train: Train) -> str:
    return train.commuter_line_id or f"{train.type} {train.number}"


def _print_stations(stations: tuple[Station, ...], recent: tuple[int, ...]) -> None:
    for station in stations:
        marker = "*" if station.code in recent else " "
        print(f"{marker} {station.code:>5}  {station.short_code:<5} {station.name}")


async def list_stations(
    config: AppConfig,
    search: str | None,
    select: int | None,
    near: tuple[float, float] | None,
) -> None:
    location_service = FixedLocationService(*near) if near is not None else None
    async with create_session(config) as session:
        app = create_application(config, session, location_service)
        controller = app.stations_controller()
        await controller.start()
        try:
            controller.offer(StationsEvent.LoadStations())
            if near is not None:
                controller.offer(StationsEvent.SelectNearestStation())
            await controller.idle()
            state = controller.state.value

            if select is not None:
                station = next((s for s in state.stations if s.code == select), None)
                if station is None:
                    print(f"Station {select} not found.", file=sys.stderr)
                    sys.exit(1)
                controller.offer(StationsEvent.StationSelected(station))
                await controller.idle()
                print(f"Selected {station.name}")
                return
        finally:
            await controller.stop()

    if state.error_message and not state.stations:
        print(f"Error: {state.error_message}", file=sys.stderr)
        sys.exit(1)
    if near is not None:
        nearest = state.nearest_station
        print(f"Nearest station: {nearest.name if nearest else '-'}")
        return

    stations = state.stations
    if search:
        stations = tuple(s for s in stations if search.lower() in s.name.lower())
    if not stations:
        print(f"No stations found for '{search}'", file=sys.stderr)
        sys.exit(1)
    _print_stations(stations, state.recent_stations)


async def show_timetable(config: AppConfig, station_code: int) -> None:
    async with create_session(config) as session:
        app = create_application(config, session)
        controller = app.timetable_controller()
        await controller.start()
        try:
            controller.offer(TimetableEvent.LoadTimetable(station_code))
            await controller.idle()
        finally:
            await controller.stop()

    state = controller.state.value
    if state.loading_timetable_failed or state.station is None:
        print(f"Error: {state.error_message}", file=sys.stderr)
        sys.exit(1)

    mapper = state.station_name_mapper
    print(f"\n{_station_name(mapper, state.station.code) if mapper else state.station.name}")
    print("=" * 70)
    entries = state.entries(datetime.now(UTC), config.timetable_cutoff_minutes)
    if not entries:
        print("No trains.")
    for train, stop in entries:
        print(
            f"{_train_label(train):<12} {_format_row(stop.arrival)} {_format_row(stop.departure)} "
            f"{stop.track() or '-':>3}  {_station_name(mapper, train.origin())} - "
            f"{_station_name(mapper, train.destination())}"
        )


def _print_stop(stop: Stop, mapper: StationNameMapper | None, current: Stop | None) -> None:
    marker = ">" if stop == current else " "
    print(
        f"{marker} {_station_name(mapper, stop.station_code()):<24} "
        f"{_format_row(stop.arrival)} {_format_row(stop.departure)} {stop.track() or '-':>3}"
    )


async def show_train(config: AppConfig, departure_date: str, number: int) -> None:
    async with create_session(config) as session:
        app = create_application(config, session)
        controller = app.train_details_controller()
        await controller.start()
        try:
            controller.offer(TrainDetailsEvent.LoadTrain(departure_date, number))
            await controller.idle()
        finally:
            await controller.stop()

    state = controller.state.value
    if state.train is None:
        print(f"Error: {state.error_message}", file=sys.stderr)
        sys.exit(1)

    train = state.train
    print(f"\n{_train_label(train)} ({train.departure_date_string})")
    print("=" * 70)
    current = state.current_stop()
    for stop in state.route():
        _print_stop(stop, state.name_mapper, current)
    causes = state.delay_cause_names(config.locale)
    if causes:
        print("\nDelay causes:")
        for cause in causes:
            print(f"  {cause}")


async def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Railway station timetables from the Digitraffic API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  station-timetable stations --search tampere
  station-timetable stations --select 160
  station-timetable timetable 1
  station-timetable train 2024-05-01 27
""",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    stations_parser = subparsers.add_parser("stations", help="List stations")
    stations_parser.add_argument("--search", help="Only list stations whose name contains this")
    stations_parser.add_argument("--select", type=int, help="Select the station with this code")
    stations_parser.add_argument(
        "--near",
        type=float,
        nargs=2,
        metavar=("LATITUDE", "LONGITUDE"),
        help="Show the station nearest to the location",
    )

    timetable_parser = subparsers.add_parser("timetable", help="Show a station timetable")
    timetable_parser.add_argument("station_code", type=int, help="Station UIC code")

    train_parser = subparsers.add_parser("train", help="Show the details of a train")
    train_parser.add_argument("departure_date", help="Departure date (YYYY-MM-DD)")
    train_parser.add_argument("number", type=int, help="Train number")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = AppConfig()
    configure_logging(config.log_level)

    try:
        if args.command == "stations":
            near = tuple(args.near) if args.near else None
            await list_stations(config, args.search, args.select, near)  # type: ignore[arg-type]
        elif args.command == "timetable":
            await show_timetable(config, args.station_code)
        elif args.command == "train":
            await show_train(config, args.departure_date, args.number)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
