"""Tests for the command-line interface and application wiring."""

import sys
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from station_timetable import cli
from station_timetable.adapters.config import AppConfig
from station_timetable.adapters.repositories import (
    StoreBackedStationRepository,
    StoreBackedTrainRepository,
)
from station_timetable.application.controllers import (
    HomeController,
    StationsController,
    TimetableController,
    TrainDetailsController,
)
from station_timetable.domain.models import TimetableRowType, arrival, departure
from station_timetable.main import Application, create_application
from tests.fakes import (
    FakeNameMapper,
    FakeSettingsRepository,
    FakeStationRepository,
    FakeTrainRepository,
    at,
    make_station,
    make_train,
    row,
)

PASILA = make_station(10, "Pasila asema", "PSL")
TAMPERE = make_station(160, "Tampere asema", "TPE")


def fake_application(config: AppConfig, **repositories: Any) -> Application:
    return Application(
        config=config,
        station_repository=repositories.get("stations", FakeStationRepository([PASILA, TAMPERE])),
        train_repository=repositories.get("trains", FakeTrainRepository()),
        settings_repository=repositories.get("settings", FakeSettingsRepository()),
    )


def mock_session() -> MagicMock:
    session = MagicMock()
    session.__aenter__ = AsyncMock(return_value=MagicMock())
    session.__aexit__ = AsyncMock(return_value=None)
    return session


def test_create_application_wires_controllers(tmp_path: Path) -> None:
    """Given a test config, when wiring the application, then each controller can be created."""
    config = AppConfig.for_testing(settings_file=str(tmp_path / "settings.json"))

    app = create_application(config, MagicMock())

    assert isinstance(app.station_repository, StoreBackedStationRepository)
    assert isinstance(app.train_repository, StoreBackedTrainRepository)
    assert isinstance(app.home_controller(), HomeController)
    assert isinstance(app.stations_controller(), StationsController)
    assert isinstance(app.timetable_controller(), TimetableController)
    assert isinstance(app.train_details_controller(), TrainDetailsController)


def test_format_row() -> None:
    """Given rows in each state, when formatting, then delays and cancellations are shown."""
    on_time = arrival(10, "3", at(12, 5))
    late = arrival(10, "3", at(12, 5), estimated_time=at(12, 9), difference_in_minutes=4)
    cancelled = departure(10, "3", at(12, 6), cancelled=True)

    assert cli._format_row(None).strip() == ""
    assert "(" not in cli._format_row(on_time)
    assert cli._format_row(late).strip().endswith("(+4)")
    assert cli._format_row(cancelled).strip() == "cancelled"


def test_station_name_falls_back_to_code() -> None:
    """Given an unknown station, when naming it, then its code is shown."""
    mapper = FakeNameMapper({10: "Pasila"})

    assert cli._station_name(mapper, 10) == "Pasila"
    assert cli._station_name(mapper, 20) == "20"
    assert cli._station_name(None, 10) == "10"
    assert cli._station_name(mapper, None) == "-"


@pytest.mark.asyncio
async def test_show_timetable_prints_trains(capsys: pytest.CaptureFixture[str]) -> None:
    """Given trains at Pasila, when showing the timetable, then each train is listed."""
    train = make_train(
        27,
        [
            row(TimetableRowType.DEPARTURE, 1, at(23, 0)),
            row(TimetableRowType.ARRIVAL, 10, at(23, 5), track="3"),
            row(TimetableRowType.DEPARTURE, 10, at(23, 6), track="3"),
            row(TimetableRowType.ARRIVAL, 160, at(23, 50)),
        ],
    )
    config = AppConfig.for_testing()
    app = fake_application(
        config,
        stations=FakeStationRepository([PASILA, TAMPERE], FakeNameMapper({10: "Pasila"})),
        trains=FakeTrainRepository([train]),
    )

    with (
        patch.object(cli, "create_session", return_value=mock_session()),
        patch.object(cli, "create_application", return_value=app),
        patch.object(cli, "datetime") as mock_datetime,
    ):
        mock_datetime.now.return_value = at(22, 0)
        await cli.show_timetable(config, 10)

    output = capsys.readouterr().out
    assert "Pasila" in output
    assert "IC 27" in output
    assert "Tampere asema" not in output
    assert "160" in output


@pytest.mark.asyncio
async def test_show_timetable_of_unknown_station_exits(capsys: pytest.CaptureFixture[str]) -> None:
    """Given an unknown station, when showing the timetable, then the error is printed."""
    config = AppConfig.for_testing()

    with (
        patch.object(cli, "create_session", return_value=mock_session()),
        patch.object(cli, "create_application", return_value=fake_application(config)),
        pytest.raises(SystemExit) as exc_info,
    ):
        await cli.show_timetable(config, 999)

    assert exc_info.value.code == 1
    assert "Station 999 not found" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_list_stations_with_search(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a search text, when listing stations, then only matching stations are listed."""
    config = AppConfig.for_testing()

    with (
        patch.object(cli, "create_session", return_value=mock_session()),
        patch.object(cli, "create_application", return_value=fake_application(config)),
    ):
        await cli.list_stations(config, "tamp", None, None)

    output = capsys.readouterr().out
    assert "Tampere asema" in output
    assert "Pasila asema" not in output


@pytest.mark.asyncio
async def test_list_stations_select_stores_station(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a station code, when selecting it, then it is stored as the selected station."""
    config = AppConfig.for_testing()
    settings = FakeSettingsRepository()

    with (
        patch.object(cli, "create_session", return_value=mock_session()),
        patch.object(
            cli, "create_application", return_value=fake_application(config, settings=settings)
        ),
    ):
        await cli.list_stations(config, None, 160, None)

    assert await settings.station() == 160
    assert "Selected Tampere asema" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_show_train_prints_route(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a known train, when showing it, then its stops are listed."""
    train = make_train(
        27,
        [
            row(TimetableRowType.DEPARTURE, 10, at(12, 0), actual_time=at(12, 1)),
            row(TimetableRowType.ARRIVAL, 160, at(13, 30)),
        ],
    )
    config = AppConfig.for_testing()
    app = fake_application(
        config,
        stations=FakeStationRepository([PASILA, TAMPERE], FakeNameMapper({10: "Pasila"})),
        trains=FakeTrainRepository([train]),
    )

    with (
        patch.object(cli, "create_session", return_value=mock_session()),
        patch.object(cli, "create_application", return_value=app),
    ):
        await cli.show_train(config, "2024-05-01", 27)

    output = capsys.readouterr().out
    assert "IC 27 (2024-05-01)" in output
    assert "> Pasila" in output


@pytest.mark.asyncio
async def test_main_without_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    """Given no command, when running the CLI, then usage is printed and it exits."""
    with patch.object(sys, "argv", ["station-timetable"]), pytest.raises(SystemExit):
        await cli.main()

    assert "timetable" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_main_dispatches_timetable_command() -> None:
    """Given the timetable command, when running the CLI, then the timetable is shown."""
    with (
        patch.object(sys, "argv", ["station-timetable", "timetable", "160"]),
        patch.object(cli, "AppConfig", return_value=AppConfig.for_testing()),
        patch.object(cli, "configure_logging"),
        patch.object(cli, "show_timetable", new_callable=AsyncMock) as show_timetable,
    ):
        await cli.main()

    assert show_timetable.await_args.args[1] == 160
