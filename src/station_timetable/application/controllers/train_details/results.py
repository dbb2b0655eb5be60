"""Results of train details operations."""

from dataclasses import dataclass

from station_timetable.domain.models import CauseCategories, Train
from station_timetable.domain.ports import StationNameMapper


class LoadTrainDetails:
    @dataclass(frozen=True)
    class Loading:
        pass

    @dataclass(frozen=True)
    class Success:
        train: Train

    @dataclass(frozen=True)
    class Error:
        message: str | None


class ReloadTrainDetails:
    @dataclass(frozen=True)
    class Loading:
        pass

    @dataclass(frozen=True)
    class Success:
        train: Train

    @dataclass(frozen=True)
    class Error:
        message: str | None


class LoadNameMapper:
    @dataclass(frozen=True)
    class Loading:
        pass

    @dataclass(frozen=True)
    class Success:
        mapper: StationNameMapper

    @dataclass(frozen=True)
    class Error:
        message: str | None


class LoadCauseCategories:
    @dataclass(frozen=True)
    class Loading:
        pass

    @dataclass(frozen=True)
    class Success:
        categories: CauseCategories

    @dataclass(frozen=True)
    class Error:
        message: str | None


TrainDetailsResult = (
    LoadTrainDetails.Loading
    | LoadTrainDetails.Success
    | LoadTrainDetails.Error
    | ReloadTrainDetails.Loading
    | ReloadTrainDetails.Success
    | ReloadTrainDetails.Error
    | LoadNameMapper.Loading
    | LoadNameMapper.Success
    | LoadNameMapper.Error
    | LoadCauseCategories.Loading
    | LoadCauseCategories.Success
    | LoadCauseCategories.Error
)
