"""Events of the train details."""

from dataclasses import dataclass

from station_timetable.domain.models import Train


class TrainDetailsEvent:
    """Events accepted by the train details controller."""

    @dataclass(frozen=True)
    class LoadTrain:
        departure_date: str
        number: int

    @dataclass(frozen=True)
    class ReloadTrain:
        train: Train


AnyTrainDetailsEvent = TrainDetailsEvent.LoadTrain | TrainDetailsEvent.ReloadTrain
