"""Screen controllers built on the event, result and state pipeline."""

from station_timetable.application.controllers.base import Controller
from station_timetable.application.controllers.home import HomeController
from station_timetable.application.controllers.stations import StationsController
from station_timetable.application.controllers.timetable import TimetableController
from station_timetable.application.controllers.train_details import TrainDetailsController

__all__ = [
    "Controller",
    "HomeController",
    "StationsController",
    "TimetableController",
    "TrainDetailsController",
]
