"""Wire models for the Digitraffic railway API.

Field aliases follow the JSON field names of the API. Unknown fields are ignored.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NetworkEntity(BaseModel):
    """Base model for API payloads."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class StationNetworkEntity(NetworkEntity):
    passenger_traffic: bool = Field(alias="passengerTraffic")
    type: str
    name: str = Field(alias="stationName")
    short_code: str = Field(alias="stationShortCode")
    code: int = Field(alias="stationUICCode")
    country_code: str = Field(alias="countryCode")
    longitude: float
    latitude: float


class CauseNetworkEntity(NetworkEntity):
    category_id: int = Field(alias="categoryCodeId")
    detailed_category_id: int | None = Field(default=None, alias="detailedCategoryCodeId")
    third_category_id: int | None = Field(default=None, alias="thirdCategoryCodeId")


class TrainReadyNetworkEntity(NetworkEntity):
    timestamp: datetime
    source: str | None = None
    accepted: bool | None = None


class TimetableRowNetworkEntity(NetworkEntity):
    type: str
    station_code: int = Field(alias="stationUICCode")
    station_short_code: str | None = Field(default=None, alias="stationShortCode")
    train_stopping: bool = Field(default=True, alias="trainStopping")
    commercial_stop: bool | None = Field(default=None, alias="commercialStop")
    track: str | None = Field(default=None, alias="commercialTrack")
    cancelled: bool = False
    scheduled_time: datetime = Field(alias="scheduledTime")
    estimated_time: datetime | None = Field(default=None, alias="liveEstimateTime")
    actual_time: datetime | None = Field(default=None, alias="actualTime")
    difference_in_minutes: int | None = Field(default=None, alias="differenceInMinutes")
    train_ready: TrainReadyNetworkEntity | None = Field(default=None, alias="trainReady")
    causes: list[CauseNetworkEntity] = Field(default_factory=list)


class TrainNetworkEntity(NetworkEntity):
    number: int = Field(alias="trainNumber")
    departure_date: str = Field(alias="departureDate")
    type: str = Field(alias="trainType")
    category: str = Field(alias="trainCategory")
    commuter_line_id: str | None = Field(default=None, alias="commuterLineID")
    running_currently: bool = Field(default=False, alias="runningCurrently")
    cancelled: bool = False
    version: int = 0
    timetable: list[TimetableRowNetworkEntity] = Field(
        default_factory=list, alias="timeTableRows"
    )


class PassengerTermNetworkEntity(NetworkEntity):
    fi: str
    sv: str
    en: str


class CauseCategoryNetworkEntity(NetworkEntity):
    id: int
    code: str = Field(alias="categoryCode")
    name: str = Field(alias="categoryName")
    valid_from: str | None = Field(default=None, alias="validFrom")
    valid_to: str | None = Field(default=None, alias="validTo")
    passenger_term: PassengerTermNetworkEntity | None = Field(default=None, alias="passengerTerm")


class DetailedCauseCategoryNetworkEntity(NetworkEntity):
    id: int
    code: str = Field(alias="detailedCategoryCode")
    name: str = Field(alias="detailedCategoryName")
    valid_from: str | None = Field(default=None, alias="validFrom")
    valid_to: str | None = Field(default=None, alias="validTo")
    passenger_term: PassengerTermNetworkEntity | None = Field(default=None, alias="passengerTerm")


class ThirdLevelCauseCategoryNetworkEntity(NetworkEntity):
    id: int
    code: str = Field(alias="thirdCategoryCode")
    name: str = Field(alias="thirdCategoryName")
    valid_from: str | None = Field(default=None, alias="validFrom")
    valid_to: str | None = Field(default=None, alias="validTo")
    passenger_term: PassengerTermNetworkEntity | None = Field(default=None, alias="passengerTerm")


AnyCauseCategoryNetworkEntity = (
    CauseCategoryNetworkEntity
    | DetailedCauseCategoryNetworkEntity
    | ThirdLevelCauseCategoryNetworkEntity
)
