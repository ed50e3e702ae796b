from typing import Annotated, Union

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

# Scenario ids arrive as strings or bare numbers depending on the frontend build
ScenarioId = Union[Annotated[str, StringConstraints(max_length=100)], int]


def _scenario_cell(value: ScenarioId) -> str:
    # falsy ids (0, false, "") stay empty so aggregation skips them
    return str(value) if value else ""


class ChoiceEvent(BaseModel):
    """One scenario choice as posted by the tracking frontend.

    Field aliases are the wire names; unknown fields are rejected. Length
    caps match the scenario_choices columns.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    timestamp: Union[str, int, float]
    date: str = Field(max_length=64)
    session_id: str = Field(alias="sessionId", max_length=100)
    round: Union[int, str]
    option_a_id: ScenarioId = Field(alias="optionA_id")
    option_a_text: str = Field(alias="optionA_textDE")
    option_b_id: ScenarioId = Field(alias="optionB_id")
    option_b_text: str = Field(alias="optionB_textDE")
    chosen: str = Field(max_length=50)
    chosen_scenario_id: ScenarioId = Field(alias="chosenScenarioId")
    language: str = Field(max_length=16)

    def to_cells(self) -> list:
        """Cells in sheet column order (Timestamp .. Language)."""
        return [
            self.timestamp,
            self.date,
            self.session_id,
            self.round,
            str(self.option_a_id),
            self.option_a_text,
            str(self.option_b_id),
            self.option_b_text,
            self.chosen,
            _scenario_cell(self.chosen_scenario_id),
            self.language,
        ]


class IngestResponse(BaseModel):
    success: bool = True


class StatusResponse(BaseModel):
    status: str = "ok"
    message: str
