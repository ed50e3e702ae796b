from pydantic import BaseModel, ConfigDict, Field


class ScenarioCount(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    scenario_id: str = Field(alias="scenarioId")
    count: int


class TopScenariosResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    date: str
    total_selections: int = Field(alias="totalSelections")
    top_scenarios: list[ScenarioCount] = Field(alias="topScenarios")


class DailyStatsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    daily_stats: dict[str, int] = Field(alias="dailyStats")
