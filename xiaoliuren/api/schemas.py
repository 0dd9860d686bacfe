from pydantic import BaseModel


class ReadingOut(BaseModel):
    x: int
    y: int
    z: int
    names: list[str]
    first: str
    second: str
    third: str


class LabelsOut(BaseModel):
    labels: list[str]


class SimulateOut(BaseModel):
    rounds: int
    min: int
    max: int
    seed: int | None
    counts: list[dict[str, int]]
    p_values: list[float]
