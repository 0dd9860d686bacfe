from pydantic import BaseModel, ConfigDict, Field


class SessionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int = Field(ge=1)
    y: int = Field(ge=1)
    z: int = Field(ge=1)
    names: tuple[str, str, str]

    @property
    def first(self) -> str:
        return self.names[0]

    @property
    def second(self) -> str:
        return self.names[1]

    @property
    def third(self) -> str:
        return self.names[2]
