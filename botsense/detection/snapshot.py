"""Environment Snapshot Model"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Snapshot(BaseModel):
    """Immutable record of the client environment attributes used for detection.

    Gathered by the hosting page or runtime and handed to the engine as a value;
    detectors never reach for global browser state.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    automation_flag: bool = False  # navigator.webdriver
    user_agent: str = ""
    language_count: int = Field(default=1, ge=0)  # navigator.languages.length
    eval_source_length: int = Field(default=0, ge=0)  # eval.toString().length, 0 = not measured
    root_attribute_names: tuple[str, ...] = ()  # document.documentElement attributes

    @field_validator("root_attribute_names", mode="before")
    @classmethod
    def _normalize_attribute_names(cls, value):
        """Accept a name or a list of names and store them lower-cased"""
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            raise ValueError("root_attribute_names must be a string or a list of strings")
        if not all(isinstance(name, str) for name in value):
            raise ValueError("root_attribute_names entries must be strings")
        return tuple(name.strip().lower() for name in value if name.strip())
